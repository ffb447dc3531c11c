# coding=utf-8
# Distributed under the MIT software license, see the accompanying
# file LICENSE or http://www.opensource.org/licenses/mit-license.php.
import hashlib
import hmac

from winternitz.core import config
from winternitz.crypto.exceptions import ConfigurationError

# Expands one master seed into the chain seeds of a key pair. Whoever knows the master seed can
# rebuild every chain seed, so it has to be kept as secret as the private key itself.


def GEN_range_bin(seed: bytes, start_i: int, end_i: int, l: int = 32, personalisation_string: bytes = b""):
    """
    returns start -> end iteration of bin PRF (inclusive at both ends)
    """
    if start_i < 1:
        raise ValueError('starting i must be integer greater than 0')
    z = HMAC_DRBG(seed, personalisation_string)
    random_arr = []
    for x in range(1, end_i + 1):
        y = z.generate(l)
        if x >= start_i:
            random_arr.append(y)
    return random_arr


def expand_seed(master_seed: bytes, count: int, l: int, personalisation_string: bytes = b"") -> list:
    if len(master_seed) < config.dev.min_master_seed_size:
        raise ConfigurationError('Master seed must be at least {} bytes, got {}'.format(
            config.dev.min_master_seed_size, len(master_seed)))
    return GEN_range_bin(master_seed, 1, count, l, personalisation_string)


class HMAC_DRBG:
    """
    pseudo random function generator (PRF) utilising hash-based message authentication
    code deterministic random bit generation (HMAC_DRBG)
    k, v = key and value..
    """

    MAX_BITS_PER_REQUEST = 7500
    RESEED_INTERVAL = 80000

    def __init__(self,
                 entropy: bytes,
                 personalisation_string: bytes = b"",
                 security_strength=256):  # entropy should be 1.5X length of strength..384 bits / 48 bytes
        self.security_strength = security_strength
        self.instantiate(entropy, personalisation_string)

    def hmac(self, key, data):
        return hmac.new(key, data, hashlib.sha256).digest()

    def generate(self, num_bytes, requested_security_strength=256):
        if (num_bytes * 8) > self.MAX_BITS_PER_REQUEST:
            raise RuntimeError("generate cannot generate more than 7500 bits in a single call.")

        if requested_security_strength > self.security_strength:
            raise RuntimeError(
                "requested_security_strength exceeds this instance's security_strength (%d)" % self.security_strength)

        if self.reseed_counter > self.RESEED_INTERVAL:
            raise RuntimeError("reseed required after %d requests" % self.RESEED_INTERVAL)

        temp = b""

        while len(temp) < num_bytes:
            self.V = self.hmac(self.K, self.V)
            temp += self.V

        self.update(None)
        self.reseed_counter += 1

        return temp[:num_bytes]

    def instantiate(self, entropy: bytes, personalisation_string: bytes = b""):
        seed_material = entropy + personalisation_string

        self.K = b"\x00" * 32
        self.V = b"\x01" * 32

        self.update(seed_material)
        self.reseed_counter = 1

    def update(self, seed_material=None):
        self.K = self.hmac(self.K, self.V + b"\x00" + (b"" if seed_material is None else seed_material))
        self.V = self.hmac(self.K, self.V)

        if seed_material is not None:
            self.K = self.hmac(self.K, self.V + b"\x01" + seed_material)
            self.V = self.hmac(self.K, self.V)
