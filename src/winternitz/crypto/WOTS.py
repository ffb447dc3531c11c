# coding=utf-8
# Distributed under the MIT software license, see the accompanying
# file LICENSE or http://www.opensource.org/licenses/mit-license.php.
import hmac
import threading
from collections import namedtuple
from typing import List, Sequence

from winternitz.core import config
from winternitz.core.misc import logger
from winternitz.crypto.encoding import encode
from winternitz.crypto.exceptions import ConfigurationError, KeyReuseError, MalformedSignatureError
from winternitz.crypto.hashchain import walk
from winternitz.crypto.hmac_drbg import expand_seed
from winternitz.crypto.misc import bin2hstr, hstr2bin, sha256
from winternitz.crypto.random_number_generator import RNG
from winternitz.crypto.wots_params import WOTSParams

WOTSKeyPair = namedtuple('WOTSKeyPair', 'private_key public_key')


class _DigestSequence(object):
    def __init__(self, elements: Sequence[bytes]):
        self._elements = tuple(bytes(e) for e in elements)

    @classmethod
    def from_hexstr_list(cls, hexstrs: Sequence[str]):
        return cls([hstr2bin(h) for h in hexstrs])

    @property
    def hexstr(self) -> List[str]:
        return [bin2hstr(e) for e in self._elements]

    def to_bytes(self) -> bytes:
        return b''.join(self._elements)

    def __len__(self):
        return len(self._elements)

    def __getitem__(self, item):
        return self._elements[item]

    def __iter__(self):
        return iter(self._elements)

    def __eq__(self, other):
        if not isinstance(other, _DigestSequence):
            return NotImplemented
        return type(self) is type(other) and self._elements == other._elements

    def __hash__(self):
        return hash(self._elements)

    def __repr__(self):
        return '{}(len={})'.format(type(self).__name__, len(self._elements))


class WOTSPublicKey(_DigestSequence):
    """
    Chain terminators, one per chain. Safe to distribute.
    """

    @property
    def pubhash(self) -> bytes:
        return sha256(self.to_bytes())


class WOTSSignature(_DigestSequence):
    pass


class WOTSPrivateKey(object):
    """
    Single-use handle over the chain seeds.

    The seeds can be taken out exactly once, through consume(). After that the handle
    only answers public_key and used.
    """

    def __init__(self, params: WOTSParams, seeds: Sequence[bytes]):
        if len(seeds) != params.len:
            raise ConfigurationError('Private key has {} seeds, parameters require {}'.format(len(seeds), params.len))

        for seed in seeds:
            if len(seed) != params.n:
                raise ConfigurationError('Private key seed of {} bytes, parameters require {}'.format(len(seed),
                                                                                                    params.n))

        self._params = params
        self._seeds = tuple(bytes(s) for s in seeds)
        self._lock = threading.Lock()
        self._used = False

        self._public_key = WOTSPublicKey(walk(params.hash_function, seed, params.chain_length, params.w)
                                         for seed in self._seeds)

    @property
    def params(self) -> WOTSParams:
        return self._params

    @property
    def public_key(self) -> WOTSPublicKey:
        return self._public_key

    @property
    def used(self) -> bool:
        return self._used

    def consume(self):
        with self._lock:
            if self._used:
                raise KeyReuseError('This WOTS private key has already been used to sign a message')
            self._used = True
            seeds = self._seeds
            self._seeds = None
        return seeds

    def __repr__(self):
        return 'WOTSPrivateKey({}, used={})'.format(self._params, self._used)


class WOTS(object):
    def __init__(self, w: int = None, hash_function=None):
        """
        Winternitz one-time signature scheme for a fixed w and hash function.
        Defaults come from the user configuration.

        >>> wots = WOTS(8)
        >>> keys = wots.generate()
        >>> signature = wots.sign(keys.private_key, b"Hello, quantum-safe world!")
        >>> wots.verify(keys.public_key, b"Hello, quantum-safe world!", signature)
        True
        >>> wots.verify(keys.public_key, b"hello, quantum-safe world!", signature)
        False
        """
        if w is None:
            w = config.user.wots_w
        if hash_function is None:
            hash_function = config.user.hash_function

        self._params = WOTSParams(w, hash_function)

    @property
    def params(self) -> WOTSParams:
        return self._params

    @property
    def w(self) -> int:
        return self._params.w

    def generate(self) -> WOTSKeyPair:
        seeds = [RNG.random_bytes(self._params.n) for _ in range(self._params.len)]
        return self._keypair(seeds)

    def from_seed(self, master_seed: bytes) -> WOTSKeyPair:
        """
        Derives the chain seeds from one master seed with HMAC_DRBG.
        The same master seed and parameters always give the same key pair.
        """
        personalisation = 'wots-{}-{}'.format(self._params.hash_function.name, self._params.w).encode()
        seeds = expand_seed(master_seed, self._params.len, self._params.n, personalisation)
        return self._keypair(seeds)

    def _keypair(self, seeds) -> WOTSKeyPair:
        private_key = WOTSPrivateKey(self._params, seeds)
        logger.debug('New WOTS keypair %s pubhash %s', self._params, bin2hstr(private_key.public_key.pubhash))
        return WOTSKeyPair(private_key, private_key.public_key)

    def sign(self, private_key: WOTSPrivateKey, message: bytes) -> WOTSSignature:
        if private_key.params != self._params:
            raise ConfigurationError('Private key was generated for {}, scheme is configured for {}'.format(
                private_key.params, self._params))

        digits = encode(message, self._params)
        seeds = private_key.consume()

        h = self._params.hash_function
        signature = WOTSSignature(walk(h, seeds[i], digit, self._params.w) for i, digit in enumerate(digits))

        logger.debug('Signed message with WOTS key %s', bin2hstr(private_key.public_key.pubhash))
        return signature

    def verify(self, public_key: Sequence[bytes], message: bytes, signature: Sequence[bytes]) -> bool:
        self._check_public_key(public_key)
        self._check_signature(signature)

        digits = encode(message, self._params)

        h = self._params.hash_function
        valid = True
        for i, digit in enumerate(digits):
            terminator = walk(h, bytes(signature[i]), self._params.chain_length - digit, self._params.w)
            valid = hmac.compare_digest(terminator, bytes(public_key[i])) and valid

        if not valid:
            logger.debug('WOTS signature verification failed')

        return valid

    def _check_public_key(self, public_key):
        if len(public_key) != self._params.len:
            raise ConfigurationError('Public key has {} elements, parameters require {}'.format(len(public_key),
                                                                                              self._params.len))
        for element in public_key:
            if not isinstance(element, (bytes, bytearray)) or len(element) != self._params.n:
                raise ConfigurationError('Public key elements must be {} bytes long'.format(self._params.n))

    def _check_signature(self, signature):
        if len(signature) != self._params.len:
            raise MalformedSignatureError('Signature has {} elements, parameters require {}'.format(
                len(signature), self._params.len))
        for element in signature:
            if not isinstance(element, (bytes, bytearray)) or len(element) != self._params.n:
                raise MalformedSignatureError('Signature elements must be {} bytes long'.format(self._params.n))
