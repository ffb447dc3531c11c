# coding=utf-8
# Distributed under the MIT software license, see the accompanying
# file LICENSE or http://www.opensource.org/licenses/mit-license.php.
from winternitz.core import config
from winternitz.crypto.exceptions import ConfigurationError
from winternitz.crypto.misc import get_hash_function


def _digits_needed(max_value: int, w: int) -> int:
    # smallest d such that w ** d > max_value
    d = 0
    bound = 1
    while bound <= max_value:
        bound *= w
        d += 1
    return d


class WOTSParams(object):
    """
    Parameter set derived from the Winternitz parameter `w` and the digest size `n`

    >>> p = WOTSParams(16, 'sha2_256')
    >>> p.len1, p.len2, p.len
    (64, 3, 67)
    >>> p = WOTSParams(4, 'sha2_256')
    >>> p.len1, p.len2, p.len
    (128, 5, 133)
    >>> p = WOTSParams(2, 'sha2_256')
    >>> p.len1, p.len2, p.len
    (256, 9, 265)
    """

    def __init__(self, w, hash_function='sha2_256'):
        if isinstance(w, bool) or not isinstance(w, int):
            raise ConfigurationError('Winternitz parameter must be an integer, got {!r}'.format(w))

        if w < config.dev.min_w or w > config.dev.max_w:
            raise ConfigurationError('Winternitz parameter {} outside of supported range [{}, {}]'.format(
                w, config.dev.min_w, config.dev.max_w))

        self._w = w
        self._hash_function = get_hash_function(hash_function)
        self._n = self._hash_function.digest_size

        self._len1 = _digits_needed((1 << (8 * self._n)) - 1, w)
        self._max_checksum = self._len1 * (w - 1)
        self._len2 = max(1, _digits_needed(self._max_checksum, w))

    @property
    def w(self) -> int:
        return self._w

    @property
    def hash_function(self):
        return self._hash_function

    @property
    def n(self) -> int:
        return self._n

    @property
    def len1(self) -> int:
        return self._len1

    @property
    def len2(self) -> int:
        return self._len2

    @property
    def len(self) -> int:
        return self._len1 + self._len2

    @property
    def chain_length(self) -> int:
        return self._w - 1

    @property
    def max_checksum(self) -> int:
        return self._max_checksum

    @property
    def signature_size(self) -> int:
        return self.len * self._n

    @property
    def public_key_size(self) -> int:
        return self.len * self._n

    def describe(self) -> dict:
        return {
            'w': self.w,
            'hash_function': self.hash_function.name,
            'n': self.n,
            'len1': self.len1,
            'len2': self.len2,
            'len': self.len,
            'chain_length': self.chain_length,
            'signature_size': self.signature_size,
            'public_key_size': self.public_key_size,
        }

    def __eq__(self, other):
        if not isinstance(other, WOTSParams):
            return NotImplemented
        return self._w == other._w and self._hash_function == other._hash_function

    def __hash__(self):
        return hash((self._w, self._hash_function))

    def __repr__(self):
        return 'WOTSParams(w={}, hash_function={}, len={})'.format(self.w, self.hash_function.name, self.len)
