# coding=utf-8
# Distributed under the MIT software license, see the accompanying
# file LICENSE or http://www.opensource.org/licenses/mit-license.php.
import hashlib
from binascii import hexlify, unhexlify
from typing import Callable, Union

from winternitz.crypto.exceptions import ConfigurationError


class HashFunction(object):
    """
    Hash primitive H: bytes -> digest of a fixed size.

    >>> h = HashFunction('sha2_256', 32, lambda data: hashlib.sha256(data).digest())
    >>> bin2hstr(h(b"test"))
    '9f86d081884c7d659a2feaa0c55ad015a3bf4f1b2b0b822cd15d6c15b0f00a08'
    >>> h.digest_size
    32
    """

    def __init__(self, name: str, digest_size: int, fn: Callable[[bytes], bytes]):
        if not isinstance(digest_size, int) or digest_size < 1:
            raise ConfigurationError('Invalid digest size {} for hash function {}'.format(digest_size, name))
        self.name = name
        self.digest_size = digest_size
        self._fn = fn

    def __call__(self, data: bytes) -> bytes:
        digest = bytes(self._fn(data))
        if len(digest) != self.digest_size:
            raise ConfigurationError('Hash function {} returned {} bytes, expected {}'.format(self.name,
                                                                                            len(digest),
                                                                                            self.digest_size))
        return digest

    def __eq__(self, other):
        if not isinstance(other, HashFunction):
            return NotImplemented
        return self.name == other.name and self.digest_size == other.digest_size and self._fn is other._fn

    def __hash__(self):
        return hash((self.name, self.digest_size))

    def __repr__(self):
        return 'HashFunction({}, {})'.format(self.name, self.digest_size)


def _sha2_256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def _sha2_512(data: bytes) -> bytes:
    return hashlib.sha512(data).digest()


def _sha3_256(data: bytes) -> bytes:
    return hashlib.sha3_256(data).digest()


def _shake128(data: bytes) -> bytes:
    return hashlib.shake_128(data).digest(32)


def _shake256(data: bytes) -> bytes:
    return hashlib.shake_256(data).digest(32)


hash_functions = {
    "sha2_256": HashFunction("sha2_256", 32, _sha2_256),
    "sha2_512": HashFunction("sha2_512", 64, _sha2_512),
    "sha3_256": HashFunction("sha3_256", 32, _sha3_256),
    "shake128": HashFunction("shake128", 32, _shake128),
    "shake256": HashFunction("shake256", 32, _shake256),
}


def get_hash_function(hash_function: Union[str, HashFunction]) -> HashFunction:
    """
    >>> get_hash_function('shake128').name
    'shake128'
    >>> h = get_hash_function('sha2_512')
    >>> get_hash_function(h) is h
    True
    """
    if isinstance(hash_function, HashFunction):
        return hash_function

    if hash_function not in hash_functions:
        raise ConfigurationError("Unsupported hash function {!r}, use one of {}".format(
            hash_function, ', '.join(sorted(hash_functions))))

    return hash_functions[hash_function]


def sha256(message: bytes) -> bytes:
    """
    >>> bin2hstr(sha256(b"test"))
    '9f86d081884c7d659a2feaa0c55ad015a3bf4f1b2b0b822cd15d6c15b0f00a08'
    >>> bin2hstr(sha256(b"another string"))
    '81e7826a5821395470e5a2fed0277b6a40c26257512319875e1d70106dcb1ca0'
    """
    return _sha2_256(message)


def sha256_n(message: bytes, count: int) -> bytes:
    """
    Calculate hash n times on the same data

    >>> bin2hstr(sha256_n(b"test", 1))
    '9f86d081884c7d659a2feaa0c55ad015a3bf4f1b2b0b822cd15d6c15b0f00a08'
    >>> bin2hstr(sha256(sha256(b"test")))
    '954d5a49fd70d9b8bcdb35d252267829957f7ef7fa6c74f88419bdc5e82209f4'
    >>> bin2hstr(sha256_n(b"test", 2))
    '954d5a49fd70d9b8bcdb35d252267829957f7ef7fa6c74f88419bdc5e82209f4'
    """
    for _ in range(count):
        message = _sha2_256(message)
    return message


def bin2hstr(data: bytes) -> str:
    return hexlify(bytes(data)).decode()


def hstr2bin(hstr: str) -> bytes:
    return unhexlify(hstr)
