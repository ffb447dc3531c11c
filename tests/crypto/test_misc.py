# coding=utf-8
# Distributed under the MIT software license, see the accompanying
# file LICENSE or http://www.opensource.org/licenses/mit-license.php.
import hashlib
from unittest import TestCase

from winternitz.crypto.exceptions import ConfigurationError
from winternitz.crypto.misc import (HashFunction, bin2hstr, get_hash_function, hash_functions, hstr2bin, sha256,
                                    sha256_n)


class TestMisc(TestCase):
    def __init__(self, *args, **kwargs):
        super(TestMisc, self).__init__(*args, **kwargs)

    def test_sha256(self):
        self.assertEqual('9f86d081884c7d659a2feaa0c55ad015a3bf4f1b2b0b822cd15d6c15b0f00a08',
                         bin2hstr(sha256(b"test")))

    def test_sha256_n(self):
        self.assertEqual(b"test", sha256_n(b"test", 0))
        self.assertEqual(sha256(b"test"), sha256_n(b"test", 1))
        self.assertEqual('954d5a49fd70d9b8bcdb35d252267829957f7ef7fa6c74f88419bdc5e82209f4',
                         bin2hstr(sha256_n(b"test", 2)))

    def test_hex_helpers(self):
        self.assertEqual('00ff10', bin2hstr(b'\x00\xff\x10'))
        self.assertEqual(b'\x00\xff\x10', hstr2bin('00ff10'))

    def test_registry_digest_sizes(self):
        expected = {'sha2_256': 32, 'sha2_512': 64, 'sha3_256': 32, 'shake128': 32, 'shake256': 32}
        for name, size in expected.items():
            h = hash_functions[name]
            self.assertEqual(size, h.digest_size)
            self.assertEqual(size, len(h(b"some data")))

    def test_registry_matches_hashlib(self):
        self.assertEqual(hashlib.sha256(b"abc").digest(), hash_functions['sha2_256'](b"abc"))
        self.assertEqual(hashlib.sha512(b"abc").digest(), hash_functions['sha2_512'](b"abc"))
        self.assertEqual(hashlib.sha3_256(b"abc").digest(), hash_functions['sha3_256'](b"abc"))
        self.assertEqual(hashlib.shake_128(b"abc").digest(32), hash_functions['shake128'](b"abc"))
        self.assertEqual(hashlib.shake_256(b"abc").digest(32), hash_functions['shake256'](b"abc"))

    def test_get_hash_function(self):
        self.assertIs(hash_functions['shake128'], get_hash_function('shake128'))

        custom = HashFunction('md5', 16, lambda data: hashlib.md5(data).digest())
        self.assertIs(custom, get_hash_function(custom))

        with self.assertRaises(ConfigurationError):
            get_hash_function('sha1')

    def test_wrong_digest_size(self):
        broken = HashFunction('broken', 32, lambda data: b'\x00' * 31)
        with self.assertRaises(ConfigurationError):
            broken(b"test")

        with self.assertRaises(ConfigurationError):
            HashFunction('empty', 0, lambda data: b'')
