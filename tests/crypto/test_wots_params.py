# coding=utf-8
# Distributed under the MIT software license, see the accompanying
# file LICENSE or http://www.opensource.org/licenses/mit-license.php.
from math import ceil, log2
from unittest import TestCase

from winternitz.crypto.exceptions import ConfigurationError
from winternitz.crypto.wots_params import WOTSParams


class TestWOTSParams(TestCase):
    def __init__(self, *args, **kwargs):
        super(TestWOTSParams, self).__init__(*args, **kwargs)

    def test_recommended_values(self):
        # (w, len1, len2)
        expected = [(4, 128, 5),
                    (8, 86, 4),
                    (16, 64, 3)]
        for w, len1, len2 in expected:
            params = WOTSParams(w, 'sha2_256')
            self.assertEqual(len1, params.len1)
            self.assertEqual(len2, params.len2)
            self.assertEqual(len1 + len2, params.len)
            self.assertEqual(w - 1, params.chain_length)
            self.assertEqual(32, params.n)

    def test_boundaries(self):
        params = WOTSParams(2, 'sha2_256')
        self.assertEqual((256, 9, 265), (params.len1, params.len2, params.len))
        self.assertEqual(1, params.chain_length)

        params = WOTSParams(256, 'sha2_256')
        self.assertEqual((32, 2, 34), (params.len1, params.len2, params.len))
        self.assertEqual(255, params.chain_length)

    def test_non_power_of_two(self):
        params = WOTSParams(3, 'sha2_256')
        self.assertEqual(162, params.len1)
        self.assertEqual(6, params.len2)

        params = WOTSParams(10, 'sha2_256')
        self.assertEqual(78, params.len1)
        self.assertEqual(3, params.len2)

    def test_len1_matches_log_formula(self):
        for w in [2, 3, 4, 5, 7, 8, 16, 100, 256]:
            params = WOTSParams(w, 'sha2_256')
            self.assertEqual(ceil(256 / log2(w)), params.len1)

    def test_len2_holds_max_checksum(self):
        for w in range(2, 257):
            params = WOTSParams(w, 'sha2_256')
            self.assertEqual(params.len1 * (w - 1), params.max_checksum)
            self.assertGreater(w ** params.len2, params.max_checksum)
            self.assertLessEqual(w ** (params.len2 - 1), params.max_checksum)

    def test_digest_size_follows_hash_function(self):
        params = WOTSParams(16, 'sha2_512')
        self.assertEqual(64, params.n)
        self.assertEqual(128, params.len1)
        self.assertEqual(3, params.len2)
        self.assertEqual(131 * 64, params.signature_size)
        self.assertEqual(131 * 64, params.public_key_size)

    def test_invalid_w(self):
        for w in [-1, 0, 1, 257, 1024]:
            with self.assertRaises(ConfigurationError):
                WOTSParams(w)

        for w in [None, 4.0, '16', True]:
            with self.assertRaises(ConfigurationError):
                WOTSParams(w)

    def test_invalid_hash_function(self):
        with self.assertRaises(ConfigurationError):
            WOTSParams(16, 'md4')

    def test_equality(self):
        self.assertEqual(WOTSParams(16, 'sha2_256'), WOTSParams(16, 'sha2_256'))
        self.assertNotEqual(WOTSParams(16, 'sha2_256'), WOTSParams(8, 'sha2_256'))
        self.assertNotEqual(WOTSParams(16, 'sha2_256'), WOTSParams(16, 'shake128'))

    def test_describe(self):
        description = WOTSParams(16, 'sha2_256').describe()
        self.assertEqual({'w': 16,
                          'hash_function': 'sha2_256',
                          'n': 32,
                          'len1': 64,
                          'len2': 3,
                          'len': 67,
                          'chain_length': 15,
                          'signature_size': 67 * 32,
                          'public_key_size': 67 * 32}, description)
