# coding=utf-8
# Distributed under the MIT software license, see the accompanying
# file LICENSE or http://www.opensource.org/licenses/mit-license.php.
import os

from winternitz.core import config
from winternitz.crypto.exceptions import RandomnessUnavailableError


class RNG(object):

    @staticmethod
    def random_bytes(n: int) -> bytes:
        try:
            data = os.urandom(n)
        except (OSError, NotImplementedError) as e:
            raise RandomnessUnavailableError('Secure randomness source failed: {}'.format(e)) from e

        if len(data) != n:
            raise RandomnessUnavailableError('Randomness source returned {} bytes, expected {}'.format(len(data), n))

        return data

    @staticmethod
    def seed(n: int = None) -> bytes:
        if n is None:
            n = config.dev.master_seed_size
        return RNG.random_bytes(n)
