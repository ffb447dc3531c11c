# coding=utf-8
# Distributed under the MIT software license, see the accompanying
# file LICENSE or http://www.opensource.org/licenses/mit-license.php.
from collections import namedtuple

from winternitz.crypto.misc import HashFunction

HashChainBundle = namedtuple('HashChainBundle', 'seed hashchain hc_terminator')


def walk(hash_function: HashFunction, seed: bytes, steps: int, w: int) -> bytes:
    """
    Applies the hash function `steps` times, starting from seed.

    >>> from winternitz.crypto.misc import hash_functions, bin2hstr
    >>> h = hash_functions['sha2_256']
    >>> walk(h, b"test", 0, 16)
    b'test'
    >>> bin2hstr(walk(h, b"test", 2, 16))
    '954d5a49fd70d9b8bcdb35d252267829957f7ef7fa6c74f88419bdc5e82209f4'
    """
    if steps < 0 or steps > w - 1:
        raise ValueError('Chain steps {} outside of [0, {}]'.format(steps, w - 1))

    value = seed
    for _ in range(steps):
        value = hash_function(value)
    return value


def hashchain(hash_function: HashFunction, seed: bytes, w: int) -> HashChainBundle:
    """
    Materialises every position of the chain, hashchain[i] == walk(seed, i)
    """
    hc = [seed]

    for _ in range(w - 1):
        hc.append(hash_function(hc[-1]))

    return HashChainBundle(seed, hc, hc[-1])
