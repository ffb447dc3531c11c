# coding=utf-8
# Distributed under the MIT software license, see the accompanying
# file LICENSE or http://www.opensource.org/licenses/mit-license.php.
from typing import List

from winternitz.crypto.wots_params import WOTSParams


def base_w(value: int, w: int, out_len: int) -> List[int]:
    """
    Big-endian base-w expansion of value, left padded with zeros to out_len digits.

    >>> base_w(0x12, 16, 4)
    [0, 0, 1, 2]
    >>> base_w(10, 3, 3)
    [1, 0, 1]
    >>> base_w(0, 4, 2)
    [0, 0]
    """
    if value < 0:
        raise ValueError('Cannot encode negative value {}'.format(value))

    digits = []
    while value:
        value, digit = divmod(value, w)
        digits.append(digit)

    if len(digits) > out_len:
        raise ValueError('Value needs {} base-{} digits, only {} available'.format(len(digits), w, out_len))

    digits.extend([0] * (out_len - len(digits)))
    digits.reverse()
    return digits


def checksum(digits: List[int], w: int) -> int:
    """
    >>> checksum([0, 15, 3], 16)
    27
    """
    return sum(w - 1 - d for d in digits)


def encode(message: bytes, params: WOTSParams) -> List[int]:
    """
    Message digest digits followed by checksum digits, params.len digits in total.
    The digest is read as a big-endian unsigned integer for every w.
    """
    digest = params.hash_function(message)

    msg_digits = base_w(int.from_bytes(digest, byteorder='big'), params.w, params.len1)
    csum_digits = base_w(checksum(msg_digits, params.w), params.w, params.len2)

    return msg_digits + csum_digits
