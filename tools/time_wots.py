import time

from winternitz.crypto.WOTS import WOTS


def measure_wots_creation_time(w):
    start_time = time.time()
    wots = WOTS(w)
    keys = wots.generate()
    total_time = time.time() - start_time
    return wots, keys, total_time


def measure_wots_sign_verify_time(wots, keys, message):
    start_time = time.time()
    signature = wots.sign(keys.private_key, message)
    sign_time = time.time() - start_time

    start_time = time.time()
    answer = wots.verify(keys.public_key, message, signature)
    verify_time = time.time() - start_time
    return answer, sign_time, verify_time


if __name__ == '__main__':
    test_cases = [2, 4, 8, 16, 64, 256]

    for tc in test_cases:
        wots, keys, creation_time = measure_wots_creation_time(tc)
        valid, sign_time, verify_time = measure_wots_sign_verify_time(wots, keys, b"timing message")
        print(tc, wots.params.len, creation_time, sign_time, verify_time, valid)
