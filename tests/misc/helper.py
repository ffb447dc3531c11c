# coding=utf-8
# Distributed under the MIT software license, see the accompanying
# file LICENSE or http://www.opensource.org/licenses/mit-license.php.
import contextlib
import os
import shutil
import tempfile

from winternitz.core import config

# 48 bytes, fixed so that derived key pairs are reproducible across runs
TEST_MASTER_SEED = bytes(range(48))


@contextlib.contextmanager
def set_user_config(**kwargs):
    old_values = {k: getattr(config.user, k) for k in kwargs}
    try:
        for k, v in kwargs.items():
            setattr(config.user, k, v)
        yield
    finally:
        for k, v in old_values.items():
            setattr(config.user, k, v)


@contextlib.contextmanager
def set_winternitz_dir(config_yml: str = None):
    dst_dir = tempfile.mkdtemp()
    prev_values = dict(config.user.__dict__)
    try:
        if config_yml is not None:
            with open(os.path.join(dst_dir, 'config.yml'), 'w') as f:
                f.write(config_yml)
        config.user.winternitz_dir = dst_dir
        yield dst_dir
    finally:
        config.user.__dict__.clear()
        config.user.__dict__.update(prev_values)
        shutil.rmtree(dst_dir)
