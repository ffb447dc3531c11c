# coding=utf-8
# Distributed under the MIT software license, see the accompanying
# file LICENSE or http://www.opensource.org/licenses/mit-license.php.
import os
from os.path import expanduser

import yaml

from winternitz import __version__ as version
from winternitz.core.misc import logger

ENV_WINTERNITZ_HOME = 'WINTERNITZ_HOME'


class UserConfig(object):
    __instance = None

    def __init__(self, ignore_check=False):
        if not ignore_check and UserConfig.__instance is not None:
            raise Exception("UserConfig can only be instantiated once")

        UserConfig.__instance = self

        # Default scheme configuration
        self.wots_w = 16  # Winternitz parameter used when none is given
        self.hash_function = 'sha2_256'

        self.log_level = 'INFO'

        self._winternitz_dir = expanduser(os.environ.get(ENV_WINTERNITZ_HOME,
                                                         os.path.join("~", ".winternitz")))

        # WARNING! loading should be the last line.. any new setting after this will not be updated by the config file
        self.load_yaml(self.config_path)
        # WARNING! loading should be the last line.. any new setting after this will not be updated by the config file

    @property
    def winternitz_dir(self):
        return self._winternitz_dir

    @winternitz_dir.setter
    def winternitz_dir(self, new_dir):
        self._winternitz_dir = new_dir
        self.load_yaml(self.config_path)

    @property
    def config_path(self):
        return expanduser(os.path.join(self.winternitz_dir, "config.yml"))

    @property
    def log_path(self):
        return expanduser(os.path.join(self.winternitz_dir, "winternitz.log"))

    @staticmethod
    def getInstance():
        if UserConfig.__instance is None:
            return UserConfig()
        return UserConfig.__instance

    def load_yaml(self, file_path):
        """
        Overrides default configuration using a yaml file
        :param file_path: The path to the configuration file
        """
        if os.path.isfile(file_path):
            with open(file_path) as f:
                dataMap = yaml.safe_load(f)
                if dataMap is None:
                    return
                if not isinstance(dataMap, dict):
                    logger.warning('Ignoring %s, expected a mapping of settings', file_path)
                    return
                for key, value in dataMap.items():
                    if not isinstance(key, str) or key.startswith('_') or not hasattr(self, key):
                        logger.warning('Ignoring unknown configuration key %s in %s', key, file_path)
                        continue
                    setattr(self, key, value)


class DevConfig(object):
    __instance = None

    def __init__(self, ignore_check=False, ignore_singleton=False):
        super(DevConfig, self).__init__()
        if not ignore_check and DevConfig.__instance is not None:
            raise Exception("DevConfig can only be instantiated once")

        if not ignore_singleton:
            DevConfig.__instance = self

        self.version = version + ' python'

        ################################################################
        # Warning: Don't change following configuration.               #
        #          Signer and verifier must agree on these values      #
        ################################################################

        # ======================================
        #      WINTERNITZ PARAMETER BOUNDS
        # ======================================
        self.min_w = 2
        self.max_w = 256
        self.recommended_w = [4, 8, 16]

        # ======================================
        #            SEED SETTINGS
        # ======================================
        self.master_seed_size = 48  # 384 bits, 1.5X the DRBG security strength
        self.min_master_seed_size = 32

    @staticmethod
    def getInstance():
        if DevConfig.__instance is None:
            return DevConfig()
        return DevConfig.__instance


dev = DevConfig.getInstance()
user = UserConfig.getInstance()
