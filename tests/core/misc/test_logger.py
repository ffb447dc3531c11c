# coding=utf-8
# Distributed under the MIT software license, see the accompanying
# file LICENSE or http://www.opensource.org/licenses/mit-license.php.
import logging
import os
import shutil
import sys
import tempfile
from unittest import TestCase

from colorlog import ColoredFormatter

from winternitz.core.misc import logger


class TestLogger(TestCase):
    def __init__(self, *args, **kwargs):
        super(TestLogger, self).__init__(*args, **kwargs)

    def setUp(self):
        self.prev_handlers = list(logger.logger.handlers)
        self.prev_level = logger.logger.level
        self.prev_excepthook = sys.excepthook
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):
        for handler in list(logger.logger.handlers):
            if handler not in self.prev_handlers:
                logger.logger.removeHandler(handler)
                handler.close()
        logger.logger.setLevel(self.prev_level)
        sys.excepthook = self.prev_excepthook
        shutil.rmtree(self.temp_dir)

    def test_initialize_default(self):
        handler = logger.initialize_default(force_console_output=True, log_level=logging.INFO)
        self.assertIn(handler, logger.logger.handlers)
        self.assertEqual(logging.INFO, logger.logger.level)
        self.assertEqual(logger._unhandled_exception, sys.excepthook)

    def test_initialize_default_twice(self):
        handler = logger.initialize_default(force_console_output=True)
        handler_count = len(logger.logger.handlers)

        self.assertIs(handler, logger.initialize_default(force_console_output=True))
        self.assertEqual(handler_count, len(logger.logger.handlers))

    def test_log_to_file_twice(self):
        filename = os.path.join(self.temp_dir, 'winternitz.log')
        handler = logger.log_to_file(filename)
        handler_count = len(logger.logger.handlers)

        self.assertIs(handler, logger.log_to_file(filename))
        self.assertEqual(handler_count, len(logger.logger.handlers))

    def test_log_to_file(self):
        filename = os.path.join(self.temp_dir, 'logs', 'winternitz.log')
        logger.logger.setLevel(logging.DEBUG)
        handler = logger.log_to_file(filename)
        logger.info('key pair generated %s', 'abcd')
        handler.flush()

        with open(filename) as f:
            self.assertIn('key pair generated abcd', f.read())

    def test_set_colors(self):
        handler = logger.initialize_default(force_console_output=True)
        logger.set_colors(True, logger.LOG_FORMAT_SMALL)
        self.assertIsInstance(handler.formatter, ColoredFormatter)

        logger.set_colors(False, logger.LOG_FORMAT_SMALL)
        self.assertNotIsInstance(handler.formatter, ColoredFormatter)

    def test_exception(self):
        logger.logger.setLevel(logging.DEBUG)
        with self.assertLogs(logger.LOG_NAME, level='ERROR') as cm:
            try:
                raise ValueError('broken chain')
            except ValueError as e:
                logger.exception(e)
        self.assertIn('broken chain', cm.output[0])
