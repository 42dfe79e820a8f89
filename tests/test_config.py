import logging
import unittest

from overloadkit.core.exceptions import ConfigurationError, DispatchError
from overloadkit.utils.config import OverloadConfig
from overloadkit.utils.logger import TaggedFormatter, configure_logging, get_logger
from overloadkit.utils.terminal_colors import TerminalColors

class TestOverloadConfig(unittest.TestCase):

    def test_defaults(self):
        config = OverloadConfig()
        self.assertEqual((config.start_marker, config.separator, config.length_marker), ('_', '$', 'I'))
        self.assertEqual(config.base_id, 1)

    def test_from_dict(self):
        config = OverloadConfig.from_dict({'base_id': 5, 'log_level': 'debug'})
        self.assertEqual(config.base_id, 5)
        self.assertEqual(config.to_dict()['log_level'], 'debug')
        with self.assertRaises(ConfigurationError):
            OverloadConfig.from_dict({'nbins': 3})

    def test_invalid_markers(self):
        with self.assertRaises(ConfigurationError):
            OverloadConfig(length_marker='1')
        with self.assertRaises(ConfigurationError):
            OverloadConfig(separator='_')
        with self.assertRaises(ConfigurationError):
            OverloadConfig(start_marker='##')
        with self.assertRaises(ConfigurationError):
            OverloadConfig(base_id=-1)
        with self.assertRaises(ConfigurationError):
            OverloadConfig(log_level='LOUD')

    def test_from_env(self):
        config = OverloadConfig.from_env({'OVERLOADKIT_LOG_LEVEL': 'debug', 'NO_COLOR': '1'})
        self.assertEqual(config.log_level, 'DEBUG')
        self.assertFalse(config.colors)
        self.assertEqual(OverloadConfig.from_env({}), OverloadConfig())


class TestLogging(unittest.TestCase):

    def setUp(self):
        self._enabled = TerminalColors.enabled

    def tearDown(self):
        TerminalColors.enabled = self._enabled

    def test_logger_names(self):
        self.assertEqual(get_logger('overloadkit.core.builder').name, 'overloadkit.core.builder')
        self.assertEqual(get_logger('examples').name, 'overloadkit.examples')

    def test_tagged_formatter(self):
        TerminalColors.enabled = False
        record = logging.LogRecord('overloadkit', logging.INFO, __file__, 1, 'hello', None, None)
        self.assertEqual(TaggedFormatter('%(message)s').format(record), '[INFO]: hello')
        TerminalColors.enabled = True
        self.assertEqual(TaggedFormatter('%(message)s').format(record),
                         TerminalColors.GREEN+'[INFO]: '+TerminalColors.RESET+'hello')

    def test_configure_logging_is_idempotent(self):
        logger = configure_logging(OverloadConfig(log_level='ERROR', colors=self._enabled))
        handlers = len(logger.handlers)
        configure_logging(OverloadConfig(log_level='WARNING', colors=self._enabled))
        self.assertEqual(len(logger.handlers), handlers)
        self.assertEqual(logger.level, logging.WARNING)

    def test_error_prefix(self):
        TerminalColors.enabled = False
        error = DispatchError(['number'], 1)
        self.assertEqual(str(error), '[ERROR]: No matching overload: (number) with 1 argument(s)')

if __name__ == '__main__':
    unittest.main()
