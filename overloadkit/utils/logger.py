'''
    Logging helpers. Records are printed with the same colored tags used in
    error messages, e.g. '[INFO]: Finalized overload group ...'
'''

import logging

from overloadkit.utils.terminal_colors import TerminalColors as tc

ROOT_LOGGER_NAME = 'overloadkit'

LEVEL_TAGS = {
    logging.DEBUG: (tc.CYAN, 'DEBUG'),
    logging.INFO: (tc.GREEN, 'INFO'),
    logging.WARNING: (tc.YELLOW, 'WARNING'),
    logging.ERROR: (tc.RED, 'ERROR'),
    logging.CRITICAL: (tc.RED, 'CRITICAL'),
}

class TaggedFormatter(logging.Formatter):

    def format(self, record: logging.LogRecord) -> str:
        color, label = LEVEL_TAGS.get(record.levelno, (tc.RESET, record.levelname))
        return tc.tag(color, label) + super().format(record)


def configure_logging(config) -> logging.Logger:
    '''
        Attach the tagged handler to the package logger (only once) and apply
        the level and color settings of the configuration

        Args:
            config (OverloadConfig): The configuration to apply

        Returns:
            logging.Logger: The package logger
    '''
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not any(getattr(handler, '_overloadkit', False) for handler in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(TaggedFormatter('%(message)s'))
        handler._overloadkit = True
        root.addHandler(handler)
        root.propagate = False
    root.setLevel(config.log_level.upper())
    tc.enabled = config.colors
    return root


def get_logger(name: str) -> logging.Logger:
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + '.'):
        return logging.getLogger(name)
    return logging.getLogger(f'{ROOT_LOGGER_NAME}.{name}')
