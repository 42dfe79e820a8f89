'''
    Settings shared by every overload group: key markers, id base and logging
'''

import os
from dataclasses import dataclass, asdict

from overloadkit.core.exceptions import ConfigurationError

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

@dataclass(frozen=True)
class OverloadConfig:

    start_marker: str = '_'
    separator: str = '$'
    length_marker: str = 'I'
    base_id: int = 1
    log_level: str = 'WARNING'
    colors: bool = True

    def __post_init__(self):

        markers = (self.start_marker, self.separator, self.length_marker)
        for marker in markers:
            if not isinstance(marker, str) or len(marker) != 1 or marker.isdigit():
                raise ConfigurationError(f'Key markers must be single non-digit characters, got {marker!r}')
        if len(set(markers)) != len(markers):
            raise ConfigurationError(f'Key markers must be distinct, got {markers}')
        if not isinstance(self.base_id, int) or self.base_id < 0:
            raise ConfigurationError(f'base_id must be a non-negative integer, got {self.base_id!r}')
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigurationError(f'Unknown log level {self.log_level!r}, expected one of {LOG_LEVELS}')

    @classmethod
    def from_dict(cls, d: dict):
        '''
            Build a configuration from a dictionary, ignoring missing keys

            Args:
                d (dict): Any subset of the dataclass fields

            Returns:
                OverloadConfig: The configuration
        '''
        unknown = set(d) - set(cls.__dataclass_fields__)
        if unknown:
            raise ConfigurationError(f'Unknown configuration keys: {sorted(unknown)}')
        return cls(**d)

    @classmethod
    def from_env(cls, environ=None):
        '''
            Build a configuration from environment variables.

            OVERLOADKIT_LOG_LEVEL sets the log level, NO_COLOR or
            OVERLOADKIT_NO_COLOR (any non-empty value) disables colored tags.
        '''
        environ = os.environ if environ is None else environ
        d = {}
        if environ.get('OVERLOADKIT_LOG_LEVEL'):
            d['log_level'] = environ['OVERLOADKIT_LOG_LEVEL'].upper()
        if environ.get('NO_COLOR') or environ.get('OVERLOADKIT_NO_COLOR'):
            d['colors'] = False
        return cls.from_dict(d)

    def to_dict(self) -> dict:
        return asdict(self)


DEFAULT_CONFIG = OverloadConfig.from_env()
