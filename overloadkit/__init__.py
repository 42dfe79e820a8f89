from overloadkit.core.api import define
from overloadkit.core.builder import OverloadGroup
from overloadkit.core.dispatcher import Dispatcher
from overloadkit.core.encoder import SignatureEncoder
from overloadkit.core.exceptions import (
    OverloadError,
    ConfigurationError,
    DispatchError,
    NoMatchingOverload,
)
from overloadkit.core.markers import (
    Variadic,
    Placeholder,
    TypedPlaceholder,
    auto_length,
)
from overloadkit.core.registry import (
    PRIMITIVE_TAGS,
    TypeRegistry,
    classify_value,
    describe_type,
)
from overloadkit.utils.config import OverloadConfig, DEFAULT_CONFIG
from overloadkit.utils.logger import configure_logging
from overloadkit.utils.overload import overload, signature

configure_logging(DEFAULT_CONFIG)

__all__ = [
    'define',
    'OverloadGroup',
    'Dispatcher',
    'SignatureEncoder',
    'OverloadError',
    'ConfigurationError',
    'DispatchError',
    'NoMatchingOverload',
    'Variadic',
    'Placeholder',
    'TypedPlaceholder',
    'auto_length',
    'PRIMITIVE_TAGS',
    'TypeRegistry',
    'classify_value',
    'describe_type',
    'OverloadConfig',
    'DEFAULT_CONFIG',
    'configure_logging',
    'overload',
    'signature',
]
