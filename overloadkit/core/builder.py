'''
    Configuration phase of an overload group
'''

from types import MappingProxyType

from overloadkit.core.dispatcher import Dispatcher
from overloadkit.core.encoder import SignatureEncoder
from overloadkit.core.exceptions import ConfigurationError, type_name
from overloadkit.core.markers import resolve_definition
from overloadkit.core.registry import TypeRegistry, classify_value, describe_type
from overloadkit.utils.config import DEFAULT_CONFIG
from overloadkit.utils.logger import get_logger

logger = get_logger(__name__)

class OverloadGroup:
    '''
        Collects the definitions of one overloaded function.

        A group is built with repeated add()/define() calls and closed with
        finalize(), which freezes the type registry and hands read-only
        copies of both tables to the returned Dispatcher. Definitions without
        a Variadic marker go to the exact table, the others to the generic
        table. Registering the same key twice keeps the last handler.
    '''

    def __init__(self, config=None, classify=classify_value, describe=describe_type, name: str = None):

        self._config = config or DEFAULT_CONFIG
        self._classify = classify
        self._describe = describe
        self._name = name

        self._registry = TypeRegistry(self._config.base_id)
        self._encoder = SignatureEncoder(self._config)
        self._exact_table = {}
        self._generic_table = {}
        self._max_fixed_arity = 0
        self._dispatcher = None

    def _label(self) -> str:
        return f'overload group {self._name}' if self._name else 'overload group'

    @property
    def registry(self) -> TypeRegistry:
        return self._registry

    @property
    def encoder(self) -> SignatureEncoder:
        return self._encoder

    @property
    def max_fixed_arity(self) -> int:
        return self._max_fixed_arity

    @property
    def finalized(self) -> bool:
        return self._dispatcher is not None

    def add(self, params, handler):
        '''
            Register one definition

            Args:
                params (sequence): Type descriptors, optionally Variadic markers
                handler (callable): The function invoked on a match

            Returns:
                str: The key the handler was stored under
        '''
        if self.finalized:
            raise ConfigurationError(f'{self._label()} is already finalized')
        if not callable(handler):
            raise ConfigurationError(f'The last item of a definition must be callable, got {handler!r}')

        signature, is_generic = resolve_definition(params, self._describe)
        ids = [self._registry.intern(identity) for identity in signature]

        if is_generic:
            key = self._encoder.encode_generic(ids)
            table = self._generic_table
        else:
            key = self._encoder.encode_exact(ids)
            table = self._exact_table
            self._max_fixed_arity = max(self._max_fixed_arity, len(ids))

        if key in table:
            logger.debug(f'Overwriting overload {key} with {getattr(handler, "__qualname__", handler)}')
        table[key] = handler
        logger.debug(f'Registered {"generic" if is_generic else "exact"} overload '
                     f'({", ".join(type_name(identity) for identity in signature)}) as {key}')
        return key

    def define(self, *options):
        '''
            Register one definition given as (descriptor, ..., handler)
        '''
        if not options:
            raise ConfigurationError('A definition needs at least a handler')
        *params, handler = options
        return self.add(params, handler)

    def finalize(self) -> Dispatcher:

        if self._dispatcher is not None:
            return self._dispatcher

        self._registry.freeze()
        self._dispatcher = Dispatcher(
            self._registry,
            self._encoder,
            MappingProxyType(dict(self._exact_table)),
            MappingProxyType(dict(self._generic_table)),
            self._max_fixed_arity,
            self._classify,
            self._describe,
            self._name,
        )
        logger.info(f'Finalized {self._label()}: {len(self._exact_table)} exact, '
                    f'{len(self._generic_table)} generic, max arity {self._max_fixed_arity}')
        return self._dispatcher
