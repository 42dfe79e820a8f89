'''
    The finalized, read-only side of an overload group
'''

from overloadkit.core.exceptions import DispatchError, type_name
from overloadkit.core.markers import resolve_call
from overloadkit.utils.logger import get_logger

logger = get_logger(__name__)

class Dispatcher:
    '''
        Callable selecting one handler from the runtime types of its
        positional arguments. Keyword arguments are forwarded untouched.

        Calls with at most max_fixed_arity arguments try the exact table
        first and fall back to the generic table; longer calls go to the
        generic table directly. At most one handler runs per call.
    '''

    def __init__(self, registry, encoder, exact_table, generic_table, max_fixed_arity: int,
                 classify, describe, name: str = None):

        self._registry = registry
        self._encoder = encoder
        self._exact_table = exact_table
        self._generic_table = generic_table
        self._max_fixed_arity = max_fixed_arity
        self._classify = classify
        self._describe = describe
        self._name = name

    @property
    def exact_table(self):
        return self._exact_table

    @property
    def generic_table(self):
        return self._generic_table

    @property
    def max_fixed_arity(self) -> int:
        return self._max_fixed_arity

    @property
    def name(self):
        return self._name

    def _select(self, signature, arity: int):

        ids = [self._registry.lookup(identity) for identity in signature]
        if None in ids:
            # a type never seen while defining cannot be part of any key
            return None

        if arity <= self._max_fixed_arity:
            exact_key = self._encoder.encode_exact(ids)
            handler = self._exact_table.get(exact_key)
            if handler is not None:
                return handler
            return self._generic_table.get(self._encoder.strip_run_lengths(exact_key))

        return self._generic_table.get(self._encoder.encode_generic(ids))

    def resolve(self, *args):
        '''
            Return the handler a call with these arguments would invoke,
            without invoking it

            Raises:
                DispatchError: If no overload matches
        '''
        signature, _ = resolve_call(args, self._classify, self._describe)
        handler = self._select(signature, len(args))
        if handler is None:
            raise DispatchError(signature, len(args), self._name)
        return handler

    def __call__(self, *args, **kwargs):

        signature, substituted = resolve_call(args, self._classify, self._describe)
        handler = self._select(signature, len(args))
        if handler is None:
            logger.debug(f'No overload for {self._name or "dispatcher"} matches '
                         f'({", ".join(type_name(identity) for identity in signature)})')
            raise DispatchError(signature, len(args), self._name)
        return handler(*substituted, **kwargs)

    def __repr__(self):
        name = f' {self._name}' if self._name else ''
        return (f'<Dispatcher{name}: {len(self._exact_table)} exact, '
                f'{len(self._generic_table)} generic, max arity {self._max_fixed_arity}>')
