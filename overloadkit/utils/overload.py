'''
    Classes and functions used for function overloading with decorators
'''
import functools
import inspect
import typing

from overloadkit.core.builder import OverloadGroup
from overloadkit.core.exceptions import ConfigurationError
from overloadkit.core.markers import Variadic
from overloadkit.core.registry import PRIMITIVE_TAGS

SIGNATURE_ATTRIBUTE = '__overload_signature__'

def signature(*descriptors):
    '''
        Declare the dispatch types of a function explicitly, instead of
        reading them from its annotations

        Example:
            @overload
            @signature('number', Variadic('string'))
            def join(sep, *words): ...
    '''
    def decorator(func):
        setattr(func, SIGNATURE_ATTRIBUTE, descriptors)
        return func
    return decorator


def _annotation(func, param):

    annotation = param.annotation
    if isinstance(annotation, str) and annotation not in PRIMITIVE_TAGS:
        try:
            annotation = typing.get_type_hints(func).get(param.name, annotation)
        except NameError as e:
            raise ConfigurationError(f'Cannot resolve annotation {annotation!r} of {func.__qualname__}: {e}') from e
    return annotation


def declared_params(func) -> tuple:
    '''
        Type descriptors of a function: the explicit @signature if present,
        otherwise its positional parameter annotations. An annotated *args
        becomes a Variadic marker, keyword-only parameters are not dispatched on.
    '''
    explicit = getattr(func, SIGNATURE_ATTRIBUTE, None)
    if explicit is not None:
        return tuple(explicit)

    params = []
    for param in inspect.signature(func).parameters.values():
        if param.kind in (param.KEYWORD_ONLY, param.VAR_KEYWORD):
            continue
        if param.annotation is param.empty:
            raise ConfigurationError(f'Parameter {param.name!r} of {func.__qualname__} has no type annotation')
        annotation = _annotation(func, param)
        params.append(Variadic(annotation) if param.kind == param.VAR_POSITIONAL else annotation)
    return tuple(params)


class overload:
    '''
        Decorator collecting same-named functions into one overloaded function.

        A new implementation joins the overload already bound to its name in
        the scope where it is defined (module, class body or function body),
        so closures returned by separate calls of a factory stay independent.
    '''

    def __init__(self, func):
        self.func = func
        self.name = f'{func.__module__}.{func.__qualname__}'
        functools.update_wrapper(self, func)

        frame = inspect.currentframe().f_back
        try:
            previous = frame.f_locals.get(func.__name__) if frame is not None else None
        finally:
            del frame
        if isinstance(previous, overload) and previous.name == self.name:
            self._entry = previous._entry
        else:
            self._entry = {'definitions': [], 'dispatcher': None}
        self.register(func)

    def register(self, func):
        # Every registration invalidates the dispatcher built so far
        self._entry['definitions'].append((declared_params(func), func))
        self._entry['dispatcher'] = None
        return func

    @property
    def definitions(self) -> list:
        return [func for _, func in self._entry['definitions']]

    @property
    def dispatcher(self):
        if self._entry['dispatcher'] is None:
            group = OverloadGroup(name=self.func.__qualname__)
            for params, func in self._entry['definitions']:
                group.add(params, func)
            self._entry['dispatcher'] = group.finalize()
        return self._entry['dispatcher']

    def __call__(self, *args, **kwargs):
        # Dispatch to the appropriate overloaded function
        return self.dispatcher(*args, **kwargs)
