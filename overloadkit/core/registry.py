'''
    Type identities and the registry that turns them into integer ids.

    A type identity is either a primitive tag (one of PRIMITIVE_TAGS) or a
    class object. Values are classified at call time with classify_value,
    descriptors are normalized at definition time with describe_type; both
    go through tag_of so that, e.g., `int`, `"number"` and `np.float32` all
    end up in the `number` tag.

    Only the built-in classes listed in BUILTIN_TAGS (and the numpy scalar
    hierarchy) collapse into tags. User subclasses such as a NamedTuple or an
    IntEnum keep their own class identity.
'''

import asyncio
import decimal
import fractions
import functools
import types
import typing

import numpy as np

from overloadkit.core.exceptions import ConfigurationError

PRIMITIVE_TAGS = ('none', 'boolean', 'number', 'string', 'bytes', 'array', 'promise', 'function')

BUILTIN_TAGS = {
    type(None): 'none',
    bool: 'boolean',
    int: 'number',
    float: 'number',
    complex: 'number',
    fractions.Fraction: 'number',
    decimal.Decimal: 'number',
    str: 'string',
    bytes: 'bytes',
    bytearray: 'bytes',
    memoryview: 'bytes',
    list: 'array',
    tuple: 'array',
    np.ndarray: 'array',
    types.CoroutineType: 'promise',
    asyncio.Future: 'promise',
    asyncio.Task: 'promise',
    types.FunctionType: 'function',
    types.BuiltinFunctionType: 'function',
    types.MethodType: 'function',
    types.MethodWrapperType: 'function',
    functools.partial: 'function',
}


def tag_of(cls):
    '''
        Primitive tag of a class, or None if the class is matched by identity
    '''
    tag = BUILTIN_TAGS.get(cls)
    if tag is not None:
        return tag
    if issubclass(cls, np.bool_):
        return 'boolean'
    if issubclass(cls, np.number):
        return 'number'
    return None


def _is_typing_construct(descriptor) -> bool:

    if typing.get_origin(descriptor) is not None or isinstance(descriptor, (types.GenericAlias, typing.TypeVar)):
        return True
    if isinstance(descriptor, type):
        return descriptor.__module__ == 'typing'
    return type(descriptor).__module__ == 'typing'


def classify_value(value):
    '''
        Classify a runtime value: primitive tag if its class is one of the
        tagged built-ins, otherwise its class

        Args:
            value: Any call argument

        Returns:
            str | type: The type identity of the value
    '''
    cls = type(value)
    return tag_of(cls) or cls


def describe_type(descriptor):
    '''
        Normalize a definition-time type descriptor to a type identity.

        Args:
            descriptor: A primitive tag string, a class, None, or any other
                value (classified as classify_value would do it). Typing
                constructs such as list[int] or Optional[int] are rejected.

        Returns:
            str | type: The type identity
    '''
    if isinstance(descriptor, str):
        if descriptor not in PRIMITIVE_TAGS:
            raise ConfigurationError(f'Unknown type tag {descriptor!r}, expected one of {PRIMITIVE_TAGS} or a class')
        return descriptor
    if descriptor is None:
        return 'none'
    if _is_typing_construct(descriptor):
        raise ConfigurationError(f'{descriptor!r} is a typing construct, dispatch needs a plain class or a type tag')
    if isinstance(descriptor, type):
        return tag_of(descriptor) or descriptor
    return classify_value(descriptor)


class TypeRegistry:
    '''
        Assigns integer ids to type identities in first-seen order.

        Tags are compared by value, classes by identity. Ids are never
        reused; after freeze() no new identity can be interned.
    '''

    def __init__(self, base: int = 1):

        self._base = base
        self._next_id = base
        self._tags = {}
        self._classes = {}
        self._frozen = False

    def _table_for(self, identity):

        if isinstance(identity, str):
            return self._tags
        if isinstance(identity, type):
            return self._classes
        raise ConfigurationError(f'{identity!r} is not a type identity (expected a tag or a class)')

    def intern(self, identity) -> int:

        table = self._table_for(identity)
        if identity in table:
            return table[identity]
        if self._frozen:
            raise ConfigurationError(f'Cannot intern {identity!r}: registry is frozen')
        table[identity] = self._next_id
        self._next_id += 1
        return table[identity]

    def lookup(self, identity):
        '''
            Id of an already interned identity, or None. Never allocates.
        '''
        return self._table_for(identity).get(identity)

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def base(self) -> int:
        return self._base

    def items(self):
        '''
            (identity, id) pairs sorted by id
        '''
        return sorted([*self._tags.items(), *self._classes.items()], key=lambda item: item[1])

    def __contains__(self, identity) -> bool:
        return self.lookup(identity) is not None

    def __len__(self) -> int:
        return len(self._tags) + len(self._classes)

    def __repr__(self):
        return f'TypeRegistry(size={len(self)}, frozen={self._frozen})'
