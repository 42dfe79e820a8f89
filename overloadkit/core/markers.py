'''
    Semantic markers changing how a position is classified.

    Variadic is only valid in a definition: its types may repeat any number
    of times at call time. Placeholder is only valid in a call: it supplies
    the type of a position while the handler receives None there.
'''

from dataclasses import dataclass

from overloadkit.core.exceptions import ConfigurationError

@dataclass(frozen=True, init=False)
class Variadic:

    descriptors: tuple

    def __init__(self, *descriptors):
        if not descriptors:
            raise ConfigurationError('Variadic needs at least one type descriptor')
        for descriptor in descriptors:
            if isinstance(descriptor, (Variadic, Placeholder)):
                raise ConfigurationError(f'Markers cannot be nested: {descriptor!r}')
        object.__setattr__(self, 'descriptors', descriptors)


@dataclass(frozen=True)
class Placeholder:

    descriptor: object

    def __post_init__(self):
        if isinstance(self.descriptor, (Variadic, Placeholder)):
            raise ConfigurationError(f'Markers cannot be nested: {self.descriptor!r}')


TypedPlaceholder = Placeholder


def auto_length(*descriptors) -> Variadic:
    '''
        Mark one or more types as repeatable in a definition

        Example:
            add = define(auto_length('number'), lambda *numbers: sum(numbers))()
            add(1, 2, 3)  # 6
    '''
    return Variadic(*descriptors)


def resolve_definition(params, describe):
    '''
        Expand the declared parameters of one definition

        Args:
            params (sequence): Type descriptors and Variadic markers
            describe (callable): Descriptor -> type identity

        Returns:
            tuple: (signature, is_generic) where signature is a list of type
                identities and is_generic tells if any Variadic was found
    '''
    signature = []
    is_generic = False
    for param in params:
        if isinstance(param, Placeholder):
            raise ConfigurationError(f'{param!r} can only be used when calling an overloaded function')
        if isinstance(param, Variadic):
            is_generic = True
            signature.extend(describe(descriptor) for descriptor in param.descriptors)
        else:
            signature.append(describe(param))
    return signature, is_generic


def resolve_call(args, classify, describe):
    '''
        Classify the positional arguments of a call

        Args:
            args (sequence): The call arguments, possibly Placeholders
            classify (callable): Value -> type identity
            describe (callable): Descriptor -> type identity, for Placeholders

        Returns:
            tuple: (signature, substituted arguments)
    '''
    signature = []
    substituted = []
    for arg in args:
        if isinstance(arg, Variadic):
            raise ConfigurationError(f'{arg!r} can only be used when defining an overload')
        if isinstance(arg, Placeholder):
            signature.append(describe(arg.descriptor))
            substituted.append(None)
        else:
            signature.append(classify(arg))
            substituted.append(arg)
    return signature, substituted
