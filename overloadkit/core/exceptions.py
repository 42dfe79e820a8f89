'''
    Errors raised while configuring or calling an overloaded function
'''

from overloadkit.utils.terminal_colors import error_prefix

class OverloadError(Exception):
    '''
        Base class of every error raised by overloadkit
    '''

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def __str__(self):
        return error_prefix()+self.message


class ConfigurationError(OverloadError, ValueError):
    '''
        A marker used in the wrong phase, a malformed definition, or a write
        to an overload group that has already been finalized
    '''


class DispatchError(OverloadError, TypeError):
    '''
        No overload matches the runtime types of the call arguments.

        Attributes:
            signature (tuple): The type identities computed for the call
            arity (int): The number of positional arguments
    '''

    def __init__(self, signature, arity: int, name: str = None):
        self.signature = tuple(signature)
        self.arity = arity
        self.name = name
        types = ', '.join(type_name(identity) for identity in self.signature)
        target = f' for {name}' if name else ''
        super().__init__(f'No matching overload{target}: ({types}) with {arity} argument(s)')


NoMatchingOverload = DispatchError


def type_name(identity) -> str:
    if isinstance(identity, str):
        return identity
    return getattr(identity, '__qualname__', None) or repr(identity)
