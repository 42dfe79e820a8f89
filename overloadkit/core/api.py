'''
    Curried entry point building an overloaded function in one expression:

        add = define('number', 'number', lambda a, b: a + b) \
                    ('string', 'string', lambda a, b: a + '-' + b)()

    Every non-empty call registers a definition (type descriptors first, the
    handler last) and returns the continuation; the empty call finalizes the
    group and returns the dispatcher.
'''

from overloadkit.core.builder import OverloadGroup
from overloadkit.core.registry import classify_value, describe_type

def define(*options, config=None, classify=classify_value, describe=describe_type, name: str = None):
    '''
        Start an overload group

        Args:
            *options: The first definition, or nothing for an empty group
            config (OverloadConfig): Marker and logging settings
            classify (callable): Value -> type identity, used at call time
            describe (callable): Descriptor -> type identity, used at definition time
            name (str): Name shown in errors and log messages

        Returns:
            callable: The continuation, or the Dispatcher when called without
                arguments
    '''
    group = OverloadGroup(config=config, classify=classify, describe=describe, name=name)

    def repeat_loading(*options):
        if not options:
            return group.finalize()
        group.define(*options)
        return repeat_loading

    return repeat_loading(*options)
