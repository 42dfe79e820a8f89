'''
    ANSI escape codes used to tag terminal messages
'''

class TerminalColors:

    RED = '\033[91m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    BLUE = '\033[94m'
    CYAN = '\033[96m'
    BOLD = '\033[1m'
    UNDERLINE = '\033[4m'
    RESET = '\033[0m'

    enabled = True

    @classmethod
    def tag(cls, color: str, label: str) -> str:
        '''
            Build a '[LABEL]: ' prefix, colored only if colors are enabled

            Args:
                color (str): One of the escape codes above
                label (str): The text inside the brackets

            Returns:
                str: The prefix
        '''
        if not cls.enabled:
            return f'[{label}]: '
        return color+f'[{label}]: '+cls.RESET


def error_prefix() -> str:
    return TerminalColors.tag(TerminalColors.RED, 'ERROR')
