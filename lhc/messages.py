from termcolor import colored

###############################################################################
# Output prefixes
###############################################################################

CROSSMARK = '[' + colored("✗", "red") + ']'
INFOMARK  = '[' + colored("i", "blue") + ']'

# Result glyphs printed in front of each checked file
PASS = colored("✔", "green")
FAIL = colored("✘", "red")

def _message(prefix: str, raw_prefix: str, *args):
    msg = '\n'.join(str(arg) for arg in args)
    first = True
    for line in msg.split('\n'):
        if first: print(f"{prefix} {line}")
        else:     print(f"{' ' * len(raw_prefix)} {line}")
        first = False

# Use CROSSMARK for errors
def error(*msg): _message(CROSSMARK, '[✗]', *msg)

# Use INFOMARK for information
def info(*msg): _message(INFOMARK, '[i]', *msg)


def glyph(passed: bool) -> str:
    return PASS if passed else FAIL


def result(path, *checks: bool) -> None:
    """
    Prints one result line: a glyph per check followed by the path.
    """
    print(''.join(glyph(c) for c in checks), path)
