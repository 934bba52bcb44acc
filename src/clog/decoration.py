"""
Decorations — ANSI escape sequences that style terminal output.

A Decoration is a plain string restricted to the SGR/cursor syntax:

    ESC [ {digits and semicolons} (m | G)

The palette below covers reset, style modifiers, and the eight foreground
and background colors. Custom codes go through new_decoration(), which
rejects anything that does not match the pattern.
"""

import re

from .errors import InvalidDecorationCode

# regex from: https://superuser.com/questions/380772/removing-ansi-color-codes-from-text-stream
_SGR_PATTERN = re.compile(r"\x1b\[[0-9;]*[mG]")


def validate(code) -> bool:
    """Return True if code is an ANSI SGR (or cursor 'G') escape sequence."""
    return isinstance(code, str) and _SGR_PATTERN.fullmatch(code) is not None


class Decoration(str):
    """An immutable ANSI escape sequence.

    Compares equal to the raw string it wraps, so ``FG_RED == "\\x1b[31m"``.
    Construction validates the code and raises InvalidDecorationCode.
    """

    __slots__ = ()

    def __new__(cls, code: str):
        if isinstance(code, Decoration):
            return code
        if not validate(code):
            raise InvalidDecorationCode(code)
        return super().__new__(cls, code)

    @property
    def code(self) -> str:
        """The raw escape sequence."""
        return str.__str__(self)

    def __repr__(self) -> str:
        return f"Decoration({str.__repr__(self)})"


def new_decoration(code: str) -> Decoration:
    """Wrap a custom SGR code as a Decoration.

    Raises:
        InvalidDecorationCode: if code is not a valid escape sequence.
    """
    return Decoration(code)


RESET = Decoration("\x1b[0m")

# Style modifiers
BRIGHT = Decoration("\x1b[1m")
DIM = Decoration("\x1b[2m")
UNDERSCORE = Decoration("\x1b[4m")
BLINK = Decoration("\x1b[5m")
REVERSE = Decoration("\x1b[7m")
HIDDEN = Decoration("\x1b[8m")

# Foreground colors (text)
FG_BLACK = Decoration("\x1b[30m")
FG_RED = Decoration("\x1b[31m")
FG_GREEN = Decoration("\x1b[32m")
FG_YELLOW = Decoration("\x1b[33m")
FG_BLUE = Decoration("\x1b[34m")
FG_MAGENTA = Decoration("\x1b[35m")
FG_CYAN = Decoration("\x1b[36m")
FG_WHITE = Decoration("\x1b[37m")

# Background colors
BG_BLACK = Decoration("\x1b[40m")
BG_RED = Decoration("\x1b[41m")
BG_GREEN = Decoration("\x1b[42m")
BG_YELLOW = Decoration("\x1b[43m")
BG_BLUE = Decoration("\x1b[44m")
BG_MAGENTA = Decoration("\x1b[45m")
BG_CYAN = Decoration("\x1b[46m")
BG_WHITE = Decoration("\x1b[47m")

PALETTE = {
    'RESET': RESET,
    'BRIGHT': BRIGHT, 'DIM': DIM, 'UNDERSCORE': UNDERSCORE,
    'BLINK': BLINK, 'REVERSE': REVERSE, 'HIDDEN': HIDDEN,
    'FG_BLACK': FG_BLACK, 'FG_RED': FG_RED, 'FG_GREEN': FG_GREEN,
    'FG_YELLOW': FG_YELLOW, 'FG_BLUE': FG_BLUE, 'FG_MAGENTA': FG_MAGENTA,
    'FG_CYAN': FG_CYAN, 'FG_WHITE': FG_WHITE,
    'BG_BLACK': BG_BLACK, 'BG_RED': BG_RED, 'BG_GREEN': BG_GREEN,
    'BG_YELLOW': BG_YELLOW, 'BG_BLUE': BG_BLUE, 'BG_MAGENTA': BG_MAGENTA,
    'BG_CYAN': BG_CYAN, 'BG_WHITE': BG_WHITE,
}
