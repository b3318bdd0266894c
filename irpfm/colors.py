"""ANSI colour escapes used when echoing recognised tokens."""

from enum import Enum

RESET = "\033[0m"


class Color(str, Enum):
    """Terminal colours, each an ANSI escape sequence."""

    BLACK = "\033[0;30m"
    SEA_GREEN = "\033[0;31m"
    DORANGE = "\033[0;32m"
    TEAL = "\033[0;33m"
    STRAND = "\033[0;34m"
    CYAN = "\033[0;35m"
    BLUE = "\033[0;36m"
    DGRAY = "\033[0;37m"
    LGRAY = "\033[1;30m"
    RED = "\033[1;31m"
    SLATE = "\033[1;32m"
    YELLOW = "\033[1;33m"
    DBLUE = "\033[1;34m"
    ROSY = "\033[1;35m"
    LORANGE = "\033[1;36m"
    WHITE = "\033[1;37m"

    def __str__(self) -> str:
        return self.value


def colorize(text: str, color: Color) -> str:
    """Wrap *text* in the escape for *color*, followed by a reset."""
    return f"{Color(color).value}{text}{RESET}"