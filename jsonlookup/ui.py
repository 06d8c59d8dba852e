from __future__ import annotations

import re
import sys
from typing import NoReturn

from colorama import Fore, Style

RESET: str = Style.RESET_ALL
BOLD = Style.BRIGHT
RED = Fore.RED
GREEN = Fore.GREEN
OK = BOLD + GREEN
ERROR = BOLD + RED


def colorize(text: str, color: str) -> str:
    return color + text + RESET


def decolorize(text: str) -> str:
    return re.sub(r"\033\[[0-9]+m", "", text)


def write(text: str, color: str = RESET) -> None:
    sys.stdout.write(colorize(text, color))


def flush() -> None:
    sys.stdout.flush()


def writeln(text: str = "", color: str = RESET) -> None:
    write(text + "\n", color)
    flush()


def fatal_error(message: str) -> NoReturn:
    writeln(colorize("jsonlookup: " + message, ERROR))
    sys.exit(1)
