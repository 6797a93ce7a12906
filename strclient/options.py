"""Command line options for the string client."""

from __future__ import annotations

import getopt
import re
from dataclasses import dataclass
from typing import Sequence

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_UINT32 = 2**32


@dataclass
class Options:
    """Settings taken from the command line.

    ``host`` and ``port`` are ``None`` when the option was not given.
    """

    host: str | None = None
    port: str | None = None
    count: int = 1


def _parse_count(text: str) -> int:
    """Read a leading integer the way the count option expects.

    Leading whitespace and trailing text are ignored; the value is
    stored as an unsigned 32-bit number.
    """
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"invalid count: {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"count out of range: {text!r}")
    return value % _UINT32


def parse_options(argv: Sequence[str]) -> Options:
    """Parse ``-h HOST``, ``-p PORT`` and ``-n COUNT`` from ``argv``.

    ``argv`` holds the arguments without the program name. Options may be
    given in any order and repeated; the last one wins.
    """
    try:
        pairs, _rest = getopt.gnu_getopt(list(argv), "h:p:n:")
    except getopt.GetoptError as exc:
        raise ValueError(str(exc)) from exc

    options = Options()
    for flag, value in pairs:
        if flag == "-h":
            options.host = value
        elif flag == "-p":
            options.port = value
        elif flag == "-n":
            options.count = _parse_count(value)
    return options