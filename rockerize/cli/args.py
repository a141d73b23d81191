"""Argument parsing for space-separated flag value runs."""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

from ..common.models import BuildRequest

ARG_HELP = "--help"
ARG_BUILD_ONLY = "--build-only"
ARG_VERBOSE = "--verbose"
ARG_EXPOSED_PORTS = "--exposed-ports"
ARG_ADD_FILES = "--add-files"

FLAG_PREFIX = "--"

_INTEGER_RE = re.compile(r"^[+-]?[0-9]+$")
_INT32_MIN = -(2 ** 31)
_INT32_MAX = 2 ** 31 - 1


class _ScanState(Enum):
    IDLE = "idle"
    COLLECTING = "collecting"
    DONE = "done"


class _FlagScanner:
    """
    Collect the value run following the first occurrence of a flag.

    The run ends at the next token starting with ``--`` or at end of input.
    Later occurrences of the same flag are ignored.
    """

    def __init__(self, flag: str) -> None:
        self.flag = flag
        self.state = _ScanState.IDLE
        self.values: List[str] = []

    def feed(self, token: str) -> None:
        if self.state is _ScanState.IDLE:
            if token == self.flag:
                self.state = _ScanState.COLLECTING
        elif self.state is _ScanState.COLLECTING:
            if token.startswith(FLAG_PREFIX):
                self.state = _ScanState.DONE
            else:
                self.values.append(token.strip())

    def scan(self, tokens: Sequence[str]) -> List[str]:
        for token in tokens:
            self.feed(token)
            if self.state is _ScanState.DONE:
                break
        return self.values


def collect_flag_values(tokens: Sequence[str], flag: str) -> List[str]:
    """Return the trimmed tokens following ``flag`` up to the next flag."""
    return _FlagScanner(flag).scan(tokens)


def parse_ports(tokens: Sequence[str]) -> List[int]:
    """Parse exposed ports; tokens that are not 32-bit base-10 integers are skipped."""
    ports: List[int] = []
    for value in collect_flag_values(tokens, ARG_EXPOSED_PORTS):
        if not _INTEGER_RE.match(value):
            continue
        port = int(value, 10)
        if _INT32_MIN <= port <= _INT32_MAX:
            ports.append(port)
    return ports


def wants_help(tokens: Sequence[str]) -> bool:
    return not tokens or ARG_HELP in tokens


@dataclass(frozen=True)
class ParseOutcome:
    """Either a request to show help or a parsed build request."""

    show_help: bool
    request: Optional[BuildRequest] = None


def parse_args(tokens: Sequence[str]) -> ParseOutcome:
    """
    Turn raw command-line tokens (without the program name) into a ParseOutcome.

    Args:
        tokens: Command-line tokens

    Returns:
        ParseOutcome with ``show_help`` set, or carrying the BuildRequest
    """
    tokens = list(tokens)
    if wants_help(tokens):
        return ParseOutcome(show_help=True)

    request = BuildRequest(
        build_only=ARG_BUILD_ONLY in tokens,
        exposed_ports=tuple(parse_ports(tokens)),
        add_files=tuple(collect_flag_values(tokens, ARG_ADD_FILES)),
        verbose=ARG_VERBOSE in tokens,
    )
    return ParseOutcome(show_help=False, request=request)
