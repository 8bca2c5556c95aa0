"""Command-line options for the sandpile simulation."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Sequence

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

_SHORT_FREQ = "-f"
_SHORT_MAX_ITER = "-m"
_SHORT_INPUT = "-i"
_SHORT_OUTPUT = "-o"
_LONG_FREQ = "--freq="
_LONG_MAX_ITER = "--max-iter="
_LONG_INPUT = "--input="
_LONG_OUTPUT = "--output="


@dataclass
class SandpileOptions:
    """Settings for one simulation run.

    ``max_iter`` of 0 means no iteration limit; ``freq`` of 0 means no
    intermediate snapshots are taken.
    """

    max_iter: int = 0
    freq: int = 0
    input_path: Optional[str] = None
    output_path: Optional[str] = None


def _parse_count(text: str, option: str) -> int:
    """Read a leading integer the way strtol does; no digits gives 0."""
    match = _LEADING_INT.match(text)
    if match is None:
        return 0
    value = int(match.group(1))
    if value < 0:
        raise ValueError(f"{option} must not be negative: {text!r}")
    return value


def parse_args(argv: Sequence[str]) -> SandpileOptions:
    """Parse arguments (without the program name) into options.

    Unknown arguments are ignored. A short option without a following
    value raises ValueError.
    """
    options = SandpileOptions()
    args = iter(argv)
    for arg in args:
        if arg in (_SHORT_FREQ, _SHORT_MAX_ITER, _SHORT_INPUT, _SHORT_OUTPUT):
            try:
                value = next(args)
            except StopIteration:
                raise ValueError(f"option {arg} needs a value") from None
            if arg == _SHORT_FREQ:
                options.freq = _parse_count(value, "frequency")
            elif arg == _SHORT_MAX_ITER:
                options.max_iter = _parse_count(value, "max iterations")
            elif arg == _SHORT_OUTPUT:
                options.output_path = value
            else:
                options.input_path = value
        elif arg.startswith(_LONG_MAX_ITER):
            options.max_iter = _parse_count(arg[len(_LONG_MAX_ITER):], "max iterations")
        elif arg.startswith(_LONG_FREQ):
            options.freq = _parse_count(arg[len(_LONG_FREQ):], "frequency")
        elif arg.startswith(_LONG_OUTPUT):
            options.output_path = arg[len(_LONG_OUTPUT):]
        elif arg.startswith(_LONG_INPUT):
            options.input_path = arg[len(_LONG_INPUT):]
    return options