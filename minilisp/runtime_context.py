from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Iterator, Optional, TextIO

# NOTE: process-global, like the global environment it serves. A multi-session
# host would need contextvars here.
_output: Optional[TextIO] = None


def set_output(stream: Optional[TextIO]) -> None:
    """Route `print` output to `stream`; None restores sys.stdout."""
    global _output
    _output = stream


def get_output() -> TextIO:
    return _output if _output is not None else sys.stdout


@contextmanager
def redirect_output(stream: TextIO) -> Iterator[TextIO]:
    previous = _output
    set_output(stream)
    try:
        yield stream
    finally:
        set_output(previous)
