"""Line-level tokens produced by an SSE tokenizer.

A tokenizer turns raw bytes into a sequence of these tokens; the stream
decoder assembles them into MessageEvents.
"""

from dataclasses import dataclass
from typing import Final, TypeAlias


@dataclass(frozen=True, slots=True)
class SSEField:
    """A ``name: value`` line (a line without a colon has an empty value)."""

    name: str
    value: str


@dataclass(frozen=True, slots=True)
class SSEComment:
    """A line starting with ``:``."""

    text: str


@dataclass(frozen=True, slots=True)
class Dispatch:
    """A blank line: dispatch the pending event."""


DISPATCH: Final = Dispatch()

SSELine: TypeAlias = SSEField | SSEComment | Dispatch
