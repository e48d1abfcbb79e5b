#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semdiff/diff/paths.py
"""Path segments used to address locations inside a value tree.

The engine keeps the current location as a stack of segments and only joins
them into a string when an entry is emitted:

- Object keys are joined with ``.`` (``user.name``)
- Array positions render as ``[i]`` (``items[2]``)
- Identity-matched array elements render as ``[key=<literal>]`` where the
  literal is compact JSON of the id value (``items[id=1]``,
  ``items[id="abc"]``)

The root path is the empty string.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

from semdiff.constants import PATH_KEY_SEPARATOR, ROOT_PATH_DISPLAY


@dataclass(frozen=True)
class KeySegment:
    """Object member access."""

    key: str

    def render(self, first: bool) -> str:
        return self.key if first else f"{PATH_KEY_SEPARATOR}{self.key}"


@dataclass(frozen=True)
class IndexSegment:
    """Positional array element access."""

    index: int

    def render(self, first: bool) -> str:
        return f"[{self.index}]"


@dataclass(frozen=True)
class IdentitySegment:
    """Array element addressed by the value of its identity key.

    Parameters
    ----------
    key : str
        Name of the identity key (``array_id_key``)
    literal : str
        Compact JSON rendering of the element's id value

    """

    key: str
    literal: str

    def render(self, first: bool) -> str:
        return f"[{self.key}={self.literal}]"


PathSegment = Union[KeySegment, IndexSegment, IdentitySegment]


def join_path(segments: Iterable[PathSegment]) -> str:
    """Render a sequence of segments as a path string.

    Examples
    --------
        >>> join_path([KeySegment("items"), IdentitySegment("id", "1"), KeySegment("v")])
        'items[id=1].v'

    """
    return "".join(segment.render(position == 0) for position, segment in enumerate(segments))


def display_path(path: str) -> str:
    """Return ``path`` for human-readable output, naming the root explicitly."""
    return path or ROOT_PATH_DISPLAY
