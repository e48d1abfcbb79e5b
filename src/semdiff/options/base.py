#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semdiff/options/base.py
"""Base classes for parser and diff options.

Every options object in semdiff is a frozen dataclass: it is validated once
when constructed and never mutated afterwards. Use ``create_updated()`` to
derive a modified copy.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated (and re-validated)

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for all format parser options.

    Parsers convert raw text into canonical values. Subclasses define
    format-specific conventions as frozen dataclass fields whose ``metadata``
    carries a ``help`` string and an ``importance`` level.

    """

    def __post_init__(self) -> None:
        """Validate field values. Subclasses extend this."""
        pass
