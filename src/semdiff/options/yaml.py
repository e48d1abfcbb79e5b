#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semdiff/options/yaml.py
"""Options for YAML parsing."""

from __future__ import annotations

from dataclasses import dataclass, field

from semdiff.options.base import BaseParserOptions


@dataclass(frozen=True)
class YamlParserOptions(BaseParserOptions):
    """Configuration options for YAML parsing.

    Parameters
    ----------
    allow_multiple_documents : bool, default = False
        If True, a stream with several ``---`` documents becomes an Array
        with one element per document. If False, such streams are rejected.

    """

    allow_multiple_documents: bool = field(
        default=False,
        metadata={"help": "Parse multi-document streams into an array", "importance": "advanced"},
    )
