#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semdiff/options/ini.py
"""Options for INI parsing.

INI has no nesting below sections and no native value types; these options
fix the conventions used to map it onto canonical values.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from semdiff.constants import (
    DEFAULT_INI_ALLOW_NO_VALUE,
    DEFAULT_INI_INFER_TYPES,
    DEFAULT_INI_PRESERVE_CASE,
    DEFAULT_INI_SECTION_NAME,
)
from semdiff.options.base import BaseParserOptions


@dataclass(frozen=True)
class IniParserOptions(BaseParserOptions):
    """Configuration options for INI parsing.

    Sections become top-level Object keys; each section holds an Object of
    key to value.

    Parameters
    ----------
    default_section_name : str, default = "default"
        Section name under which keys appearing before the first section
        header are collected. That implicit section is placed first.
    preserve_case : bool, default = True
        If True, preserve the case of keys. If False, keys are lowercased
        (configparser default behavior). Section names always keep their case.
    allow_no_value : bool, default = False
        If True, allow keys without values; they become Null.
    infer_types : bool, default = False
        If True, values that look like integers, floats or the literals
        ``true``/``false`` (any case) become Number/Bool. If False every value
        is a String.

    """

    default_section_name: str = field(
        default=DEFAULT_INI_SECTION_NAME,
        metadata={"help": "Section name for keys before the first header", "importance": "core"},
    )
    preserve_case: bool = field(
        default=DEFAULT_INI_PRESERVE_CASE,
        metadata={"help": "Preserve case of keys", "importance": "advanced"},
    )
    allow_no_value: bool = field(
        default=DEFAULT_INI_ALLOW_NO_VALUE,
        metadata={"help": "Allow keys without values", "importance": "advanced"},
    )
    infer_types: bool = field(
        default=DEFAULT_INI_INFER_TYPES,
        metadata={"help": "Convert numeric and boolean values", "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate the implicit section name."""
        super().__post_init__()
        if not self.default_section_name or not self.default_section_name.strip():
            raise ValueError("default_section_name must be a non-empty string")
