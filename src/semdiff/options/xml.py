#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semdiff/options/xml.py
"""Options for XML parsing.

XML conflates attributes, text and children; these options name the
reserved keys used to keep them apart in the canonical value.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from semdiff.constants import XML_ATTRIBUTE_PREFIX, XML_TEXT_KEY
from semdiff.options.base import BaseParserOptions


@dataclass(frozen=True)
class XmlParserOptions(BaseParserOptions):
    """Configuration options for XML parsing.

    Parameters
    ----------
    attribute_prefix : str, default = "@"
        Prefix added to attribute names to form their Object keys.
    text_key : str, default = "#text"
        Key holding an element's text when it also has attributes or children.
    strip_whitespace : bool, default = True
        Strip leading/trailing whitespace from text and drop
        whitespace-only text.
    force_list : tuple of str, default = ()
        Child tags that always become an Array, even when they occur once.
        Use this when a document may contain one or several of an element so
        both versions have the same shape.

    """

    attribute_prefix: str = field(
        default=XML_ATTRIBUTE_PREFIX,
        metadata={"help": "Prefix for attribute keys", "importance": "advanced"},
    )
    text_key: str = field(
        default=XML_TEXT_KEY,
        metadata={"help": "Key for element text content", "importance": "advanced"},
    )
    strip_whitespace: bool = field(
        default=True,
        metadata={"help": "Strip whitespace around text content", "importance": "core"},
    )
    force_list: tuple[str, ...] = field(
        default=(),
        metadata={"help": "Tags that always become arrays", "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate reserved key settings."""
        super().__post_init__()
        if not isinstance(self.force_list, tuple):
            object.__setattr__(self, "force_list", tuple(self.force_list))
        if not self.text_key:
            raise ValueError("text_key must be a non-empty string")
        if self.attribute_prefix and self.text_key.startswith(self.attribute_prefix):
            raise ValueError(
                f"text_key {self.text_key!r} must not start with attribute_prefix {self.attribute_prefix!r}"
            )
