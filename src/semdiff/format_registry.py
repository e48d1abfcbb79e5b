#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semdiff/format_registry.py
"""Metadata describing the input formats semdiff can parse.

Each parser module defines a ``PARSER_METADATA`` object. The parsers package
collects them into an immutable lookup built once at import time, so format
resolution never depends on mutable process-wide state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import PurePath
from types import MappingProxyType
from typing import TYPE_CHECKING, Iterable, Mapping, Optional

from semdiff.exceptions import FormatError

if TYPE_CHECKING:
    from semdiff.parsers.base import BaseParser

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FormatMetadata:
    """Description of one parseable input format.

    Parameters
    ----------
    format_name : str
        Unique identifier for the format (e.g., "json", "ini")
    extensions : tuple of str
        File extensions that indicate this format (e.g., (".yml", ".yaml"))
    parser_class : type
        :class:`~semdiff.parsers.base.BaseParser` subclass for the format
    parser_options_class : type
        Options dataclass accepted by the parser
    required_packages : tuple of (str, str, str)
        Third-party packages needed as (install_name, import_name, version_spec)
    description : str
        Human-readable description, including the mapping convention

    """

    format_name: str
    extensions: tuple[str, ...]
    parser_class: type[BaseParser]
    parser_options_class: type
    required_packages: tuple[tuple[str, str, str], ...] = field(default_factory=tuple)
    description: str = ""


class FormatRegistry:
    """Read-only lookup of :class:`FormatMetadata` by name or extension.

    Parameters
    ----------
    entries : iterable of FormatMetadata
        Formats to register; names must be unique

    """

    def __init__(self, entries: Iterable[FormatMetadata]):
        """Index the given formats by name and extension."""
        by_name: dict[str, FormatMetadata] = {}
        by_extension: dict[str, FormatMetadata] = {}
        for metadata in entries:
            if metadata.format_name in by_name:
                raise ValueError(f"Duplicate format registration: {metadata.format_name}")
            by_name[metadata.format_name] = metadata
            for extension in metadata.extensions:
                by_extension[extension.lower()] = metadata
            logger.debug(f"Registered format: {metadata.format_name} ({', '.join(metadata.extensions)})")
        self._by_name: Mapping[str, FormatMetadata] = MappingProxyType(by_name)
        self._by_extension: Mapping[str, FormatMetadata] = MappingProxyType(by_extension)

    def list_formats(self) -> list[str]:
        """Return registered format names in registration order."""
        return list(self._by_name)

    def get(self, format_name: str) -> FormatMetadata:
        """Return metadata for ``format_name`` (case-insensitive).

        Raises
        ------
        FormatError
            If the format is not registered

        """
        metadata = self._by_name.get(format_name.strip().lower())
        if metadata is None:
            raise FormatError(format_type=format_name, supported_formats=self.list_formats())
        return metadata

    def detect_format(self, filename: str) -> Optional[str]:
        """Return the format name implied by a filename's extension, if any."""
        suffix = PurePath(filename).suffix.lower()
        metadata = self._by_extension.get(suffix)
        return metadata.format_name if metadata else None
