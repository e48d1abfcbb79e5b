#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semdiff/parsers/ini.py
"""INI to canonical value parser.

INI has no nesting below sections and no native types. The mapping used
here is:

- Each section becomes a top-level Object key holding an Object of its
  key/value pairs, in file order
- Keys that appear before the first section header are collected into an
  implicit section (``default_section_name``, default ``"default"``), which
  is placed first
- ``[DEFAULT]`` is an ordinary section: its keys are not copied into the
  other sections
- Values are Strings unless ``infer_types`` is enabled; valueless keys
  (``allow_no_value``) are Null
- No interpolation is performed; ``%(name)s`` is compared literally

Examples
--------
Input INI::

    debug = false

    [server]
    host = localhost
    port = 8080

Canonical value (as JSON)::

    {"default": {"debug": "false"}, "server": {"host": "localhost", "port": "8080"}}

"""

from __future__ import annotations

import configparser
import logging
from typing import Any, Optional, Union

from semdiff.format_registry import FormatMetadata
from semdiff.model import Value
from semdiff.options.ini import IniParserOptions
from semdiff.parsers.base import BaseParser
from semdiff.utils.inference import infer_scalar

logger = logging.getLogger(__name__)

# Section names that cannot collide with real headers
_IMPLICIT_SECTION = "\x00implicit"
_NO_DEFAULT_SECTION = "\x00defaults"


class RawConfigParser(configparser.RawConfigParser):
    """ConfigParser that preserves the case of option names."""

    def optionxform(self, optionstr: str) -> str:
        """Return option names unchanged."""
        return optionstr


class IniParser(BaseParser):
    r"""Parse INI text into a canonical value.

    Parameters
    ----------
    options : IniParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
        >>> IniParser().parse("[user]\nname = Alice")
        Object(fields={'user': Object(fields={'name': String(value='Alice')})})

    """

    format_name = "ini"

    def __init__(self, options: IniParserOptions | None = None):
        """Initialize the INI parser with options."""
        BaseParser._validate_options_type(options, IniParserOptions, "ini")
        options = options or IniParserOptions()
        super().__init__(options)
        self.options: IniParserOptions = options

    def parse(self, text: Union[str, bytes]) -> Value:
        """Parse INI text.

        Raises
        ------
        ParsingError
            If the text is not valid INI (duplicate sections or keys,
            malformed lines) or the implicit section name collides with an
            explicit section

        """
        content = self._ensure_text(text)
        parser = self._create_config_parser()

        # The synthetic header shifts reported line numbers by one
        try:
            parser.read_string(f"[{_IMPLICIT_SECTION}]\n{content}")
        except configparser.Error as e:
            raise self._translate_error(e) from e

        data: dict[str, Any] = {}
        implicit = self._section_items(parser, _IMPLICIT_SECTION)
        if implicit:
            data[self.options.default_section_name] = implicit

        for section in parser.sections():
            if section == _IMPLICIT_SECTION:
                continue
            if section in data:
                raise self._error(
                    f"section [{section}] conflicts with the implicit section for keys before the first header",
                    parsing_stage="validation",
                )
            data[section] = self._section_items(parser, section)

        logger.debug(f"Parsed INI with {len(data)} section(s)")
        return self._to_value(data)

    def _create_config_parser(self) -> configparser.RawConfigParser:
        parser_class = RawConfigParser if self.options.preserve_case else configparser.RawConfigParser
        return parser_class(
            allow_no_value=self.options.allow_no_value,
            default_section=_NO_DEFAULT_SECTION,
            strict=True,
            interpolation=None,
        )

    def _section_items(self, parser: configparser.RawConfigParser, section: str) -> dict[str, Any]:
        items: dict[str, Any] = {}
        for key, raw in parser.items(section, raw=True):
            if raw is None or not self.options.infer_types:
                items[key] = raw
            else:
                items[key] = infer_scalar(raw)
        return items

    def _translate_error(self, error: configparser.Error) -> Exception:
        line: Optional[int] = getattr(error, "lineno", None)
        if line is None and isinstance(error, configparser.ParsingError) and error.errors:
            line = error.errors[0][0]
        if line is not None:
            line -= 1

        if isinstance(error, configparser.DuplicateSectionError):
            message = f"duplicate section [{error.section}]"
        elif isinstance(error, configparser.DuplicateOptionError):
            message = f"duplicate key {error.option!r} in section [{error.section}]"
        elif isinstance(error, configparser.ParsingError) and error.errors:
            message = f"cannot parse line {error.errors[0][1]}"
        else:
            message = error.message
        return self._error(message, original_error=error, line=line)


def parse_ini(text: Union[str, bytes], options: Optional[IniParserOptions] = None) -> Value:
    """Parse INI text into a canonical value.

    Raises
    ------
    ParsingError
        If the text is not valid INI

    """
    return IniParser(options).parse(text)


PARSER_METADATA = FormatMetadata(
    format_name="ini",
    extensions=(".ini", ".cfg", ".conf"),
    parser_class=IniParser,
    parser_options_class=IniParserOptions,
    required_packages=(),
    description="INI files; sections become objects, values stay strings unless inferred",
)
