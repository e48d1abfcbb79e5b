#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semdiff/parsers/xml.py
"""XML to canonical value parser.

XML conflates attributes, text and children; the encoding used here keeps
them apart with reserved keys that cannot clash with element names:

- The document is an Object with a single key, the root tag
- Attributes become ``"@<name>"`` keys, in document order
- Text content (the element's text plus the tails of its children, stripped
  by default) becomes a ``"#text"`` key when non-empty
- Each distinct child tag becomes one key, in order of first appearance.
  A tag that occurs once holds a single value; a tag that occurs more than
  once (or is listed in ``force_list``) always holds an Array
- An element with no attributes and no children is just its text, as a
  String (``""`` when empty)
- Namespaced names use Clark notation (``{uri}local``); comments and
  processing instructions are dropped

Entity expansion, external references and other XML attacks are refused by
``defusedxml`` and reported as parse errors.

Examples
--------
Input XML::

    <user id="1">
      <name>Alice</name>
      <role>admin</role>
      <role>dev</role>
    </user>

Canonical value (as JSON)::

    {"user": {"@id": "1", "name": "Alice", "role": ["admin", "dev"]}}

"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Any, Optional, Union
from xml.etree.ElementTree import Element, ParseError

from semdiff.constants import DEPS_XML
from semdiff.format_registry import FormatMetadata
from semdiff.model import Value
from semdiff.options.xml import XmlParserOptions
from semdiff.parsers.base import BaseParser
from semdiff.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)


class XmlParser(BaseParser):
    """Parse XML text into a canonical value.

    Parameters
    ----------
    options : XmlParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
        >>> XmlParser().parse('<user id="1"><name>Alice</name></user>')
        Object(fields={'user': Object(fields={'@id': String(value='1'), 'name': String(value='Alice')})})

    """

    format_name = "xml"

    def __init__(self, options: XmlParserOptions | None = None):
        """Initialize the XML parser with options."""
        BaseParser._validate_options_type(options, XmlParserOptions, "xml")
        options = options or XmlParserOptions()
        super().__init__(options)
        self.options: XmlParserOptions = options

    @requires_dependencies("xml", DEPS_XML)
    def parse(self, text: Union[str, bytes]) -> Value:
        """Parse XML text.

        Raises
        ------
        ParsingError
            If the text is not well-formed XML or uses forbidden constructs
            (entity declarations, external references)

        """
        import defusedxml.ElementTree as ET
        from defusedxml import DefusedXmlException

        content = self._ensure_text(text)

        try:
            root = ET.fromstring(content)
        except ParseError as e:
            line, column = e.position
            message = str(e).split(": line", 1)[0]
            raise self._error(message, original_error=e, line=line, column=column + 1) from e
        except DefusedXmlException as e:
            raise self._error(f"forbidden construct: {e}", original_error=e, parsing_stage="security") from e

        try:
            data = {root.tag: self._convert_element(root)}
        except RecursionError as e:
            raise self._error("document is nested too deeply", original_error=e, parsing_stage="nesting") from e

        return self._to_value(data)

    def _convert_element(self, element: Element) -> Any:
        children = list(element)
        text = self._collect_text(element, children)

        if not element.attrib and not children:
            return text or ""

        result: dict[str, Any] = {}
        for name, value in element.attrib.items():
            result[f"{self.options.attribute_prefix}{name}"] = value
        if text:
            result[self.options.text_key] = text

        tag_counts = Counter(child.tag for child in children)
        for child in children:
            converted = self._convert_element(child)
            if tag_counts[child.tag] > 1 or child.tag in self.options.force_list:
                result.setdefault(child.tag, []).append(converted)
            else:
                result[child.tag] = converted

        return result

    def _collect_text(self, element: Element, children: list[Element]) -> Optional[str]:
        pieces = [element.text or ""]
        pieces.extend(child.tail or "" for child in children)
        text = "".join(pieces)
        if self.options.strip_whitespace:
            text = text.strip()
        return text or None


def parse_xml(text: Union[str, bytes], options: Optional[XmlParserOptions] = None) -> Value:
    """Parse XML text into a canonical value.

    Raises
    ------
    ParsingError
        If the text is not well-formed XML

    """
    return XmlParser(options).parse(text)


PARSER_METADATA = FormatMetadata(
    format_name="xml",
    extensions=(".xml", ".xsd", ".svg", ".plist"),
    parser_class=XmlParser,
    parser_options_class=XmlParserOptions,
    required_packages=tuple(DEPS_XML),
    description="XML documents; '@' attribute keys, '#text' text key, repeated tags become arrays",
)
