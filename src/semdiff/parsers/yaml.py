#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semdiff/parsers/yaml.py
"""YAML to canonical value parser.

YAML is loaded with ``yaml.safe_load`` and mapped directly onto the
canonical model. Conventions for YAML-only types:

- Timestamps and dates become ISO-8601 strings
- Non-string mapping keys are stringified (``true`` / ``null`` / ``1``)
- An empty document is Null
- Multi-document streams are rejected unless ``allow_multiple_documents``
  is set, in which case they become an Array of documents

"""

from __future__ import annotations

import logging
from typing import Optional, Union

from semdiff.constants import DEPS_YAML
from semdiff.format_registry import FormatMetadata
from semdiff.model import Value
from semdiff.options.yaml import YamlParserOptions
from semdiff.parsers.base import BaseParser
from semdiff.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)


class YamlParser(BaseParser):
    r"""Parse YAML text into a canonical value.

    Parameters
    ----------
    options : YamlParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
        >>> YamlParser().parse("name: Alice\nage: 30")
        Object(fields={'name': String(value='Alice'), 'age': Number(value=30)})

    """

    format_name = "yaml"

    def __init__(self, options: YamlParserOptions | None = None):
        """Initialize the YAML parser with options."""
        BaseParser._validate_options_type(options, YamlParserOptions, "yaml")
        options = options or YamlParserOptions()
        super().__init__(options)
        self.options: YamlParserOptions = options

    @requires_dependencies("yaml", DEPS_YAML)
    def parse(self, text: Union[str, bytes]) -> Value:
        """Parse YAML text.

        Raises
        ------
        ParsingError
            If the text is not valid YAML, or holds several documents while
            ``allow_multiple_documents`` is off

        """
        import yaml

        content = self._ensure_text(text)

        try:
            documents = list(yaml.safe_load_all(content))
        except yaml.MarkedYAMLError as e:
            mark = e.problem_mark or e.context_mark
            line = mark.line + 1 if mark is not None else None
            column = mark.column + 1 if mark is not None else None
            problem = e.problem or e.context or str(e)
            raise self._error(problem, original_error=e, line=line, column=column) from e
        except yaml.YAMLError as e:
            raise self._error(str(e), original_error=e) from e
        except RecursionError as e:
            raise self._error("document is nested too deeply", original_error=e, parsing_stage="nesting") from e

        if self.options.allow_multiple_documents:
            logger.debug(f"Loaded {len(documents)} YAML document(s)")
            return self._to_value(documents)

        if len(documents) > 1:
            raise self._error(
                f"stream contains {len(documents)} documents; enable allow_multiple_documents to compare streams",
                parsing_stage="validation",
            )

        return self._to_value(documents[0] if documents else None)


def parse_yaml(text: Union[str, bytes], options: Optional[YamlParserOptions] = None) -> Value:
    """Parse YAML text into a canonical value.

    Raises
    ------
    ParsingError
        If the text is not valid YAML

    """
    return YamlParser(options).parse(text)


PARSER_METADATA = FormatMetadata(
    format_name="yaml",
    extensions=(".yaml", ".yml"),
    parser_class=YamlParser,
    parser_options_class=YamlParserOptions,
    required_packages=tuple(DEPS_YAML),
    description="YAML documents via safe_load; timestamps become ISO strings",
)
