#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semdiff/parsers/csv.py
"""CSV to canonical value parser.

The document becomes an Array of Objects, one per data row, keyed by the
header row:

- The first non-empty line is the header; header names must be unique
- Empty lines are skipped; a row of empty cells (``,,``) is a record of
  empty strings
- Short rows are padded with empty strings; long rows are an error unless
  ``strict_row_length`` is off, in which case the extra cells are dropped
- Cells are Strings unless ``infer_numbers`` is enabled
- An empty document (or a header with no data rows) is an empty Array

Examples
--------
Input CSV::

    name,age
    Alice,30

Canonical value (as JSON)::

    [{"name": "Alice", "age": "30"}]

"""

from __future__ import annotations

import csv
import io
import logging
from typing import Any, Iterator, Optional, Union

from semdiff.constants import CSV_SNIFF_DELIMITERS, CSV_SNIFF_SAMPLE_SIZE
from semdiff.format_registry import FormatMetadata
from semdiff.model import Value
from semdiff.options.csv import CsvParserOptions
from semdiff.parsers.base import BaseParser
from semdiff.utils.inference import infer_number

logger = logging.getLogger(__name__)


def _make_csv_dialect(delimiter: str, quotechar: str | None = None) -> type[csv.Dialect]:
    """Create a strict dialect based on ``csv.excel`` with the given settings."""
    attrs: dict[str, Any] = {"delimiter": delimiter, "strict": True}
    if quotechar is not None:
        attrs["quotechar"] = quotechar
    return type("SemdiffCsvDialect", (csv.excel,), attrs)


class CsvParser(BaseParser):
    """Parse CSV text into an Array of row Objects.

    Parameters
    ----------
    options : CsvParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
        >>> CsvParser().parse("name,age\\nAlice,30")
        Array(items=(Object(fields={'name': String(value='Alice'), 'age': String(value='30')}),))

    """

    format_name = "csv"

    def __init__(self, options: CsvParserOptions | None = None):
        """Initialize the CSV parser with options."""
        BaseParser._validate_options_type(options, CsvParserOptions, "csv")
        options = options or CsvParserOptions()
        super().__init__(options)
        self.options: CsvParserOptions = options

    def parse(self, text: Union[str, bytes]) -> Value:
        """Parse CSV text.

        Raises
        ------
        ParsingError
            If quoting is malformed, a header name repeats, or a row is
            longer than the header while ``strict_row_length`` is on

        """
        content = self._ensure_text(text)
        dialect = self._detect_csv_dialect(content[:CSV_SNIFF_SAMPLE_SIZE])
        reader = csv.reader(io.StringIO(content, newline=""), dialect)

        rows: list[dict[str, Any]] = []
        header: list[str] | None = None
        try:
            for row in self._non_empty_rows(reader):
                if header is None:
                    header = self._validate_header(row, reader.line_num)
                    continue
                rows.append(self._build_row(header, row, reader.line_num))
        except csv.Error as e:
            raise self._error(str(e), original_error=e, line=reader.line_num) from e

        logger.debug(f"Parsed CSV with {len(rows)} data row(s)")
        return self._to_value(rows)

    def _detect_csv_dialect(self, sample: str) -> type[csv.Dialect]:
        if not self.options.detect_dialect or not sample.strip():
            return _make_csv_dialect(self.options.delimiter, self.options.quote_char)

        try:
            detected = csv.Sniffer().sniff(sample, delimiters=CSV_SNIFF_DELIMITERS)
        except csv.Error as e:
            logger.debug(f"CSV dialect detection failed: {e}, using configured delimiter")
            return _make_csv_dialect(self.options.delimiter, self.options.quote_char)

        logger.debug(f"CSV Sniffer detected delimiter {detected.delimiter!r}")
        return _make_csv_dialect(detected.delimiter, self.options.quote_char or detected.quotechar)

    @staticmethod
    def _non_empty_rows(reader: Iterator[list[str]]) -> Iterator[list[str]]:
        for row in reader:
            if row:
                yield row

    def _validate_header(self, row: list[str], line: int) -> list[str]:
        seen: set[str] = set()
        for name in row:
            if name in seen:
                raise self._error(f"duplicate header column {name!r}", line=line, parsing_stage="header")
            seen.add(name)
        return row

    def _build_row(self, header: list[str], row: list[str], line: int) -> dict[str, Any]:
        if len(row) > len(header):
            if self.options.strict_row_length:
                raise self._error(
                    f"row has {len(row)} fields but the header has {len(header)}",
                    line=line,
                    parsing_stage="rows",
                )
            logger.debug(f"Dropping {len(row) - len(header)} extra field(s) on line {line}")
            row = row[: len(header)]
        elif len(row) < len(header):
            row = row + [""] * (len(header) - len(row))

        return {name: self._convert_cell(cell) for name, cell in zip(header, row)}

    def _convert_cell(self, cell: str) -> Any:
        if self.options.infer_numbers:
            number = infer_number(cell)
            if number is not None:
                return number
        return cell


def parse_csv(text: Union[str, bytes], options: Optional[CsvParserOptions] = None) -> Value:
    """Parse CSV text into an Array of row Objects.

    Raises
    ------
    ParsingError
        If the text is not valid CSV

    """
    return CsvParser(options).parse(text)


PARSER_METADATA = FormatMetadata(
    format_name="csv",
    extensions=(".csv", ".tsv"),
    parser_class=CsvParser,
    parser_options_class=CsvParserOptions,
    required_packages=(),
    description="CSV tables; one object per data row keyed by the header",
)
