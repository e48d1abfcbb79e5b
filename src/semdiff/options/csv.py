#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semdiff/options/csv.py
"""Options for CSV parsing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from semdiff.constants import DEFAULT_CSV_DELIMITER, DEFAULT_CSV_DETECT_DIALECT, DEFAULT_CSV_INFER_NUMBERS
from semdiff.options.base import BaseParserOptions


@dataclass(frozen=True)
class CsvParserOptions(BaseParserOptions):
    """Configuration options for CSV parsing.

    The document becomes an Array with one Object per data row, keyed by the
    header row.

    Parameters
    ----------
    delimiter : str, default = ","
        Field delimiter. Ignored when ``detect_dialect`` finds one.
    quote_char : str or None, default = None
        Quote character (``"`` when None).
    detect_dialect : bool, default = False
        Sniff the delimiter and quoting from the first lines of the input.
    infer_numbers : bool, default = False
        If True, cells that parse as an integer or float become Number.
        If False every cell is a String.
    strict_row_length : bool, default = True
        If True, rows with more cells than the header raise a parse error.
        If False extra cells are dropped. Short rows are always padded with
        empty strings.

    """

    delimiter: str = field(
        default=DEFAULT_CSV_DELIMITER,
        metadata={"help": "Field delimiter character", "importance": "core"},
    )
    quote_char: Optional[str] = field(
        default=None,
        metadata={"help": "Quote character", "importance": "advanced"},
    )
    detect_dialect: bool = field(
        default=DEFAULT_CSV_DETECT_DIALECT,
        metadata={"help": "Sniff delimiter and quoting from the input", "importance": "advanced"},
    )
    infer_numbers: bool = field(
        default=DEFAULT_CSV_INFER_NUMBERS,
        metadata={"help": "Convert numeric cells to numbers", "importance": "core"},
    )
    strict_row_length: bool = field(
        default=True,
        metadata={"help": "Fail on rows longer than the header", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate single-character settings."""
        super().__post_init__()
        if len(self.delimiter) != 1:
            raise ValueError(f"delimiter must be a single character, got {self.delimiter!r}")
        if self.quote_char is not None and len(self.quote_char) != 1:
            raise ValueError(f"quote_char must be a single character, got {self.quote_char!r}")
