#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semdiff/diff/api.py
"""Python API for rendering diff results.

This module maps output format names to renderers and provides
:func:`format_output`, the single entry point for turning an entry list into
text.
"""

from __future__ import annotations

from typing import Iterable, Union

from semdiff.diff.renderers import JsonDiffRenderer, NativeDiffRenderer, YamlDiffRenderer
from semdiff.diff.renderers.base import BaseDiffRenderer, EntryLike
from semdiff.exceptions import FormatError
from semdiff.options.diff import OutputFormat


def get_renderer(format_name: Union[str, OutputFormat]) -> BaseDiffRenderer:
    """Return a renderer for ``format_name``.

    Raises
    ------
    FormatError
        If ``format_name`` is not a known output format

    """
    try:
        output_format = OutputFormat.parse(format_name)
    except ValueError as e:
        raise FormatError(format_type=str(format_name), supported_formats=OutputFormat.names(), original_error=e) from e

    if output_format is OutputFormat.JSON:
        return JsonDiffRenderer()
    if output_format is OutputFormat.YAML:
        return YamlDiffRenderer()
    return NativeDiffRenderer()


def format_output(entries: Iterable[EntryLike], format_name: Union[str, OutputFormat] = OutputFormat.NATIVE) -> str:
    """Render diff entries in the named output format.

    Parameters
    ----------
    entries : iterable of DiffEntry or dict
        Entries in the order they should appear; dictionaries must have the
        external entry shape
    format_name : {"native", "json", "yaml"} or OutputFormat, default "native"
        Output format. ``"diffx"`` and ``"text"`` are accepted for native,
        ``"yml"`` for YAML.

    Returns
    -------
    str
        Rendered output. No entries render as ``""`` (native) or an empty
        array (JSON, YAML).

    Raises
    ------
    FormatError
        If ``format_name`` is not a known output format
    ValidationError
        If a dictionary entry does not have the external entry shape

    Examples
    --------
        >>> from semdiff.diff import diff
        >>> format_output(diff({"a": 1}, {"a": 2}), "native")
        '~ a: 1 -> 2'

    """
    return get_renderer(format_name).render(entries)
