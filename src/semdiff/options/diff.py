#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semdiff/options/diff.py
"""Options controlling the diff engine and output shaping.

:class:`DiffOptions` is validated once, when it is constructed: the
key-exclusion regex is compiled, the output format name is resolved and the
numeric bounds are checked. A valid instance is immutable and can be shared
freely between threads and worker processes.

:func:`validate_options` is the entry point for raw option mappings coming
from host bindings or configuration files; it accepts both ``snake_case``
and ``camelCase`` keys.
"""

from __future__ import annotations

import math
import re
import sys
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Mapping, Optional, Union

from semdiff.constants import (
    DEFAULT_EPSILON,
    DEFAULT_MAX_DEPTH,
    DEPTH_STACK_RESERVE,
    FRAMES_PER_DEPTH_LEVEL,
    OUTPUT_FORMAT_ALIASES,
)
from semdiff.exceptions import ConfigError, InvalidPatternError, UnknownFormatError
from semdiff.options.base import CloneFrozenMixin


class OutputFormat(str, Enum):
    """Rendering targets supported by the output formatter."""

    NATIVE = "native"
    JSON = "json"
    YAML = "yaml"

    @classmethod
    def parse(cls, name: Union[str, "OutputFormat"]) -> "OutputFormat":
        """Resolve a format name (case-insensitive, aliases allowed).

        Raises
        ------
        ValueError
            If the name does not identify a known format

        """
        if isinstance(name, OutputFormat):
            return name
        if not isinstance(name, str):
            raise ValueError(f"Output format must be a string, got {type(name).__name__}")
        normalized = name.strip().lower()
        normalized = OUTPUT_FORMAT_ALIASES.get(normalized, normalized)
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(f"Unknown output format: {name!r}") from None

    @classmethod
    def names(cls) -> list[str]:
        """Return canonical names of all formats."""
        return [member.value for member in cls]


@dataclass(frozen=True)
class DiffOptions(CloneFrozenMixin):
    """Configuration for a diff run.

    Parameters
    ----------
    epsilon : float or None, default None
        Maximum absolute difference at which two numbers are still equal.
        ``None`` means exact comparison.
    array_id_key : str or None, default None
        Object field used to match array elements by value instead of
        position. ``None`` compares arrays positionally.
    ignore_keys_regex : re.Pattern or str or None, default None
        Object keys matching this pattern (``re.search``) are skipped entirely.
        Strings are compiled on construction.
    path_filter : str or None, default None
        Keep only entries whose path contains this substring.
    output_format : OutputFormat or str, default "native"
        Preferred rendering target for callers that format the result.
    ignore_whitespace : bool, default False
        Trim and collapse whitespace runs in strings before comparing.
    ignore_case : bool, default False
        Case-fold strings before comparing.
    brief_mode : bool, default False
        Stop at the first qualifying difference; the result holds at most
        that one entry.
    quiet_mode : bool, default False
        Stop at the first qualifying difference and return no entries; only
        the "trees differ" status is reported.
    max_depth : int, default 256
        Maximum nesting depth walked before ``DepthExceededError``. Must not
        exceed :func:`max_depth_ceiling`, so the guard always fires before
        the interpreter runs out of stack.

    Raises
    ------
    InvalidPatternError
        If ``ignore_keys_regex`` does not compile
    UnknownFormatError
        If ``output_format`` names an unknown format
    ConfigError
        If any other field has the wrong type or is out of range

    """

    epsilon: Optional[float] = field(
        default=DEFAULT_EPSILON,
        metadata={"help": "Numeric tolerance for number comparison", "type": float, "importance": "core"},
    )
    array_id_key: Optional[str] = field(
        default=None,
        metadata={"help": "Object key used to match array elements by identity", "importance": "core"},
    )
    ignore_keys_regex: Optional[re.Pattern[str]] = field(
        default=None,
        metadata={"help": "Skip object keys matching this regular expression", "importance": "core"},
    )
    path_filter: Optional[str] = field(
        default=None,
        metadata={"help": "Only report differences whose path contains this text", "importance": "core"},
    )
    output_format: OutputFormat = field(
        default=OutputFormat.NATIVE,
        metadata={"help": "Output format: native, json or yaml", "importance": "core"},
    )
    ignore_whitespace: bool = field(
        default=False,
        metadata={"help": "Ignore leading, trailing and repeated whitespace in strings", "importance": "core"},
    )
    ignore_case: bool = field(
        default=False,
        metadata={"help": "Ignore case differences in strings", "importance": "core"},
    )
    brief_mode: bool = field(
        default=False,
        metadata={"help": "Report only whether the inputs differ", "importance": "advanced"},
    )
    quiet_mode: bool = field(
        default=False,
        metadata={"help": "Suppress entries; report only the difference status", "importance": "advanced"},
    )
    max_depth: int = field(
        default=DEFAULT_MAX_DEPTH,
        metadata={"help": "Maximum nesting depth compared before failing", "type": int, "importance": "security"},
    )

    def __post_init__(self) -> None:
        """Compile the pattern, resolve the format and check ranges."""
        if self.epsilon is not None:
            if isinstance(self.epsilon, bool) or not isinstance(self.epsilon, (int, float)):
                raise ConfigError(
                    f"epsilon must be a number, got {type(self.epsilon).__name__}",
                    parameter_name="epsilon",
                    parameter_value=self.epsilon,
                )
            if math.isnan(self.epsilon) or self.epsilon < 0:
                raise ConfigError(
                    f"epsilon must be a non-negative number, got {self.epsilon}",
                    parameter_name="epsilon",
                    parameter_value=self.epsilon,
                )

        for name in ("array_id_key", "path_filter"):
            current = getattr(self, name)
            if current is not None and not isinstance(current, str):
                raise ConfigError(
                    f"{name} must be a string, got {type(current).__name__}",
                    parameter_name=name,
                    parameter_value=current,
                )

        if self.ignore_keys_regex is not None and not isinstance(self.ignore_keys_regex, re.Pattern):
            object.__setattr__(self, "ignore_keys_regex", compile_key_pattern(self.ignore_keys_regex))

        try:
            resolved = OutputFormat.parse(self.output_format)
        except ValueError:
            raise UnknownFormatError(str(self.output_format), OutputFormat.names()) from None
        object.__setattr__(self, "output_format", resolved)

        for name in ("ignore_whitespace", "ignore_case", "brief_mode", "quiet_mode"):
            current = getattr(self, name)
            if not isinstance(current, bool):
                raise ConfigError(
                    f"{name} must be a boolean, got {type(current).__name__}",
                    parameter_name=name,
                    parameter_value=current,
                )

        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int) or self.max_depth <= 0:
            raise ConfigError(
                f"max_depth must be a positive integer, got {self.max_depth!r}",
                parameter_name="max_depth",
                parameter_value=self.max_depth,
            )

        ceiling = max_depth_ceiling()
        if self.max_depth > ceiling:
            raise ConfigError(
                f"max_depth {self.max_depth} exceeds {ceiling}, the deepest nesting the interpreter "
                f"recursion limit ({sys.getrecursionlimit()}) can walk",
                parameter_name="max_depth",
                parameter_value=self.max_depth,
            )

    @property
    def normalizes_strings(self) -> bool:
        """Whether string comparison applies any normalization."""
        return self.ignore_whitespace or self.ignore_case

    @property
    def stops_early(self) -> bool:
        """Whether the engine may stop at the first qualifying difference."""
        return self.brief_mode or self.quiet_mode


def max_depth_ceiling() -> int:
    """Return the largest max_depth the current recursion limit can walk.

    Each nesting level holds up to three generator frames (value, container
    and identity-matching walkers); a fixed reserve is kept for the caller.
    Raising the limit with :func:`sys.setrecursionlimit` raises the ceiling.
    """
    return max(1, (sys.getrecursionlimit() - DEPTH_STACK_RESERVE) // FRAMES_PER_DEPTH_LEVEL)


def compile_key_pattern(pattern: Any) -> re.Pattern[str]:
    """Compile a key-exclusion pattern.

    Raises
    ------
    InvalidPatternError
        If ``pattern`` is not a string or does not compile

    """
    if not isinstance(pattern, str):
        raise InvalidPatternError(
            repr(pattern), message=f"ignore_keys_regex must be a string, got {type(pattern).__name__}"
        )
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidPatternError(pattern, original_error=e) from e


# camelCase spellings used by host bindings (e.g. JavaScript callers)
_OPTION_ALIASES = {
    "arrayIdKey": "array_id_key",
    "ignoreKeysRegex": "ignore_keys_regex",
    "pathFilter": "path_filter",
    "outputFormat": "output_format",
    "ignoreWhitespace": "ignore_whitespace",
    "ignoreCase": "ignore_case",
    "briefMode": "brief_mode",
    "quietMode": "quiet_mode",
    "maxDepth": "max_depth",
}


def validate_options(raw: Union[DiffOptions, Mapping[str, Any], None] = None) -> DiffOptions:
    """Validate raw option values and build a :class:`DiffOptions`.

    Parameters
    ----------
    raw : DiffOptions, mapping or None
        A ready options object (returned unchanged), a mapping of option
        names to values, or ``None`` for defaults. Keys may be ``snake_case``
        or ``camelCase``; ``None`` values mean "use the default".

    Returns
    -------
    DiffOptions
        Validated, immutable options

    Raises
    ------
    InvalidPatternError
        If ``ignore_keys_regex`` does not compile
    UnknownFormatError
        If ``output_format`` is not a known format
    ConfigError
        If an option name is unknown or a value has the wrong type

    Examples
    --------
        >>> options = validate_options({"epsilon": 0.01, "ignoreKeysRegex": "^_"})
        >>> options.ignore_keys_regex.pattern
        '^_'

    """
    if raw is None:
        return DiffOptions()
    if isinstance(raw, DiffOptions):
        return raw
    if not isinstance(raw, Mapping):
        raise ConfigError(
            f"Options must be a mapping or DiffOptions, got {type(raw).__name__}",
            parameter_name="options",
            parameter_value=raw,
        )

    known = {f.name for f in fields(DiffOptions)}
    kwargs: dict[str, Any] = {}
    seen: set[str] = set()
    for key, value in raw.items():
        name = _OPTION_ALIASES.get(key, key)
        if name not in known:
            raise ConfigError(f"Unknown diff option: {key!r}", parameter_name=str(key), parameter_value=value)
        if name in seen:
            raise ConfigError(f"Diff option given twice: {key!r}", parameter_name=name, parameter_value=value)
        seen.add(name)
        if value is not None:
            kwargs[name] = value

    return DiffOptions(**kwargs)
