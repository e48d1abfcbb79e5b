#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semdiff/diff/engine.py
"""Structural comparison of canonical value trees.

The engine walks two trees in lockstep and yields one entry per difference,
in a deterministic order:

1. Values of different kinds produce ``TypeChanged`` and are not descended
   into.
2. Objects are compared key by key: keys of the old object in their order,
   then keys only present in the new object in theirs. Keys matching
   ``ignore_keys_regex`` are skipped at every level.
3. Arrays are compared by identity when ``array_id_key`` is set and every
   element on both sides is an object holding a unique scalar under that
   key; otherwise position by position, with trailing extra elements
   reported as ``Removed`` or ``Added``.
4. Numbers are equal within ``epsilon`` (two NaNs are equal), strings after
   the configured normalization, booleans and nulls by value.

Traversal is lazy, so brief and quiet modes stop at the first difference
that passes the path filter without visiting the rest of either tree.

Examples
--------
    >>> from semdiff.diff.engine import diff
    >>> diff({"a": 1, "b": 2}, {"a": 1, "b": 3})
    [Modified(path='b', old_value=Number(value=2), new_value=Number(value=3))]

"""

from __future__ import annotations

import logging
import math
import re
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Any, Iterable, Iterator, Mapping, Optional, Union

from semdiff.diff.entries import Added, DiffEntry, DiffReport, Modified, Removed, TypeChanged
from semdiff.diff.paths import IdentitySegment, IndexSegment, KeySegment, PathSegment, join_path
from semdiff.exceptions import DepthExceededError
from semdiff.model import Array, Number, Object, String, Value, ValueKind, from_python, value_to_json
from semdiff.model.values import SCALAR_KINDS
from semdiff.options.diff import DiffOptions, validate_options
from semdiff.utils.decorators import debug_timer

logger = logging.getLogger(__name__)

_WHITESPACE_RUN = re.compile(r"\s+")

OptionsLike = Union[DiffOptions, Mapping[str, Any], None]


class DiffEngine:
    """Compare canonical value trees under a fixed set of options.

    An engine holds no state besides its options and may be reused for any
    number of comparisons.

    Parameters
    ----------
    options : DiffOptions, mapping or None, default = None
        Diff configuration; mappings are validated with
        :func:`~semdiff.options.diff.validate_options`

    Raises
    ------
    ConfigError
        If the options are invalid

    """

    def __init__(self, options: OptionsLike = None):
        """Validate and store the options."""
        self.options: DiffOptions = validate_options(options)

    def compare(self, old: Any, new: Any) -> DiffReport:
        """Compare two trees and return the entries with the "differs" status.

        Parameters
        ----------
        old, new : Value or JSON-compatible Python data
            Trees to compare; plain data is converted with
            :func:`~semdiff.model.from_python`

        Returns
        -------
        DiffReport
            All entries in normal mode, at most one in brief mode, none in
            quiet mode

        Raises
        ------
        DepthExceededError
            If either tree is nested deeper than ``max_depth``

        """
        old_value = _coerce(old)
        new_value = _coerce(new)
        entries = self.iter_entries(old_value, new_value)

        with debug_timer(logger, "Structural diff"):
            if self.options.quiet_mode:
                differs = next(entries, None) is not None
                logger.debug(f"Quiet diff finished: differs={differs}")
                return DiffReport((), differs)

            if self.options.brief_mode:
                witness = next(entries, None)
                logger.debug(f"Brief diff finished: witness={witness is not None}")
                return DiffReport((witness,) if witness is not None else (), witness is not None)

            collected = tuple(entries)

        logger.debug(f"Diff produced {len(collected)} entr{'y' if len(collected) == 1 else 'ies'}")
        return DiffReport(collected, bool(collected))

    def iter_entries(self, old: Value, new: Value) -> Iterator[DiffEntry]:
        """Yield entries that pass the path filter, in traversal order."""
        entries = self._walk(old, new, [], 0)
        path_filter = self.options.path_filter
        if path_filter is None:
            yield from entries
        else:
            yield from (entry for entry in entries if path_filter in entry.path)

    def _walk(self, old: Value, new: Value, path: list[PathSegment], depth: int) -> Iterator[DiffEntry]:
        if depth > self.options.max_depth:
            raise DepthExceededError(self.options.max_depth, join_path(path))

        if old.kind is not new.kind:
            yield TypeChanged(join_path(path), old, new)
        elif old.kind is ValueKind.OBJECT:
            yield from self._walk_object(old, new, path, depth)
        elif old.kind is ValueKind.ARRAY:
            yield from self._walk_array(old, new, path, depth)
        elif not self._scalars_equal(old, new):
            yield Modified(join_path(path), old, new)

    def _walk_object(self, old: Object, new: Object, path: list[PathSegment], depth: int) -> Iterator[DiffEntry]:
        pattern = self.options.ignore_keys_regex

        for key, old_child in old.fields.items():
            if pattern is not None and pattern.search(key):
                continue
            path.append(KeySegment(key))
            new_child = new.fields.get(key)
            if new_child is None:
                yield Removed(join_path(path), old_child)
            else:
                yield from self._walk(old_child, new_child, path, depth + 1)
            path.pop()

        for key, new_child in new.fields.items():
            if key in old.fields or (pattern is not None and pattern.search(key)):
                continue
            path.append(KeySegment(key))
            yield Added(join_path(path), new_child)
            path.pop()

    def _walk_array(self, old: Array, new: Array, path: list[PathSegment], depth: int) -> Iterator[DiffEntry]:
        id_key = self.options.array_id_key
        if id_key is not None:
            old_index = _index_by_identity(old, id_key)
            new_index = _index_by_identity(new, id_key) if old_index is not None else None
            if old_index is not None and new_index is not None:
                yield from self._walk_identified(old_index, new_index, id_key, path, depth)
                return
            logger.debug(f"Array at '{join_path(path)}' is not keyed by '{id_key}', comparing by position")

        shared = min(len(old.items), len(new.items))
        for position in range(shared):
            path.append(IndexSegment(position))
            yield from self._walk(old.items[position], new.items[position], path, depth + 1)
            path.pop()
        for position in range(shared, len(old.items)):
            path.append(IndexSegment(position))
            yield Removed(join_path(path), old.items[position])
            path.pop()
        for position in range(shared, len(new.items)):
            path.append(IndexSegment(position))
            yield Added(join_path(path), new.items[position])
            path.pop()

    def _walk_identified(
        self,
        old_index: dict[Value, Object],
        new_index: dict[Value, Object],
        id_key: str,
        path: list[PathSegment],
        depth: int,
    ) -> Iterator[DiffEntry]:
        for identity, old_element in old_index.items():
            path.append(IdentitySegment(id_key, value_to_json(identity)))
            new_element = new_index.get(identity)
            if new_element is None:
                yield Removed(join_path(path), old_element)
            else:
                yield from self._walk(old_element, new_element, path, depth + 1)
            path.pop()

        for identity, new_element in new_index.items():
            if identity in old_index:
                continue
            path.append(IdentitySegment(id_key, value_to_json(identity)))
            yield Added(join_path(path), new_element)
            path.pop()

    def _scalars_equal(self, old: Value, new: Value) -> bool:
        if isinstance(old, Number) and isinstance(new, Number):
            return self._numbers_equal(old.value, new.value)
        if isinstance(old, String) and isinstance(new, String):
            if self.options.normalizes_strings:
                return self._normalize(old.value) == self._normalize(new.value)
            return old.value == new.value
        return old == new

    def _numbers_equal(self, a: Union[int, float], b: Union[int, float]) -> bool:
        if isinstance(a, float) and isinstance(b, float) and math.isnan(a) and math.isnan(b):
            return True
        if self.options.epsilon is None:
            return a == b
        if a == b:
            # Equal infinities have an undefined difference
            return True
        try:
            return abs(a - b) <= self.options.epsilon
        except OverflowError:
            # An int beyond float range against a float: the gap cannot fit a tolerance
            return False

    def _normalize(self, text: str) -> str:
        if self.options.ignore_whitespace:
            text = _WHITESPACE_RUN.sub(" ", text).strip()
        if self.options.ignore_case:
            text = text.casefold()
        return text


def _coerce(data: Any) -> Value:
    return data if isinstance(data, Value) else from_python(data)


def _index_by_identity(array: Array, id_key: str) -> Optional[dict[Value, Object]]:
    """Map each element's id value to the element, or None if the array is not keyed."""
    index: dict[Value, Object] = {}
    for element in array.items:
        if not isinstance(element, Object):
            return None
        identity = element.fields.get(id_key)
        if identity is None or identity.kind not in SCALAR_KINDS or identity in index:
            return None
        index[identity] = element
    return index


def compare(old: Any, new: Any, options: OptionsLike = None) -> DiffReport:
    """Compare two trees and return a :class:`DiffReport`.

    Raises
    ------
    ConfigError
        If the options are invalid
    DepthExceededError
        If either tree is nested deeper than ``max_depth``

    """
    return DiffEngine(options).compare(old, new)


def diff(old: Any, new: Any, options: OptionsLike = None) -> list[DiffEntry]:
    """Return the differences between two trees as an ordered list.

    Parameters
    ----------
    old, new : Value or JSON-compatible Python data
        Trees to compare
    options : DiffOptions, mapping or None, default = None
        Diff configuration

    Returns
    -------
    list of DiffEntry
        Entries in traversal order. In brief mode the list holds at most one
        entry and in quiet mode it is always empty; use :func:`compare` or
        :func:`has_differences` for the status in those modes.

    Raises
    ------
    ConfigError
        If the options are invalid
    DepthExceededError
        If either tree is nested deeper than ``max_depth``

    Examples
    --------
        >>> diff({"a": 1}, {"a": 1, "b": 2})
        [Added(path='b', value=Number(value=2))]

    """
    return list(compare(old, new, options).entries)


def has_differences(old: Any, new: Any, options: OptionsLike = None) -> bool:
    """Return whether two trees differ, stopping at the first difference."""
    engine = DiffEngine(options)
    return next(engine.iter_entries(_coerce(old), _coerce(new)), None) is not None


def _diff_pair(old: Any, new: Any, options: DiffOptions) -> list[DiffEntry]:
    return diff(old, new, options)


def diff_many(
    pairs: Iterable[tuple[Any, Any]],
    options: OptionsLike = None,
    max_workers: Optional[int] = None,
) -> list[list[DiffEntry]]:
    """Diff independent pairs of trees in parallel worker processes.

    Parameters
    ----------
    pairs : iterable of (old, new)
        Trees to compare; values must be picklable
    options : DiffOptions, mapping or None, default = None
        Diff configuration shared by every pair
    max_workers : int or None, default = None
        Worker process count; ``None`` lets the executor decide. A value of
        1 runs the comparisons in the calling process.

    Returns
    -------
    list of list of DiffEntry
        One result per pair, in input order

    Raises
    ------
    ConfigError
        If the options are invalid
    DepthExceededError
        If any tree is nested deeper than ``max_depth``

    """
    resolved = validate_options(options)
    pairs = list(pairs)
    if not pairs:
        return []

    if max_workers == 1 or len(pairs) == 1:
        return [_diff_pair(old, new, resolved) for old, new in pairs]

    results: list[Optional[list[DiffEntry]]] = [None] * len(pairs)
    with debug_timer(logger, f"Parallel diff of {len(pairs)} pair(s)"):
        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            future_to_position = {
                executor.submit(_diff_pair, old, new, resolved): position
                for position, (old, new) in enumerate(pairs)
            }
            for future in as_completed(future_to_position):
                position = future_to_position[future]
                results[position] = future.result()
                logger.debug(f"Finished diff {position + 1}/{len(pairs)}")

    return [result if result is not None else [] for result in results]
