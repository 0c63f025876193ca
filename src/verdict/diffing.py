"""Equality checks for lists, mappings and sets that report what differs."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Sequence

from verdict.expectation import Expectation, Fail, Pass
from verdict.reasons import CollectionDiff, Custom, ListDiff
from verdict.render import Renderer, render_value

logger = logging.getLogger(__name__)

_MISSING = object()


def equal_lists(
    expected: Sequence[Any],
    actual: Sequence[Any],
    *,
    renderer: Renderer | None = None,
) -> Expectation:
    """Check two sequences are equal element by element, in order.

    On failure both sequences are reported whole; no element-level diff is
    attempted.
    """
    expected = list(expected)
    actual = list(actual)
    if expected == actual:
        return Pass()

    render = renderer or render_value
    logger.debug(f"equal_lists: {len(expected)} expected vs {len(actual)} actual elements")
    return Fail(
        given=None,
        description="equal_lists",
        reason=ListDiff(
            expected=tuple(render(item) for item in expected),
            actual=tuple(render(item) for item in actual),
        ),
    )


def _unmatched_entries(
    source: Mapping[Any, Any], other: Mapping[Any, Any]
) -> list[tuple[Any, Any]]:
    """Entries of ``source`` that ``other`` lacks or holds a different value for."""
    unmatched = []
    for key, value in source.items():
        found = other.get(key, _MISSING)
        if found is _MISSING or found != value:
            unmatched.append((key, value))
    return unmatched


def equal_dicts(
    expected: Mapping[Any, Any],
    actual: Mapping[Any, Any],
    *,
    renderer: Renderer | None = None,
) -> Expectation:
    """Check two mappings hold the same keys with the same values.

    A key present on both sides with different values is reported twice: once
    in ``missing`` with the expected value and once in ``extra`` with the
    actual one.
    """
    if dict(expected) == dict(actual):
        return Pass()

    render = renderer or render_value
    missing = _unmatched_entries(expected, actual)
    extra = _unmatched_entries(actual, expected)
    logger.debug(f"equal_dicts: {len(missing)} missing, {len(extra)} extra entries")

    def render_entry(entry: tuple[Any, Any]) -> str:
        key, value = entry
        return f"{render(key)}: {render(value)}"

    return Fail(
        given=None,
        description="equal_dicts",
        reason=CollectionDiff(
            expected=render(expected),
            actual=render(actual),
            extra=tuple(render_entry(entry) for entry in extra),
            missing=tuple(render_entry(entry) for entry in missing),
        ),
    )


def equal_sets(
    expected: Iterable[Any],
    actual: Iterable[Any],
    *,
    renderer: Renderer | None = None,
) -> Expectation:
    """Check two collections are equal as sets.

    ``missing`` and ``extra`` are rendered and sorted so the report does not
    depend on hash order.
    """
    try:
        expected = set(expected)
        actual = set(actual)
    except TypeError as e:
        message = f"equal_sets needs hashable elements: {e}"
        logger.warning(message)
        return Fail(given=None, description=message, reason=Custom())
    if expected == actual:
        return Pass()

    render = renderer or render_value
    missing = sorted(render(item) for item in expected - actual)
    extra = sorted(render(item) for item in actual - expected)
    logger.debug(f"equal_sets: {len(missing)} missing, {len(extra)} extra elements")
    return Fail(
        given=None,
        description="equal_sets",
        reason=CollectionDiff(
            expected=render(expected),
            actual=render(actual),
            extra=tuple(extra),
            missing=tuple(missing),
        ),
    )
