"""Equality, ordering and membership checks.

Every check takes the expected value first and the actual value second, and
reports both rendered in its failure reason::

    less_than(10, 3)     # passes: 3 < 10
    equal("a", "b")      # Fail("equal", Equality(expected="'a'", actual="'b'"))
"""

from __future__ import annotations

import logging
import operator
from typing import Any, Callable

from verdict.expectation import Expectation, Fail, Pass
from verdict.reasons import Comparison, Custom, Equality, FailureReason
from verdict.render import Renderer, is_float, render_value

logger = logging.getLogger(__name__)

FLOAT_EQUALITY_MESSAGE = (
    "Floating point values cannot be checked for exact equality. "
    "Use within or not_within with a tolerance instead."
)

ReasonBuilder = Callable[..., FailureReason]


def _check(
    name: str,
    predicate: Callable[[Any, Any], bool],
    reason: ReasonBuilder,
    expected: Any,
    actual: Any,
    renderer: Renderer | None,
) -> Expectation:
    """Apply ``predicate(actual, expected)`` and build the verdict."""
    try:
        holds = predicate(actual, expected)
    except TypeError:
        message = (
            f"{name} cannot compare {type(actual).__name__} "
            f"with {type(expected).__name__}"
        )
        logger.warning(message)
        return Fail(given=None, description=message, reason=Custom())

    if holds:
        return Pass()

    render = renderer or render_value
    expected_text = render(expected)
    actual_text = render(actual)
    logger.debug(f"{name} failed for actual={actual_text} expected={expected_text}")
    return Fail(
        given=None,
        description=name,
        reason=reason(expected=expected_text, actual=actual_text),
    )


def _refuse_floats(expected: Any, actual: Any) -> Fail | None:
    if is_float(expected) or is_float(actual):
        logger.warning("Refusing exact equality check on a floating point value")
        return Fail(given=None, description=FLOAT_EQUALITY_MESSAGE, reason=Custom())
    return None


def equal(expected: Any, actual: Any, *, renderer: Renderer | None = None) -> Expectation:
    """Check that ``actual == expected``. Floats are refused."""
    refused = _refuse_floats(expected, actual)
    if refused is not None:
        return refused
    return _check("equal", operator.eq, Equality, expected, actual, renderer)


def not_equal(expected: Any, actual: Any, *, renderer: Renderer | None = None) -> Expectation:
    """Check that ``actual != expected``. Floats are refused."""
    refused = _refuse_floats(expected, actual)
    if refused is not None:
        return refused
    return _check("not_equal", operator.ne, Equality, expected, actual, renderer)


def less_than(expected: Any, actual: Any, *, renderer: Renderer | None = None) -> Expectation:
    """Check that ``actual < expected``."""
    return _check("less_than", operator.lt, Comparison, expected, actual, renderer)


def at_most(expected: Any, actual: Any, *, renderer: Renderer | None = None) -> Expectation:
    """Check that ``actual <= expected``."""
    return _check("at_most", operator.le, Comparison, expected, actual, renderer)


def greater_than(expected: Any, actual: Any, *, renderer: Renderer | None = None) -> Expectation:
    """Check that ``actual > expected``."""
    return _check("greater_than", operator.gt, Comparison, expected, actual, renderer)


def at_least(expected: Any, actual: Any, *, renderer: Renderer | None = None) -> Expectation:
    """Check that ``actual >= expected``."""
    return _check("at_least", operator.ge, Comparison, expected, actual, renderer)


def be_true(actual: Any, *, renderer: Renderer | None = None) -> Expectation:
    return _check("be_true", operator.is_, Equality, True, actual, renderer)


def be_false(actual: Any, *, renderer: Renderer | None = None) -> Expectation:
    return _check("be_false", operator.is_, Equality, False, actual, renderer)


def be_none(actual: Any, *, renderer: Renderer | None = None) -> Expectation:
    return _check("be_none", operator.is_, Equality, None, actual, renderer)


def not_none(actual: Any, *, renderer: Renderer | None = None) -> Expectation:
    return _check("not_none", operator.is_not, Equality, None, actual, renderer)


def contain(item: Any, container: Any, *, renderer: Renderer | None = None) -> Expectation:
    """Check that ``item in container``.

    The reason reports the missing item as expected and the container as
    actual.
    """
    return _check(
        "contain",
        lambda actual, expected: expected in actual,
        Comparison,
        item,
        container,
        renderer,
    )


def not_contain(item: Any, container: Any, *, renderer: Renderer | None = None) -> Expectation:
    return _check(
        "not_contain",
        lambda actual, expected: expected not in actual,
        Comparison,
        item,
        container,
        renderer,
    )
