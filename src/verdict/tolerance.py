"""Floating-point tolerances and the ``within`` / ``not_within`` checks."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from verdict.expectation import Expectation, Fail, Pass
from verdict.reasons import Comparison, Custom
from verdict.render import Renderer, render_value

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Absolute:
    """Allow ``value`` of fixed deviation either side of the reference."""

    value: float


@dataclass(frozen=True)
class Relative:
    """Allow a deviation proportional to the magnitude of either operand."""

    value: float


@dataclass(frozen=True)
class AbsoluteOrRelative:
    """Pass if either the absolute or the relative band holds."""

    absolute: float
    relative: float


FloatingPointTolerance = Union[Absolute, Relative, AbsoluteOrRelative]


def absolute(tolerance: FloatingPointTolerance) -> float:
    """The absolute component of ``tolerance``; 0 for a purely relative one."""
    if isinstance(tolerance, Absolute):
        return tolerance.value
    if isinstance(tolerance, AbsoluteOrRelative):
        return tolerance.absolute
    return 0.0


def relative(tolerance: FloatingPointTolerance) -> float:
    """The relative component of ``tolerance``; 0 for a purely absolute one."""
    if isinstance(tolerance, Relative):
        return tolerance.value
    if isinstance(tolerance, AbsoluteOrRelative):
        return tolerance.relative
    return 0.0


def _in_band(centre: float, margin: float, value: float) -> bool:
    return centre - margin <= value <= centre + margin


def within_compare(tolerance: FloatingPointTolerance, a: float, b: float) -> bool:
    """Whether ``b`` is within ``tolerance`` of the reference ``a``.

    The relative band is checked around both operands, so swapping ``a`` and
    ``b`` never changes the answer. Absolute and relative bands are OR-ed.
    """
    if a == b:
        return True

    if _in_band(a, absolute(tolerance), b):
        return True

    rel = relative(tolerance)
    return _in_band(a, abs(a * rel), b) or _in_band(b, abs(b * rel), a)


def validate_tolerance(tolerance: FloatingPointTolerance) -> Fail | None:
    """Return a failure for a tolerance with negative components, else ``None``."""
    abs_negative = absolute(tolerance) < 0
    rel_negative = relative(tolerance) < 0

    if abs_negative and rel_negative:
        message = (
            f"negative absolute and relative tolerance: {tolerance!r}; "
            "tolerances must be non-negative"
        )
    elif abs_negative:
        message = (
            f"negative absolute tolerance: {absolute(tolerance)!r}; "
            "tolerances must be non-negative"
        )
    elif rel_negative:
        message = (
            f"negative relative tolerance: {relative(tolerance)!r}; "
            "tolerances must be non-negative"
        )
    else:
        return None

    logger.warning(message)
    return Fail(given=None, description=message, reason=Custom())


def _tolerance_check(
    name: str,
    tolerance: FloatingPointTolerance,
    expected: float,
    actual: float,
    want_within: bool,
    renderer: Renderer | None,
) -> Expectation:
    invalid = validate_tolerance(tolerance)
    if invalid is not None:
        return invalid

    inside = within_compare(tolerance, expected, actual)
    logger.debug(f"{name}: {actual!r} vs {expected!r} with {tolerance!r}, within={inside}")
    if inside == want_within:
        return Pass()

    render = renderer or render_value
    return Fail(
        given=None,
        description=name,
        reason=Comparison(expected=render(expected), actual=render(actual)),
    )


def within(
    tolerance: FloatingPointTolerance,
    expected: float,
    actual: float,
    *,
    renderer: Renderer | None = None,
) -> Expectation:
    """Check that ``actual`` lies within ``tolerance`` of ``expected``.

    A tolerance with a negative component fails before any comparison runs.
    """
    return _tolerance_check("within", tolerance, expected, actual, True, renderer)


def not_within(
    tolerance: FloatingPointTolerance,
    expected: float,
    actual: float,
    *,
    renderer: Renderer | None = None,
) -> Expectation:
    """Check that ``actual`` lies outside ``tolerance`` of ``expected``."""
    return _tolerance_check("not_within", tolerance, expected, actual, False, renderer)
