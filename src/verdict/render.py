"""Rendering values for display in failure reasons.

The engine never formats values itself: every check takes an optional
``renderer`` and falls back to :func:`render_value`. Any callable that turns a
value into a string works, as long as it is deterministic and never raises.
"""

from __future__ import annotations

from typing import Any, Callable

Renderer = Callable[[Any], str]


def is_float(value: Any) -> bool:
    """Whether ``value`` is a floating-point number.

    Checks the runtime type, so ``bool`` and ``int`` are not floats while
    subclasses of ``float`` (``numpy.float64`` included) are.
    """
    return isinstance(value, float)


def render_value(value: Any) -> str:
    """Render ``value`` with ``repr``, with sets in sorted order.

    Set iteration order depends on hashing, so set elements are rendered
    first and then sorted to keep the output stable between runs.
    """
    try:
        return _render(value)
    except Exception:
        return f"<unrenderable {type(value).__name__}>"


def _render(value: Any) -> str:
    if isinstance(value, (set, frozenset)):
        inner = ", ".join(sorted(_render(item) for item in value))
        if isinstance(value, frozenset):
            return f"frozenset({{{inner}}})" if value else "frozenset()"
        return f"{{{inner}}}" if value else "set()"
    if isinstance(value, list):
        return "[" + ", ".join(_render(item) for item in value) + "]"
    if type(value) is tuple:
        if len(value) == 1:
            return f"({_render(value[0])},)"
        return "(" + ", ".join(_render(item) for item in value) + ")"
    if type(value) is dict:
        entries = ", ".join(f"{_render(k)}: {_render(v)}" for k, v in value.items())
        return "{" + entries + "}"
    return repr(value)


def make_renderer(max_length: int | None = None) -> Renderer:
    """Build a renderer that truncates output longer than ``max_length``."""
    if max_length is None:
        return render_value
    if max_length < 4:
        raise ValueError(f"max_length must be at least 4, got {max_length}")

    def _truncating(value: Any) -> str:
        formatted = render_value(value)
        if len(formatted) > max_length:
            return formatted[: max_length - 3] + "..."
        return formatted

    return _truncating
