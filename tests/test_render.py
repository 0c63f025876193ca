"""Tests for value rendering."""

import pytest

from verdict.render import is_float, make_renderer, render_value


class _Broken:
    def __repr__(self):
        raise RuntimeError("no repr")


@pytest.mark.parametrize(
    "value,expected",
    [
        (1, "1"),
        ("a", "'a'"),
        (None, "None"),
        (1.5, "1.5"),
        ([1, "a"], "[1, 'a']"),
        ((1,), "(1,)"),
        ((1, 2), "(1, 2)"),
        ({"a": [1]}, "{'a': [1]}"),
        (set(), "set()"),
        ({3, 1, 2}, "{1, 2, 3}"),
        (frozenset({"b", "a"}), "frozenset({'a', 'b'})"),
        ([{"y", "x"}], "[{'x', 'y'}]"),
    ],
)
def test_render_value(value, expected):
    assert render_value(value) == expected


def test_render_value_never_raises():
    assert render_value(_Broken()) == "<unrenderable _Broken>"


def test_is_float():
    assert is_float(1.0) is True
    assert is_float(1) is False
    assert is_float(True) is False
    assert is_float("1.0") is False


def test_make_renderer_without_limit_is_default():
    assert make_renderer() is render_value


def test_make_renderer_truncates():
    render = make_renderer(max_length=10)
    assert render("short") == "'short'"
    assert render("a much longer string") == "'a much..."
    assert len(render(list(range(100)))) == 10


@pytest.mark.parametrize("max_length", [0, 2, 3])
def test_make_renderer_rejects_limits_shorter_than_ellipsis(max_length):
    with pytest.raises(ValueError, match="at least 4"):
        make_renderer(max_length=max_length)


def test_make_renderer_never_exceeds_limit():
    render = make_renderer(max_length=4)
    assert render("abcdef") == "'..."
    assert len(render(list(range(50)))) == 4
