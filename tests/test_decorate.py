"""Tests for lvlog.decorate — prefixes, critical wrapper, color markup."""

import sys

import pytest
from rich.text import Text

from lvlog.decorate import (
    CRITICAL_COLOR, INFO_COLOR, NULL_PLACEHOLDER, SPAM_COLOR,
    color_style, colorize_string, decorate_critical, format_scope,
    prefix_scope, scope_of, stringify,
)


MODULE = __name__.rsplit('.', 1)[-1]


def _module_level_scope():
    return scope_of(sys._getframe())


def test_color_table():
    """Info is cyan, spam is white, critical is orange-red."""
    assert INFO_COLOR == "#00FFFF"
    assert SPAM_COLOR == "#FFFFFF"
    assert CRITICAL_COLOR == "#FF4500"


def test_stringify_none():
    assert stringify(None) == NULL_PLACEHOLDER == "None"


def test_stringify_objects():
    assert stringify(3.5) == "3.5"
    assert stringify("text") == "text"


def test_decorate_critical():
    assert decorate_critical("Critical") == "!!! Critical !!!"


def test_prefix_scope():
    assert prefix_scope("msg", "Player.jump") == "[Player.jump] msg"
    assert prefix_scope("msg", ("Player", "jump")) == "[Player.jump] msg"


def test_format_scope_passthrough():
    assert format_scope("A.b") == "A.b"


# ---------------------------------------------------------------------------
# Scope derivation
# ---------------------------------------------------------------------------
class TestScopeOf:

    def test_method_frame(self):
        assert scope_of(sys._getframe()) == "TestScopeOf.test_method_frame"

    def test_module_function_frame(self):
        assert _module_level_scope() == f"{MODULE}._module_level_scope"

    @pytest.mark.skipif(sys.version_info < (3, 11),
                        reason="qualified code names need Python 3.11+")
    def test_nested_function_drops_locals(self):
        def inner():
            return scope_of(sys._getframe())
        assert inner() == "test_nested_function_drops_locals.inner"

    def test_classmethod_frame(self):
        class Spawner:
            @classmethod
            def spawn(cls):
                return scope_of(sys._getframe())
        assert Spawner.spawn() == "Spawner.spawn"


# ---------------------------------------------------------------------------
# Color markup
# ---------------------------------------------------------------------------
class TestColorMarkup:

    def test_colorize_wraps(self):
        assert colorize_string("hi", "#00FFFF") == "[#00FFFF]hi[/]"

    def test_colorize_escapes_markup(self):
        assert colorize_string("[red]x", "#FFFFFF") == "[#FFFFFF]\\[red]x[/]"

    def test_markup_renders_back_to_text(self):
        original = "[Player.jump] [red]literal"
        assert Text.from_markup(colorize_string(original, "#00FFFF")).plain == original

    def test_multiline_colorized(self):
        text = colorize_string("a\nb", "#FFFFFF")
        assert Text.from_markup(text).plain == "a\nb"

    @pytest.mark.parametrize("value,expected", [
        ("#00ff00", "#00FF00"),
        ("ff4500", "#FF4500"),
        (" #ABCDEF ", "#ABCDEF"),
        (None, None),
    ])
    def test_color_style(self, value, expected):
        assert color_style(value) == expected

    @pytest.mark.parametrize("value", ["red", "#FFF", "#GGGGGG"])
    def test_color_style_rejects(self, value):
        with pytest.raises(ValueError):
            color_style(value)
