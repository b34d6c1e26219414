"""Tests for condition evaluation."""

import pytest

from jtree import OmitRequested, RenderFailed, is_render_string, is_render_value


def test_is_render_string():
    assert is_render_string("true", {}) is True
    assert is_render_string("false", {}) is False
    assert is_render_string("boo == 'test'", {"boo": "test"}) is True
    assert is_render_string("boo == 'test'", {"boo": "other"}) is False
    assert is_render_string("1 > 2") is False


def test_is_render_string_undefined_fails():
    with pytest.raises(RenderFailed):
        is_render_string("missing", {})


def test_is_render_string_omit():
    with pytest.raises(OmitRequested):
        is_render_string("x | default(omit())", {})


def test_is_render_value():
    assert is_render_value(True) is True
    assert is_render_value(False) is False
    assert is_render_value("x == 1", {"x": 1}) is True
    assert is_render_value("x == 1", {"x": 2}) is False


def test_is_render_value_rejects_other_kinds():
    with pytest.raises(RenderFailed):
        is_render_value(1)
