"""Tests for the template action."""

import pytest
from pydantic import ValidationError

from jtree import OmitRequested, RenderFailed
from jtree.modules import CopyParams, exec_template, render_content


def test_render_content():
    params = render_content(
        "Hello {{ name }}\n", "/tmp/out.txt", {"name": "world"}, mode="0400"
    )

    assert params == CopyParams(content="Hello world\n", dest="/tmp/out.txt", mode="0400")


def test_render_content_keeps_text():
    """File content is not reparsed: numbers stay text."""
    params = render_content("{{ x }}", "/tmp/out.txt", {"x": 1})
    assert params.content == "1"
    assert params.mode is None


def test_render_content_undefined_fails():
    with pytest.raises(RenderFailed):
        render_content("{{ missing }}", "/tmp/out.txt", {})


def test_render_content_omit():
    with pytest.raises(OmitRequested):
        render_content("{{ omit() }}", "/tmp/out.txt", {})


def test_exec_template_hands_params_to_copier():
    copied = []

    def copy_file(params: CopyParams) -> str:
        copied.append(params)
        return "changed"

    result = exec_template("{{ a }}-{{ b }}", "/tmp/x", {"a": 1, "b": 2}, copy_file)

    assert result == "changed"
    assert copied == [CopyParams(content="1-2", dest="/tmp/x")]


def test_copy_params_is_frozen():
    params = CopyParams(content="x", dest="/tmp/x")
    with pytest.raises(ValidationError):
        params.dest = "/tmp/y"  # type: ignore[misc]
