"""Reparse rendered text back into value-tree nodes."""

from __future__ import annotations

from typing import Any

import yaml
from yaml import YAMLError

from jtree.exceptions import RenderFailed

_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class ValueLoader(yaml.SafeLoader):
    """SafeLoader that leaves timestamps as plain strings."""


ValueLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def parse_value(source: str) -> Any:
    """Parse YAML text into a value. Empty text parses to None.

    Only null, bool, number, string, list and string-keyed mapping nodes are
    accepted; explicit tags such as !!set, !!binary or !!omap are rejected.

    Raises:
        RenderFailed: If the text is not valid YAML or leaves the value tree.
    """
    if not isinstance(source, str):
        raise TypeError("`source` must be a string containing YAML")

    try:
        value = yaml.load(source, Loader=ValueLoader)
    except YAMLError as exc:
        raise RenderFailed(f"Failed to parse rendered value {source!r}: {exc}") from exc

    _check_value(value, source)
    return value


def _check_value(value: Any, source: str) -> None:
    if value is None or isinstance(value, (bool, int, float, str)):
        return
    if isinstance(value, list):
        for item in value:
            _check_value(item, source)
        return
    if isinstance(value, dict):
        for key, item in value.items():
            if not isinstance(key, str):
                raise RenderFailed(
                    f"Rendered value {source!r} has non-string mapping key {key!r}"
                )
            _check_value(item, source)
        return
    raise RenderFailed(
        f"Rendered value {source!r} parsed to unsupported {type(value).__name__}"
    )
