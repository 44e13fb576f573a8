"""Accessors for untyped JSON trees.

Documents are walked without assuming any field is present. A missing
key and a value of the wrong type are treated the same way: the caller
gets its default back.
"""

from typing import Any


def as_mapping(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def get_mapping(node: Any, key: str) -> dict:
    """Return ``node[key]`` if it is a mapping, else an empty dict."""
    return as_mapping(as_mapping(node).get(key))


def get_list(node: Any, key: str) -> list:
    value = as_mapping(node).get(key)
    return value if isinstance(value, list) else []


def get_str(node: Any, key: str, default: str = "") -> str:
    value = as_mapping(node).get(key)
    return value if isinstance(value, str) and value else default


def get_path(node: Any, *keys: str) -> dict | None:
    """Follow ``keys`` through nested mappings.

    Returns the mapping found at the end, or None when any step is
    missing or is not a mapping.
    """
    for key in keys:
        if not isinstance(node, dict) or key not in node:
            return None
        node = node[key]
    return node if isinstance(node, dict) else None
