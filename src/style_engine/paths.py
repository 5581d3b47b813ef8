"""Path lookup and the emptiness predicate shared by the resolvers."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

__all__ = ["MISSING", "is_empty", "lookup"]


class _Missing:
    """Sentinel type for a path that does not exist in the tree."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


def _step(node: Any, key: Any) -> Any:
    """Descend one level into *node*, returning MISSING when not possible."""
    if isinstance(node, Mapping):
        return node.get(key, MISSING)
    if isinstance(node, Sequence) and not isinstance(node, (str, bytes)):
        try:
            index = int(key)
        except (TypeError, ValueError):
            return MISSING
        if -len(node) <= index < len(node):
            return node[index]
        return MISSING
    return MISSING


def lookup(tree: Any, path: Sequence[Any], default: Any = None) -> Any:
    """Walk *tree* along *path* and return the value found there.

    Mappings are indexed by key, sequences by integer-like segments. Any
    absent segment, or an attempt to descend into a scalar, yields *default*.
    Pass ``default=MISSING`` to tell a missing path apart from a stored None.
    """
    if not path:
        return default
    node = tree
    for key in path:
        node = _step(node, key)
        if node is MISSING:
            return default
    return node


def is_empty(value: Any, render_zero: bool = False) -> bool:
    """Return True when *value* means "no style configured".

    None, MISSING, False, the empty string and empty containers are empty.
    Zero, numeric or the string "0", is empty too unless *render_zero* is set.
    """
    if value is None or value is MISSING:
        return True
    if isinstance(value, bool):
        return not value
    if isinstance(value, (int, float)):
        return value == 0 and not render_zero
    if isinstance(value, str) and value == "0":
        return not render_zero
    if isinstance(value, (str, bytes, Mapping, Sequence)):
        return len(value) == 0
    return False
