"""Typed navigation over decoded JSON response bodies."""

from __future__ import annotations

from typing import Any, TypeVar

from .exceptions import DecodeShapeError

T = TypeVar("T")

_MISSING = object()

_JSON_NAMES: dict[type, str] = {
    dict: "object",
    list: "array",
    str: "string",
    int: "integer",
    float: "number",
    bool: "boolean",
}


def _type_name(kind: type) -> str:
    return _JSON_NAMES.get(kind, kind.__name__)


def _matches(value: Any, kind: type) -> bool:
    # bool is a subclass of int, but JSON treats them as distinct types
    if kind is not bool and isinstance(value, bool):
        return False
    if kind is float:
        return isinstance(value, (int, float))
    return isinstance(value, kind)


def _lookup(data: Any, path: tuple[str, ...]) -> Any:
    node = data
    for i, key in enumerate(path):
        if not isinstance(node, dict):
            raise DecodeShapeError(".".join(path[:i]) or "$", "object", node)
        if key not in node:
            return _MISSING
        node = node[key]
    return node


def require(data: Any, *path: str, kind: type[T]) -> T:
    """Return the value at ``path`` or raise DecodeShapeError."""
    value = _lookup(data, path)
    dotted = ".".join(path)
    if value is _MISSING:
        raise DecodeShapeError(dotted, _type_name(kind))
    if not _matches(value, kind):
        raise DecodeShapeError(dotted, _type_name(kind), value)
    return value


def optional(data: Any, *path: str, kind: type[T], default: Any = None) -> Any:
    """Like require, but absent or null leaves yield ``default``."""
    value = _lookup(data, path)
    if value is _MISSING or value is None:
        return default
    if not _matches(value, kind):
        raise DecodeShapeError(".".join(path), _type_name(kind), value)
    return value


def require_body(body: Any, context: str) -> dict[str, Any]:
    """A success status must carry a JSON object body."""
    if body is None:
        raise DecodeShapeError(f"{context}:$", "object")
    if not isinstance(body, dict):
        raise DecodeShapeError(f"{context}:$", "object", body)
    return body
