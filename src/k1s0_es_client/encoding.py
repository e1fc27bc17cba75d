"""Request-side JSON encoding."""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from .exceptions import EncodingError


def to_document(doc: Any) -> dict[str, Any]:
    """Convert a caller's document into a JSON-able dict.

    Accepts mappings, pydantic models, objects with ``to_dict()`` and
    dataclass instances.
    """
    if isinstance(doc, Mapping):
        return dict(doc)
    if isinstance(doc, BaseModel):
        return doc.model_dump(mode="json")
    to_dict = getattr(doc, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if dataclasses.is_dataclass(doc) and not isinstance(doc, type):
        return dataclasses.asdict(doc)
    raise EncodingError(f"Cannot encode document of type {type(doc).__name__}")


def encode_json(value: Any) -> str:
    """Serialise ``value`` as compact single-line JSON."""
    try:
        return json.dumps(value, separators=(",", ":"), allow_nan=False)
    except (TypeError, ValueError) as e:
        raise EncodingError(f"Failed to encode request body: {e}", cause=e) from e
