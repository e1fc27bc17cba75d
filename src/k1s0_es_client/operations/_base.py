"""Shared plumbing for operation builders."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, Generic, TypeVar
from urllib.parse import urlencode

from ..exceptions import EsError, EsErrorCodes

if TYPE_CHECKING:
    from ..client import Client

R = TypeVar("R")

ALL_INDEXES = "_all"
ALL_TYPES = "_all"


def format_param(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(format_param(v) for v in value)
    return str(value)


def format_query(params: dict[str, Any]) -> str:
    """Render set parameters as a query string (empty when none are set)."""
    if not params:
        return ""
    return "?" + urlencode({k: format_param(v) for k, v in params.items()}, safe=",:*")


def join_names(names: Iterable[str]) -> str:
    return ",".join(names)


def scoped_path(indexes: list[str], doc_types: list[str], endpoint: str) -> str:
    """``/{indexes}/{types}/{endpoint}``; missing parts collapse."""
    parts: list[str] = []
    if indexes:
        parts.append(join_names(indexes))
    elif doc_types:
        parts.append(ALL_INDEXES)
    if doc_types:
        parts.append(join_names(doc_types))
    parts.append(endpoint)
    return "/" + "/".join(parts)


class Operation(ABC, Generic[R]):
    """Base class for single-use operation builders.

    A builder moves from configured to sent exactly once. Any setter or a
    second ``send()`` after the first raises EsError(INVALID_STATE).
    """

    def __init__(self, client: Client) -> None:
        self._client = client
        self._params: dict[str, Any] = {}
        self._sent = False

    def _ensure_configurable(self) -> None:
        if self._sent:
            raise EsError(
                code=EsErrorCodes.INVALID_STATE,
                message=f"{type(self).__name__} has already been sent",
            )

    def _set_param(self, key: str, value: Any) -> Any:
        self._ensure_configurable()
        self._params[key] = value
        return self

    def send(self) -> R:
        """Execute the request and decode the response."""
        self._ensure_configurable()
        self._sent = True
        return self._send()

    @abstractmethod
    def _send(self) -> R: ...
