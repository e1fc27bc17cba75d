"""es_client ライブラリの例外型定義"""

from __future__ import annotations

from typing import Any


class EsError(Exception):
    """es_client ライブラリのエラー基底クラス。"""

    def __init__(
        self,
        code: str,
        message: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {super().__str__()}"


class EsErrorCodes:
    """EsError のエラーコード定数。"""

    TRANSPORT: str = "TRANSPORT"
    ENCODING: str = "ENCODING"
    ENGINE: str = "ENGINE"
    DECODE_SHAPE: str = "DECODE_SHAPE"
    INVALID_STATE: str = "INVALID_STATE"


class TransportError(EsError):
    """The HTTP round trip could not complete."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(EsErrorCodes.TRANSPORT, message, cause)


class EncodingError(EsError):
    """A request body could not be serialised or a response body parsed."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(EsErrorCodes.ENCODING, message, cause)


class EngineError(EsError):
    """The engine answered with a status other than 200, 201 or 404."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(EsErrorCodes.ENGINE, f"HTTP {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class DecodeShapeError(EsError):
    """A response parsed as JSON but did not have the expected shape.

    ``path`` is the dotted path that was looked up (``version.number``),
    ``expected`` the JSON type the decoder wanted at that path.
    """

    def __init__(self, path: str, expected: str, actual: Any = None) -> None:
        if actual is None:
            message = f"missing {expected} at '{path}'"
        else:
            message = f"expected {expected} at '{path}', got {type(actual).__name__}"
        super().__init__(EsErrorCodes.DECODE_SHAPE, message)
        self.path = path
        self.expected = expected
        self.actual = actual


class ConfigError(EsError):
    """Client configuration could not be loaded."""


class ConfigErrorCodes:
    """ConfigError のエラーコード定数。"""

    READ_FILE: str = "READ_FILE"
    PARSE_YAML: str = "PARSE_YAML"
    VALIDATION: str = "VALIDATION"
