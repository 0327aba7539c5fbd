from __future__ import annotations

from typing import Any, Optional

from quasijson._core.schema import RichEnum


class RepairErrorKind(str, RichEnum):
    """Classification of a failed repair."""

    NULL_INPUT = 'null_input'
    UNRECOVERABLE_CORRUPTION = 'unrecoverable_corruption'
    MISSING_FIELD_SEPARATORS = 'missing_field_separators'
    POST_REPAIR_SYNTAX_ERROR = 'post_repair_syntax_error'


class CustomBaseException(Exception):
    """
    Base exception class.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class JSONRepairError(CustomBaseException):
    """
    Base class for every fatal repair failure.

    The caller's input is attached untouched as ``original``; no partial
    result is ever attached.
    """

    kind: RepairErrorKind

    def __init__(self, message: str, original: Any = None):
        self.original = original
        super().__init__(message)


class NullInputError(JSONRepairError):
    """Raised when the object to validate is None."""

    kind = RepairErrorKind.NULL_INPUT

    def __init__(self, message: str = 'Object to validate is null.'):
        super().__init__(message, original=None)


class UnrecoverableCorruptionError(JSONRepairError):
    """
    Raised when disambiguation runs out of fields to anchor a repair to:
    the working buffer became empty, or a fragment had no preceding field.
    """

    kind = RepairErrorKind.UNRECOVERABLE_CORRUPTION


class MissingFieldSeparatorsError(JSONRepairError):
    """Raised when a repaired multi-field buffer holds no comma at all."""

    kind = RepairErrorKind.MISSING_FIELD_SEPARATORS


class PostRepairSyntaxError(JSONRepairError):
    """Raised when the repaired text is still rejected by the JSON parser."""

    kind = RepairErrorKind.POST_REPAIR_SYNTAX_ERROR

    def __init__(
        self,
        message: str,
        original: Any = None,
        repaired_text: Optional[str] = None,
    ):
        self.repaired_text = repaired_text
        super().__init__(message, original=original)
