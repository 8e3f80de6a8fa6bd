"""Error kinds raised by the service layer.

The service layer raises a single exception type, ``ServiceError``, tagged
with an ``ErrorKind``. The HTTP layer turns the kind into a status code via
a fixed table (see ``app.api.errors``).
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Category of a service failure; each maps to one HTTP status."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    INTERNAL = "internal"


VALIDATION_MESSAGE = "Validation failed for the provided data"


class ServiceError(Exception):
    """Domain failure with a kind, a caller-facing message and detail lines."""

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        details: list[str] | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.details = details or []

    def __repr__(self) -> str:
        return f"ServiceError(kind={self.kind.value!r}, message={self.message!r})"

    @classmethod
    def validation(cls, details: list[str]) -> ServiceError:
        return cls(ErrorKind.VALIDATION, VALIDATION_MESSAGE, details)

    @classmethod
    def not_found(cls, product_code: int) -> ServiceError:
        return cls(
            ErrorKind.NOT_FOUND,
            f"Product with code {product_code} not found",
            ["The requested product does not exist"],
        )

    @classmethod
    def already_exists(cls, product_code: int) -> ServiceError:
        # Codes are assigned by the store, so nothing raises this today.
        return cls(
            ErrorKind.ALREADY_EXISTS,
            f"Product with code {product_code} already exists",
            ["A product with the given code already exists"],
        )

    @classmethod
    def internal(cls, message: str, cause: BaseException | None = None) -> ServiceError:
        details = [str(cause)] if cause is not None and str(cause) else []
        return cls(ErrorKind.INTERNAL, message, details)
