"""Custom exception hierarchy for the inventory API.

Every domain error carries a stable ``code``, an HTTP ``status_code`` and optional
``details``. The API layer renders them into the error envelope:

    {"success": false, "error": {"message": ..., "code": ..., "details": ...}}

Codes:
- VALIDATION_ERROR: malformed or out-of-range input (400)
- BAD_REQUEST: semantically empty or contradictory request (400)
- NOT_FOUND: id-addressed resource missing or soft-deleted (404)
- CONFLICT: uniqueness / foreign-key violation reported by the database (409)
- INTERNAL_ERROR: anything else (500)
"""

from __future__ import annotations

from typing import Any


class InventoryException(Exception):
    """Base exception for all inventory API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 400,
        details: Any = None,
    ):
        """Initialize exception with a client-facing message and metadata.

        Args:
            message: Client-facing error message
            code: Error code (e.g., "NOT_FOUND")
            status_code: HTTP status code (default: 400 Bad Request)
            details: Optional additional context
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to the error envelope."""
        error: dict[str, Any] = {"message": self.message, "code": self.code}
        if self.details:
            error["details"] = self.details
        return {"success": False, "error": error}


# ============================================================================
# CLIENT ERRORS
# ============================================================================

class ValidationFailedError(InventoryException):
    """Request input failed schema validation."""

    def __init__(self, details: list[dict[str, Any]] | None = None):
        super().__init__(
            message="Validation failed",
            code="VALIDATION_ERROR",
            status_code=400,
            details=details,
        )


class BadRequestError(InventoryException):
    """Request is well-formed but cannot be acted upon."""

    def __init__(self, message: str, details: Any = None):
        super().__init__(message=message, code="BAD_REQUEST", status_code=400, details=details)


class EmptyUpdateError(BadRequestError):
    """PATCH body did not contain any updatable field."""

    def __init__(self):
        super().__init__("No fields to update")


# ============================================================================
# NOT FOUND
# ============================================================================

class NotFoundError(InventoryException):
    """Resource does not exist or has been soft-deleted."""

    def __init__(self, resource: str = "Resource", resource_id: str | None = None):
        super().__init__(
            message=f"{resource} not found",
            code="NOT_FOUND",
            status_code=404,
            details={"id": resource_id} if resource_id else None,
        )


class StoreNotFoundError(NotFoundError):
    def __init__(self, store_id: str | None = None):
        super().__init__("Store", store_id)


class ProductNotFoundError(NotFoundError):
    def __init__(self, product_id: str | None = None):
        super().__init__("Product", product_id)


# ============================================================================
# STORAGE ERRORS
# ============================================================================

class ConflictError(InventoryException):
    """The database rejected a write because of a constraint."""

    def __init__(self, message: str = "A record with this value already exists", details: Any = None):
        super().__init__(message=message, code="CONFLICT", status_code=409, details=details)


class StoreReferenceError(ConflictError):
    """Product insert referenced a store row that does not exist."""

    def __init__(self, store_id: str):
        super().__init__(
            message=f"Store {store_id} does not exist",
            details={"storeId": store_id},
        )
