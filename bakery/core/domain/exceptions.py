"""
Domain Exceptions for Domain-Driven Design

These exceptions represent business rule violations and domain-specific errors.
They are translated to HTTP responses in the API layer (see
bakery.api.exception_handlers).
"""

from typing import Any


class DomainException(Exception):
    """
    Base exception for all domain-related errors.

    Provides a standardized way to communicate business rule violations.
    """

    def __init__(self, message: str, code: str | None = None, details: dict[str, Any] | None = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "INVALID_TRANSITION")
            details: Additional context about the error
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__.upper()
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": True,
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(DomainException):
    """
    Raised when domain validation fails.

    Use for malformed input such as a negative final price or a pickup date
    inside the minimum lead time.
    """

    def __init__(self, message: str, field: str | None = None, details: dict[str, Any] | None = None):
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, "VALIDATION_ERROR", details)
        self.field = field


class EntityNotFoundException(DomainException):
    """
    Raised when an entity is not found.
    """

    def __init__(
        self,
        entity_type: str,
        entity_id: Any,
        message: str | None = None,
    ):
        self.entity_type = entity_type
        self.entity_id = entity_id
        msg = message or f"{entity_type} with ID {entity_id} not found"
        super().__init__(
            msg,
            "ENTITY_NOT_FOUND",
            {"entity_type": entity_type, "entity_id": str(entity_id)},
        )


class BusinessRuleViolationException(DomainException):
    """
    Raised when a business rule is violated.

    Use for invariant violations, precondition failures, etc.
    """

    def __init__(self, rule: str, message: str | None = None, details: dict[str, Any] | None = None):
        self.rule = rule
        msg = message or f"Business rule violated: {rule}"
        details = details or {}
        details["rule"] = rule
        super().__init__(msg, "BUSINESS_RULE_VIOLATION", details)


class InvalidTransitionException(DomainException):
    """Raised when the requested status is not reachable from the current one."""

    def __init__(self, current_status: str, requested_status: str, allowed: list[str] | None = None):
        self.current_status = current_status
        self.requested_status = requested_status
        super().__init__(
            f"Cannot change status from '{current_status}' to '{requested_status}'",
            "INVALID_TRANSITION",
            {
                "current_status": current_status,
                "requested_status": requested_status,
                "allowed_statuses": allowed or [],
            },
        )


class NoPreviousStatusException(DomainException):
    """Raised when rolling back an order that is already in its initial status."""

    def __init__(self, current_status: str):
        self.current_status = current_status
        super().__init__(
            f"Status '{current_status}' has no previous status",
            "NO_PREVIOUS_STATUS",
            {"current_status": current_status},
        )


class DiscountRejectedException(DomainException):
    """Raised when a discount code cannot be applied. The reason is user-displayable."""

    def __init__(self, code: str, reason: str, message: str | None = None):
        self.discount_code = code
        self.reason = reason
        super().__init__(
            message or f"Discount code '{code}' rejected: {reason}",
            "DISCOUNT_REJECTED",
            {"discount_code": code, "reason": reason},
        )


class ConcurrencyException(DomainException):
    """Raised when there's a concurrency conflict (optimistic locking)."""

    def __init__(self, entity_type: str, entity_id: Any, expected_version: int, actual_version: int | None = None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.expected_version = expected_version
        self.actual_version = actual_version
        found = "a newer version" if actual_version is None else f"version {actual_version}"
        super().__init__(
            f"Concurrency conflict for {entity_type} {entity_id}. Expected version {expected_version}, but found {found}",
            "CONCURRENCY_CONFLICT",
            {
                "entity_type": entity_type,
                "entity_id": str(entity_id),
                "expected_version": expected_version,
                "actual_version": actual_version,
            },
        )
