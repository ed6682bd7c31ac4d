"""
Domain Errors
=============

The four error kinds raised by the domain and application layers.
Every error carries a human-readable message and a machine code.
"""
from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for all salon CRM domain errors."""

    code = "DOMAIN_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": type(self).__name__,
            "code": self.code,
            "message": self.message,
        }


class ValidationError(DomainError):
    """A single field or value fails its own constraints."""

    code = "VALIDATION_ERROR"

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["field"] = self.field
        return data


class BusinessRuleViolationError(DomainError):
    """A cross-field or cross-entity invariant is violated."""

    code = "BUSINESS_RULE_VIOLATION"


class NotFoundError(DomainError):
    """A referenced identifier does not exist."""

    code = "NOT_FOUND"

    def __init__(self, resource: str, identifier: Optional[str] = None):
        if identifier is not None:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"
        super().__init__(message)
        self.resource = resource
        self.identifier = identifier


class ConflictError(DomainError):
    """A uniqueness constraint would be violated."""

    code = "CONFLICT"
