"""
Entity Base
===========

Shared behaviour for domain entities: identity equality and the common
text validation used by every aggregate.
"""
import uuid
from typing import Optional

from salon_crm.domain.errors import ValidationError


def new_id() -> str:
    """Generate an opaque entity identifier."""
    return str(uuid.uuid4())


def validate_text(
    value: Optional[str],
    field: str,
    label: str,
    min_length: int,
    max_length: int,
) -> str:
    """
    Trim and validate a required text field.

    Args:
        value: Raw text
        field: Field name reported in validation errors
        label: Human-readable name used in messages (e.g., "Customer name")
        min_length: Minimum length after trimming
        max_length: Maximum length after trimming

    Returns:
        Trimmed text

    Raises:
        ValidationError: If the text is missing or its length is out of range
    """
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{label} is required", field)
    text = value.strip()
    if len(text) < min_length:
        raise ValidationError(f"{label} must be at least {min_length} characters", field)
    if len(text) > max_length:
        raise ValidationError(f"{label} cannot exceed {max_length} characters", field)
    return text


def clean_optional(value: Optional[str]) -> Optional[str]:
    """Trim optional text, mapping blank strings to None."""
    if value is None:
        return None
    text = value.strip()
    return text or None


class Entity:
    """Entities compare equal when they share an id."""

    id: str

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity) or type(self) is not type(other):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.id))
