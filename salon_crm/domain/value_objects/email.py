"""
Email Value Object
==================

Normalized (trimmed, lower-cased) e-mail address.
"""
import re
from dataclasses import dataclass

from salon_crm.domain.errors import ValidationError

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MAX_EMAIL_LENGTH = 254


@dataclass(frozen=True)
class Email:
    """E-mail address. Two emails are equal when their normalized values are."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValidationError("Email is required", "email")

        normalized = self.value.strip().lower()
        if len(normalized) > MAX_EMAIL_LENGTH:
            raise ValidationError(
                f"Email cannot exceed {MAX_EMAIL_LENGTH} characters", "email"
            )
        if not EMAIL_PATTERN.match(normalized):
            raise ValidationError("Invalid email format", "email")

        local_part, domain = normalized.rsplit("@", 1)
        if ".." in normalized or any(
            part.startswith(".") or part.endswith(".") for part in (local_part, domain)
        ):
            raise ValidationError("Invalid email format", "email")

        object.__setattr__(self, "value", normalized)

    @classmethod
    def create(cls, email: str) -> "Email":
        return cls(email)

    @property
    def domain(self) -> str:
        return self.value.rsplit("@", 1)[1]

    @property
    def local_part(self) -> str:
        return self.value.rsplit("@", 1)[0]

    def __str__(self) -> str:
        return self.value
