"""
Phone Value Object
==================

E.164-like phone number. The value keeps the caller's formatting (trimmed);
``clean_value`` holds the digits used for validation and uniqueness.
"""
import re
from dataclasses import dataclass

from salon_crm.domain.errors import ValidationError

_FORMATTING_CHARS = re.compile(r"[\s\-().+]")
_DIGITS_PATTERN = re.compile(r"^[1-9]\d{1,14}$")
MIN_DIGITS = 7
MAX_DIGITS = 15


@dataclass(frozen=True)
class Phone:
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValidationError("Phone number is required", "phone")

        trimmed = self.value.strip()
        cleaned = _FORMATTING_CHARS.sub("", trimmed)
        if not _DIGITS_PATTERN.match(cleaned):
            raise ValidationError("Invalid phone number format", "phone")
        if not MIN_DIGITS <= len(cleaned) <= MAX_DIGITS:
            raise ValidationError(
                f"Phone number must have between {MIN_DIGITS} and {MAX_DIGITS} digits",
                "phone",
            )

        object.__setattr__(self, "value", trimmed)

    @classmethod
    def create(cls, phone: str) -> "Phone":
        return cls(phone)

    @property
    def clean_value(self) -> str:
        """Digits only."""
        return _FORMATTING_CHARS.sub("", self.value)

    @property
    def display_value(self) -> str:
        """``(555) 123-4567`` for ten-digit numbers, the original value otherwise."""
        digits = self.clean_value
        if len(digits) == 10:
            return f"({digits[:3]}) {digits[3:6]}-{digits[6:]}"
        return self.value

    def __str__(self) -> str:
        return self.value
