"""
SKU Value Object
================

Stock-keeping unit: ``<2-letter category prefix>-<zero-padded sequence>``,
e.g. ``HS-001`` or ``HP-123456``.
"""
import re
from dataclasses import dataclass

from salon_crm.domain.errors import ValidationError

SKU_PATTERN = re.compile(r"^[A-Z]{2}-\d{3,6}$")
PREFIX_PATTERN = re.compile(r"^[A-Za-z]{2}$")
MIN_SEQUENCE = 1
MAX_SEQUENCE = 999999


@dataclass(frozen=True)
class SKU:
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValidationError("SKU is required", "sku")

        normalized = self.value.strip().upper()
        if not SKU_PATTERN.match(normalized):
            raise ValidationError(
                "SKU must follow the format XX-### (2 letters, dash, 3-6 digits)", "sku"
            )
        object.__setattr__(self, "value", normalized)

    @classmethod
    def create(cls, sku: str) -> "SKU":
        return cls(sku)

    @classmethod
    def generate(cls, prefix: str, sequence: int) -> "SKU":
        """
        Build a SKU from a category prefix and a sequence number.

        Args:
            prefix: Exactly two letters (case-insensitive)
            sequence: Sequence number in [1, 999999]

        Returns:
            SKU such as ``HS-007``
        """
        if not isinstance(prefix, str) or not PREFIX_PATTERN.match(prefix):
            raise ValidationError("SKU prefix must be exactly 2 letters", "sku")
        if isinstance(sequence, bool) or not isinstance(sequence, int):
            raise ValidationError("SKU sequence must be an integer", "sku")
        if not MIN_SEQUENCE <= sequence <= MAX_SEQUENCE:
            raise ValidationError(
                f"SKU sequence must be between {MIN_SEQUENCE} and {MAX_SEQUENCE}", "sku"
            )
        return cls(f"{prefix.upper()}-{sequence:03d}")

    @property
    def category_prefix(self) -> str:
        return self.value[:2]

    @property
    def sequence_number(self) -> int:
        return int(self.value[3:])

    def is_from_category(self, prefix: str) -> bool:
        return self.category_prefix == prefix.upper()

    def next_sku(self) -> "SKU":
        return SKU.generate(self.category_prefix, self.sequence_number + 1)

    def __str__(self) -> str:
        return self.value
