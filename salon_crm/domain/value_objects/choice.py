"""Base class for the fixed-choice value objects (categories, types)."""
from enum import Enum
from typing import List, Union

from salon_crm.domain.errors import ValidationError


class ChoiceEnum(str, Enum):
    """String enum whose ``parse`` raises a field-scoped ValidationError."""

    @classmethod
    def field_name(cls) -> str:
        name = cls.__name__
        return name[0].lower() + name[1:]

    @classmethod
    def parse(cls, value: Union[str, "ChoiceEnum"]):
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        raise ValidationError(
            f"Invalid {cls.__name__}. Must be one of: {', '.join(cls.values())}",
            cls.field_name(),
        )

    @classmethod
    def values(cls) -> List[str]:
        return [member.value for member in cls]

    def __str__(self) -> str:
        return self.value
