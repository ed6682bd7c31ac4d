"""
Contact Person Value Object
===========================

A named contact at a B2B client. Updates return new instances.
"""
from dataclasses import dataclass, replace
from typing import Any, Dict, Union

from salon_crm.domain.errors import ValidationError
from salon_crm.domain.value_objects.email import Email
from salon_crm.domain.value_objects.phone import Phone


@dataclass(frozen=True)
class ContactPerson:
    name: str
    position: str
    email: Email
    phone: Phone
    is_primary: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationError("Contact person name is required", "contactPerson.name")
        name = self.name.strip()
        if len(name) < 2:
            raise ValidationError(
                "Contact person name must be at least 2 characters", "contactPerson.name"
            )
        if len(name) > 100:
            raise ValidationError(
                "Contact person name cannot exceed 100 characters", "contactPerson.name"
            )

        if not isinstance(self.position, str) or not self.position.strip():
            raise ValidationError(
                "Contact person position is required", "contactPerson.position"
            )
        position = self.position.strip()
        if len(position) > 50:
            raise ValidationError(
                "Contact person position cannot exceed 50 characters", "contactPerson.position"
            )

        if self.email is None:
            raise ValidationError("Contact person email is required", "contactPerson.email")
        if self.phone is None:
            raise ValidationError("Contact person phone is required", "contactPerson.phone")
        if not isinstance(self.is_primary, bool):
            raise ValidationError(
                "Contact person isPrimary must be a boolean", "contactPerson.isPrimary"
            )

        object.__setattr__(self, "name", name)
        object.__setattr__(self, "position", position)
        if not isinstance(self.email, Email):
            object.__setattr__(self, "email", Email(self.email))
        if not isinstance(self.phone, Phone):
            object.__setattr__(self, "phone", Phone(self.phone))

    @classmethod
    def create(
        cls,
        name: str,
        position: str,
        email: Union[str, Email],
        phone: Union[str, Phone],
        is_primary: bool = False,
    ) -> "ContactPerson":
        return cls(name=name, position=position, email=email, phone=phone, is_primary=is_primary)

    def make_primary(self) -> "ContactPerson":
        return replace(self, is_primary=True)

    def make_secondary(self) -> "ContactPerson":
        return replace(self, is_primary=False)

    def with_name(self, name: str) -> "ContactPerson":
        return replace(self, name=name)

    def with_position(self, position: str) -> "ContactPerson":
        return replace(self, position=position)

    def with_email(self, email: Union[str, Email]) -> "ContactPerson":
        return replace(self, email=email)

    def with_phone(self, phone: Union[str, Phone]) -> "ContactPerson":
        return replace(self, phone=phone)

    @property
    def full_contact(self) -> str:
        return f"{self.name} ({self.position}) - {self.email} - {self.phone}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "position": self.position,
            "email": self.email.value,
            "phone": self.phone.value,
            "is_primary": self.is_primary,
        }
