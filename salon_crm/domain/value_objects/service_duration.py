"""
Service Duration Value Object
=============================

Length of a menu service, booked in 15-minute slots.
"""
import math
from dataclasses import dataclass
from typing import List

from salon_crm.domain.errors import ValidationError

MIN_MINUTES = 15
MAX_MINUTES = 480
SLOT_MINUTES = 15


@dataclass(frozen=True)
class ServiceDuration:
    minutes: int

    def __post_init__(self) -> None:
        if isinstance(self.minutes, bool) or not isinstance(self.minutes, int):
            raise ValidationError("Duration must be a whole number of minutes", "duration")
        if not MIN_MINUTES <= self.minutes <= MAX_MINUTES:
            raise ValidationError(
                f"Duration must be between {MIN_MINUTES} and {MAX_MINUTES} minutes", "duration"
            )
        if self.minutes % SLOT_MINUTES != 0:
            raise ValidationError(
                f"Duration must be in {SLOT_MINUTES}-minute increments", "duration"
            )

    @classmethod
    def create(cls, minutes: int) -> "ServiceDuration":
        return cls(minutes)

    @classmethod
    def from_hours(cls, hours: float) -> "ServiceDuration":
        return cls(int(round(hours * 60)))

    @classmethod
    def quick(cls) -> "ServiceDuration":
        return cls(30)

    @classmethod
    def standard(cls) -> "ServiceDuration":
        return cls(60)

    @classmethod
    def extended(cls) -> "ServiceDuration":
        return cls(120)

    @staticmethod
    def allowed_durations() -> List[int]:
        return list(range(MIN_MINUTES, MAX_MINUTES + 1, SLOT_MINUTES))

    @property
    def hours(self) -> float:
        return self.minutes / 60

    @property
    def display_time(self) -> str:
        """``45 min``, ``2 hr`` or ``1 hr 30 min``."""
        hours, minutes = divmod(self.minutes, 60)
        if hours == 0:
            return f"{minutes} min"
        if minutes == 0:
            return f"{hours} hr"
        return f"{hours} hr {minutes} min"

    @property
    def time_slots(self) -> int:
        return math.ceil(self.minutes / SLOT_MINUTES)

    def add_time(self, minutes: int) -> "ServiceDuration":
        return ServiceDuration(self.minutes + minutes)

    def is_quick_service(self) -> bool:
        return self.minutes <= 30

    def is_standard_service(self) -> bool:
        return 30 < self.minutes <= 90

    def is_extended_service(self) -> bool:
        return self.minutes > 90
