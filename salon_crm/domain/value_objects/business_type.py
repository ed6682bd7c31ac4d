"""Business type of a B2B client."""
from salon_crm.domain.value_objects.choice import ChoiceEnum


class BusinessType(ChoiceEnum):
    CORPORATE = "CORPORATE"
    SALON_CHAIN = "SALON_CHAIN"
    HOTEL_SPA = "HOTEL_SPA"
    WEDDING_PLANNER = "WEDDING_PLANNER"
    EVENT_ORGANIZER = "EVENT_ORGANIZER"
    BEAUTY_SCHOOL = "BEAUTY_SCHOOL"
    FRANCHISE = "FRANCHISE"
    WHOLESALER = "WHOLESALER"
    OTHER = "OTHER"

    def is_corporate(self) -> bool:
        return self is BusinessType.CORPORATE

    def is_educational(self) -> bool:
        return self is BusinessType.BEAUTY_SCHOOL

    def is_event_business(self) -> bool:
        return self in (BusinessType.WEDDING_PLANNER, BusinessType.EVENT_ORGANIZER)

    def is_retail_business(self) -> bool:
        return self in (BusinessType.SALON_CHAIN, BusinessType.FRANCHISE, BusinessType.WHOLESALER)

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    BusinessType.CORPORATE: "Corporate Client",
    BusinessType.SALON_CHAIN: "Salon Chain",
    BusinessType.HOTEL_SPA: "Hotel & Spa",
    BusinessType.WEDDING_PLANNER: "Wedding Planner",
    BusinessType.EVENT_ORGANIZER: "Event Organizer",
    BusinessType.BEAUTY_SCHOOL: "Beauty School",
    BusinessType.FRANCHISE: "Franchise",
    BusinessType.WHOLESALER: "Wholesaler",
    BusinessType.OTHER: "Other Business",
}
