"""
Menu Category
=============

Sections of the salon menu. Package categories require included services;
some categories require booking in advance.
"""
from typing import List

from salon_crm.domain.value_objects.choice import ChoiceEnum


class MenuCategory(ChoiceEnum):
    HAIR_SERVICES = "HAIR_SERVICES"
    NAIL_SERVICES = "NAIL_SERVICES"
    FACIAL_SERVICES = "FACIAL_SERVICES"
    BODY_TREATMENTS = "BODY_TREATMENTS"
    MASSAGE_THERAPY = "MASSAGE_THERAPY"
    BRIDAL_PACKAGES = "BRIDAL_PACKAGES"
    SPECIAL_OCCASIONS = "SPECIAL_OCCASIONS"
    WELLNESS_PACKAGES = "WELLNESS_PACKAGES"
    SEASONAL_OFFERS = "SEASONAL_OFFERS"
    MEMBERSHIP_PLANS = "MEMBERSHIP_PLANS"
    ADD_ON_SERVICES = "ADD_ON_SERVICES"
    GIFT_PACKAGES = "GIFT_PACKAGES"

    def is_package(self) -> bool:
        return self in _PACKAGE_CATEGORIES

    def is_seasonal_offering(self) -> bool:
        return self in (MenuCategory.SEASONAL_OFFERS, MenuCategory.SPECIAL_OCCASIONS)

    def is_individual_service(self) -> bool:
        return self in _INDIVIDUAL_SERVICE_CATEGORIES

    def is_membership(self) -> bool:
        return self is MenuCategory.MEMBERSHIP_PLANS

    def requires_advance_booking(self) -> bool:
        return self in (
            MenuCategory.BRIDAL_PACKAGES,
            MenuCategory.SPECIAL_OCCASIONS,
            MenuCategory.WELLNESS_PACKAGES,
        )

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @classmethod
    def package_categories(cls) -> List["MenuCategory"]:
        return list(_PACKAGE_CATEGORIES)

    @classmethod
    def individual_service_categories(cls) -> List["MenuCategory"]:
        return list(_INDIVIDUAL_SERVICE_CATEGORIES)


_PACKAGE_CATEGORIES = (
    MenuCategory.BRIDAL_PACKAGES,
    MenuCategory.WELLNESS_PACKAGES,
    MenuCategory.GIFT_PACKAGES,
)

_INDIVIDUAL_SERVICE_CATEGORIES = (
    MenuCategory.HAIR_SERVICES,
    MenuCategory.NAIL_SERVICES,
    MenuCategory.FACIAL_SERVICES,
    MenuCategory.BODY_TREATMENTS,
    MenuCategory.MASSAGE_THERAPY,
    MenuCategory.ADD_ON_SERVICES,
)

_DISPLAY_NAMES = {
    MenuCategory.HAIR_SERVICES: "Hair Services",
    MenuCategory.NAIL_SERVICES: "Nail Services",
    MenuCategory.FACIAL_SERVICES: "Facial Services",
    MenuCategory.BODY_TREATMENTS: "Body Treatments",
    MenuCategory.MASSAGE_THERAPY: "Massage Therapy",
    MenuCategory.BRIDAL_PACKAGES: "Bridal Packages",
    MenuCategory.SPECIAL_OCCASIONS: "Special Occasions",
    MenuCategory.WELLNESS_PACKAGES: "Wellness Packages",
    MenuCategory.SEASONAL_OFFERS: "Seasonal Offers",
    MenuCategory.MEMBERSHIP_PLANS: "Membership Plans",
    MenuCategory.ADD_ON_SERVICES: "Add-On Services",
    MenuCategory.GIFT_PACKAGES: "Gift Packages",
}

_DESCRIPTIONS = {
    MenuCategory.HAIR_SERVICES: "Professional hair cutting, styling, coloring, and treatment services",
    MenuCategory.NAIL_SERVICES: "Manicure, pedicure, nail art, and nail care treatments",
    MenuCategory.FACIAL_SERVICES: "Deep cleansing, anti-aging, and specialized facial treatments",
    MenuCategory.BODY_TREATMENTS: "Body wraps, scrubs, and therapeutic body treatments",
    MenuCategory.MASSAGE_THERAPY: "Relaxation and therapeutic massage services",
    MenuCategory.BRIDAL_PACKAGES: "Complete beauty packages for weddings and special events",
    MenuCategory.SPECIAL_OCCASIONS: "Styling services for parties, proms, and special events",
    MenuCategory.WELLNESS_PACKAGES: "Comprehensive wellness and relaxation packages",
    MenuCategory.SEASONAL_OFFERS: "Limited-time seasonal promotions and packages",
    MenuCategory.MEMBERSHIP_PLANS: "Monthly membership plans with exclusive benefits",
    MenuCategory.ADD_ON_SERVICES: "Complementary services to enhance your main treatment",
    MenuCategory.GIFT_PACKAGES: "Perfect gift packages for loved ones",
}
