"""Kind of catalogue entry: service, physical product or package."""
from salon_crm.domain.value_objects.choice import ChoiceEnum


class ProductType(ChoiceEnum):
    SERVICE = "SERVICE"
    PHYSICAL_PRODUCT = "PHYSICAL_PRODUCT"
    PACKAGE = "PACKAGE"

    def is_service(self) -> bool:
        return self is ProductType.SERVICE

    def is_physical_product(self) -> bool:
        return self is ProductType.PHYSICAL_PRODUCT

    def is_package(self) -> bool:
        return self is ProductType.PACKAGE

    def requires_duration(self) -> bool:
        return self in (ProductType.SERVICE, ProductType.PACKAGE)

    def requires_inventory(self) -> bool:
        return self is ProductType.PHYSICAL_PRODUCT

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DISPLAY_NAMES = {
    ProductType.SERVICE: "Service",
    ProductType.PHYSICAL_PRODUCT: "Physical Product",
    ProductType.PACKAGE: "Package",
}

_DESCRIPTIONS = {
    ProductType.SERVICE: "A service performed by salon staff (e.g., haircut, massage)",
    ProductType.PHYSICAL_PRODUCT: "A physical item sold to customers (e.g., shampoo, tools)",
    ProductType.PACKAGE: "A bundle of services or products offered at a discounted price",
}
