"""Product catalogue categories and their SKU prefixes."""
from salon_crm.domain.value_objects.choice import ChoiceEnum


class ProductCategory(ChoiceEnum):
    HAIR_SERVICES = "HAIR_SERVICES"
    NAIL_SERVICES = "NAIL_SERVICES"
    FACIAL_SERVICES = "FACIAL_SERVICES"
    BODY_SERVICES = "BODY_SERVICES"
    HAIR_PRODUCTS = "HAIR_PRODUCTS"
    NAIL_PRODUCTS = "NAIL_PRODUCTS"
    SKINCARE_PRODUCTS = "SKINCARE_PRODUCTS"
    TOOLS_EQUIPMENT = "TOOLS_EQUIPMENT"
    ACCESSORIES = "ACCESSORIES"
    PACKAGES = "PACKAGES"

    def is_service_category(self) -> bool:
        return self.value.endswith("_SERVICES")

    def is_product_category(self) -> bool:
        return self.value.endswith("_PRODUCTS") or self in (
            ProductCategory.TOOLS_EQUIPMENT,
            ProductCategory.ACCESSORIES,
        )

    def is_package_category(self) -> bool:
        return self is ProductCategory.PACKAGES

    @property
    def display_name(self) -> str:
        """``HAIR_SERVICES`` -> ``Hair Services``."""
        return " ".join(word.capitalize() for word in self.value.split("_"))

    @property
    def sku_prefix(self) -> str:
        return _SKU_PREFIXES[self]


_SKU_PREFIXES = {
    ProductCategory.HAIR_SERVICES: "HS",
    ProductCategory.NAIL_SERVICES: "NS",
    ProductCategory.FACIAL_SERVICES: "FS",
    ProductCategory.BODY_SERVICES: "BS",
    ProductCategory.HAIR_PRODUCTS: "HP",
    ProductCategory.NAIL_PRODUCTS: "NP",
    ProductCategory.SKINCARE_PRODUCTS: "SP",
    ProductCategory.TOOLS_EQUIPMENT: "TE",
    ProductCategory.ACCESSORIES: "AC",
    ProductCategory.PACKAGES: "PK",
}
