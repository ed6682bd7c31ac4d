"""
Create Product Use Case
=======================

Creates a product or service and assigns it the next SKU of its category.
"""
import logging

from salon_crm.application.dto.product_dto import ProductCreateRequest, ProductResponse
from salon_crm.domain.errors import ConflictError
from salon_crm.domain.models.product import Product
from salon_crm.domain.repositories.product_repository import ProductRepository
from salon_crm.domain.value_objects import SKU, ProductCategory, ProductType

logger = logging.getLogger(__name__)


class CreateProductUseCase:
    """
    Use case for creating a product.

    The SKU is ``<category prefix>-<next sequence>``, e.g. ``HS-004`` for the
    fourth hair service.
    """

    def __init__(self, product_repository: ProductRepository):
        """
        Initialize use case with repository.

        Args:
            product_repository: Repository for product persistence
        """
        self._repository = product_repository

    def execute(self, request: ProductCreateRequest) -> ProductResponse:
        """
        Execute the create product use case.

        Args:
            request: Product data

        Returns:
            The created product

        Raises:
            ValidationError: If a field fails validation
            BusinessRuleViolationError: If duration or stock fields do not fit the type
            ConflictError: If the category already has a product with this name
        """
        category = ProductCategory.parse(request.category)
        product_type = ProductType.parse(request.type)

        if self._repository.find_by_name_in_category(request.name, category):
            raise ConflictError(
                f"Product with name '{request.name.strip()}' already exists in category {category.value}"
            )

        prefix = category.sku_prefix
        sku = SKU.generate(prefix, self._repository.get_next_sequence_for_category(prefix))

        product = Product.create(
            name=request.name,
            description=request.description,
            price=request.price,
            category=category,
            product_type=product_type,
            sku=sku,
            duration_minutes=request.duration_minutes,
            stock_level=request.stock_level,
            low_stock_threshold=request.low_stock_threshold,
            metadata=request.metadata,
        )
        saved = self._repository.create(product)
        logger.info(f"Product created: {saved.id} ({saved.sku})")
        return ProductResponse.from_entity(saved)
