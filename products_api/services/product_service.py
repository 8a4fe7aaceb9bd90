from datetime import datetime, timezone
from typing import Optional, List
import logging

from products_api.models.product import Product
from products_api.repositories.interfaces import ProductRepository
from products_api.schemas.product import ProductCreate, ProductUpdate, ProductView

logger = logging.getLogger(__name__)


class ProductService:
    """
    Service class for Product CRUD operations.

    This service:
    - Builds Product entities from request schemas
    - Delegates each operation to exactly one repository call
    - Projects stored products to ProductView

    A missing product is returned as None (or False for removals),
    never raised. Storage errors propagate unchanged.
    """

    def __init__(self, repository: ProductRepository):
        self.repository = repository

    def list_all(self) -> List[ProductView]:
        """Get every product, in the order the repository returns them."""
        return [self._to_view(p) for p in self.repository.get_all()]

    def get_one(self, product_id: int) -> Optional[ProductView]:
        """
        Get a product by ID.

        Args:
            product_id: Product ID to look up

        Returns:
            ProductView or None if not found
        """
        product = self.repository.get_by_id(product_id)
        if product is None:
            return None
        return self._to_view(product)

    def create(self, product_data: ProductCreate) -> ProductView:
        """
        Create a new product.

        The creation timestamp is taken here, in UTC; the id is left for
        the database to assign.

        Args:
            product_data: Product creation data

        Returns:
            The created product, carrying its new id
        """
        product = Product(
            name=product_data.name,
            description=product_data.description,
            price=product_data.price,
            stock=product_data.stock,
            created_date=datetime.now(timezone.utc),
        )
        created = self.repository.add(product)
        logger.info("Created product %s (%s)", created.id, created.name)
        return self._to_view(created)

    def replace(self, product_id: int, product_data: ProductUpdate) -> Optional[ProductView]:
        """
        Replace the name, description, price and stock of a product.

        Args:
            product_id: ID of product to update
            product_data: New values for all four fields

        Returns:
            Updated product or None if not found
        """
        changes = Product(
            name=product_data.name,
            description=product_data.description,
            price=product_data.price,
            stock=product_data.stock,
        )
        updated = self.repository.update(product_id, changes)
        if updated is None:
            logger.info("Product %s not found for update", product_id)
            return None

        logger.info("Updated product %s", product_id)
        return self._to_view(updated)

    def remove(self, product_id: int) -> bool:
        """
        Delete a product.

        Returns:
            True if deleted, False if not found
        """
        deleted = self.repository.delete(product_id)
        if deleted:
            logger.info("Deleted product %s", product_id)
        else:
            logger.info("Product %s not found for delete", product_id)
        return deleted

    @staticmethod
    def _to_view(product: Product) -> ProductView:
        return ProductView.model_validate(product)
