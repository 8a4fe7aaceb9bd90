from abc import ABC, abstractmethod
from typing import List, Optional

from products_api.models.product import Product


class ProductRepository(ABC):
    """
    Storage contract for the Product entity.

    Absence is reported structurally (``None`` / ``False``), never raised.
    Store errors (``sqlalchemy.exc.SQLAlchemyError``) propagate to the caller.
    """

    @abstractmethod
    def get_all(self) -> List[Product]:
        """Return every stored product."""

    @abstractmethod
    def get_by_id(self, product_id: int) -> Optional[Product]:
        """Return the product with this id, or None."""

    @abstractmethod
    def add(self, product: Product) -> Product:
        """Insert a product; the returned instance carries the assigned id."""

    @abstractmethod
    def update(self, product_id: int, product: Product) -> Optional[Product]:
        """Overwrite name, description, price and stock of an existing product."""

    @abstractmethod
    def delete(self, product_id: int) -> bool:
        """Remove a product. Returns False if it did not exist."""
