import logging
from typing import List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from products_api.models.product import Product
from products_api.repositories.interfaces import ProductRepository

logger = logging.getLogger(__name__)

# Columns a replace is allowed to write. id and created_date are never touched.
MUTABLE_FIELDS = ("name", "description", "price", "stock")


class SqlAlchemyProductRepository(ProductRepository):
    """
    Product repository backed by a SQLAlchemy session.

    The session is request-scoped and owned by the caller; this class only
    commits its own writes and rolls back when one of them fails.
    """

    def __init__(self, db: Session):
        self.db = db

    def get_all(self) -> List[Product]:
        return list(self.db.scalars(select(Product).order_by(Product.id)))

    def get_by_id(self, product_id: int) -> Optional[Product]:
        return self.db.get(Product, product_id)

    def add(self, product: Product) -> Product:
        """
        Insert a new product.

        ``created_date`` must already be set; the database assigns ``id``,
        which is loaded back onto the returned instance.
        """
        try:
            self.db.add(product)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        self.db.refresh(product)
        return product

    def update(self, product_id: int, product: Product) -> Optional[Product]:
        """
        Overwrite the mutable columns of one row in a single statement.

        The ``WHERE id = :id`` guard doubles as the existence check: zero
        affected rows means the product does not exist and nothing is written.

        Returns:
            The reloaded product, or None if no row matched
        """
        values = {field: getattr(product, field) for field in MUTABLE_FIELDS}
        stmt = (
            update(Product)
            .where(Product.id == product_id)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        try:
            result = self.db.execute(stmt)
            if result.rowcount == 0:
                self.db.rollback()
                return None
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

        # populate_existing refreshes an instance already held by this session
        return self.db.get(Product, product_id, populate_existing=True)

    def delete(self, product_id: int) -> bool:
        """
        Remove one row in a single statement.

        Returns:
            True if a row was deleted, False if none matched
        """
        stmt = (
            delete(Product)
            .where(Product.id == product_id)
            .execution_options(synchronize_session=False)
        )
        try:
            result = self.db.execute(stmt)
            if result.rowcount == 0:
                self.db.rollback()
                return False
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

        logger.debug("Deleted product row %s", product_id)
        return True
