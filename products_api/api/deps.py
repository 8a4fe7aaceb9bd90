from fastapi import Depends
from sqlalchemy.orm import Session

from products_api.database import get_db
from products_api.repositories.interfaces import ProductRepository
from products_api.repositories.product_repository import SqlAlchemyProductRepository
from products_api.services.product_service import ProductService


def get_product_repository(db: Session = Depends(get_db)) -> ProductRepository:
    """Repository bound to the request's database session."""
    return SqlAlchemyProductRepository(db)


def get_product_service(
    repository: ProductRepository = Depends(get_product_repository),
) -> ProductService:
    return ProductService(repository)
