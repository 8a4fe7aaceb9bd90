from sqlalchemy import Column, Integer, String, Text, Numeric, DateTime

from products_api.database import Base


class Product(Base):
    """
    Product entity as stored.

    Attributes:
        id: Unique identifier, assigned by the database on insert
        name: Product name
        description: Free-form description
        price: Unit price
        stock: Available quantity
        created_date: UTC timestamp set once when the product is created
    """
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True, default="")
    price = Column(Numeric(18, 2, asdecimal=False), nullable=False)
    stock = Column(Integer, nullable=False, default=0)
    created_date = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', stock={self.stock})>"
