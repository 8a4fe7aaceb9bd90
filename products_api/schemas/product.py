from pydantic import BaseModel, Field, ConfigDict


class ProductBase(BaseModel):
    """Base schema for Product with the caller-writable attributes."""
    name: str = Field(..., description="Product name")
    description: str = Field("", description="Product description")
    price: float = Field(..., description="Unit price")
    stock: int = Field(..., description="Available stock")


class ProductCreate(ProductBase):
    """Schema for creating a new product. Identity and timestamp are server-assigned."""
    pass


class ProductUpdate(ProductBase):
    """Schema for replacing a product. Every field is overwritten."""
    pass


class ProductView(ProductBase):
    """Schema for product responses."""
    id: int

    model_config = ConfigDict(from_attributes=True)
