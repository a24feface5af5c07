# app/schemas/catalog.py
# Pydantic-схемы для категорий и товаров. Длины строк повторяют колонки app/models/product.py.
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CategoryBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=50)
    description: Optional[str] = None


class CategoryIn(CategoryBase):
    pass


class CategoryOut(CategoryBase):
    model_config = ConfigDict(from_attributes=True)

    id: int


class ProductBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=50)
    price: float = Field(..., ge=0)
    category_id: int
    description: Optional[str] = None
    subcategory: Optional[str] = Field(None, max_length=20)
    image_url: Optional[str] = Field(None, max_length=200)
    stock: int = Field(0, ge=0, le=2**31 - 1)
    featured: bool = False


class ProductIn(ProductBase):
    pass


class ProductOut(ProductBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
