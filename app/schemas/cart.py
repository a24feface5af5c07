# app/schemas/cart.py
# Схемы корзины: строки с вычисляемым line_total и итог по корзине.
from typing import Dict

from pydantic import BaseModel, Field

from app.schemas.catalog import ProductOut

# верхняя граница INTEGER в PostgreSQL
MAX_QUANTITY = 2**31 - 1


class CartLineItem(BaseModel):
    product: ProductOut
    quantity: int
    line_total: float


class ShoppingCartOut(BaseModel):
    # ключи словаря: id товаров
    items: Dict[int, CartLineItem] = {}
    total: float = 0.0


class QuantityUpdate(BaseModel):
    quantity: int = Field(..., le=MAX_QUANTITY, description="0 removes the line item, negative values are rejected")
