# app/dao/products.py
# CRUD и поиск товаров. category_id всегда должен ссылаться на существующую категорию.
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.errors import NotFoundError, ValidationFailure
from app.dao import categories
from app.models.cart import ShoppingCartItem
from app.models.product import Product
from app.schemas.catalog import ProductIn

logger = logging.getLogger(__name__)


def search(
    db: Session,
    category_id: Optional[int] = None,
    min_price: Optional[float] = None,
    max_price: Optional[float] = None,
    subcategory: Optional[str] = None,
) -> List[Product]:
    """Поиск товаров; фильтр, равный None, не применяется."""
    query = db.query(Product)
    if category_id is not None:
        query = query.filter(Product.category_id == category_id)
    if min_price is not None:
        query = query.filter(Product.price >= min_price)
    if max_price is not None:
        query = query.filter(Product.price <= max_price)
    if subcategory:
        query = query.filter(Product.subcategory == subcategory)
    return query.order_by(Product.id).all()


def get_by_category_id(db: Session, category_id: int) -> List[Product]:
    return search(db, category_id=category_id)


def get_by_id(db: Session, product_id: int) -> Optional[Product]:
    return db.query(Product).filter(Product.id == product_id).first()


def get_or_404(db: Session, product_id: int) -> Product:
    product = get_by_id(db, product_id)
    if product is None:
        raise NotFoundError(f"Product {product_id} not found")
    return product


def _check_category(db: Session, category_id: int) -> None:
    if categories.get_by_id(db, category_id) is None:
        raise ValidationFailure(f"Category {category_id} does not exist")


def create(db: Session, data: ProductIn) -> Product:
    _check_category(db, data.category_id)
    product = Product(**data.model_dump())
    db.add(product)
    db.commit()
    db.refresh(product)
    logger.info(f"Created product {product.id} in category {product.category_id}")
    return product


def update(db: Session, product_id: int, data: ProductIn) -> Product:
    product = get_or_404(db, product_id)
    _check_category(db, data.category_id)
    for field, value in data.model_dump().items():
        setattr(product, field, value)
    db.commit()
    db.refresh(product)
    logger.info(f"Updated product {product_id}")
    return product


def delete(db: Session, product_id: int) -> None:
    """Удаляет товар вместе со строками корзин, которые на него ссылаются."""
    product = get_or_404(db, product_id)
    removed = (
        db.query(ShoppingCartItem)
        .filter(ShoppingCartItem.product_id == product_id)
        .delete(synchronize_session=False)
    )
    db.delete(product)
    db.commit()
    logger.info(f"Deleted product {product_id} (removed from {removed} carts)")
