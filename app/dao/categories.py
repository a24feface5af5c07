# app/dao/categories.py
# CRUD категорий.
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.errors import NotFoundError, ValidationFailure
from app.models.product import Category, Product
from app.schemas.catalog import CategoryIn

logger = logging.getLogger(__name__)


def get_all(db: Session) -> List[Category]:
    return db.query(Category).order_by(Category.id).all()


def get_by_id(db: Session, category_id: int) -> Optional[Category]:
    return db.query(Category).filter(Category.id == category_id).first()


def get_or_404(db: Session, category_id: int) -> Category:
    category = get_by_id(db, category_id)
    if category is None:
        raise NotFoundError(f"Category {category_id} not found")
    return category


def create(db: Session, data: CategoryIn) -> Category:
    category = Category(**data.model_dump())
    db.add(category)
    db.commit()
    db.refresh(category)
    logger.info(f"Created category {category.id} ({category.name})")
    return category


def update(db: Session, category_id: int, data: CategoryIn) -> Category:
    category = get_or_404(db, category_id)
    for field, value in data.model_dump().items():
        setattr(category, field, value)
    db.commit()
    db.refresh(category)
    logger.info(f"Updated category {category_id}")
    return category


def delete(db: Session, category_id: int) -> None:
    category = get_or_404(db, category_id)
    in_use = db.query(Product.id).filter(Product.category_id == category_id).first()
    if in_use is not None:
        raise ValidationFailure(f"Category {category_id} still has products")
    db.delete(category)
    db.commit()
    logger.info(f"Deleted category {category_id}")
