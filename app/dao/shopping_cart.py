# app/dao/shopping_cart.py
# Строки корзины. Функции не коммитят: транзакцией управляет сервис корзины.
from typing import List

from sqlalchemy.orm import Session, joinedload

from app.models.cart import ShoppingCartItem


def get_items(db: Session, user_id: int) -> List[ShoppingCartItem]:
    return (
        db.query(ShoppingCartItem)
        .options(joinedload(ShoppingCartItem.product))
        .filter(ShoppingCartItem.user_id == user_id)
        .order_by(ShoppingCartItem.product_id)
        .all()
    )


def increment(db: Session, user_id: int, product_id: int) -> bool:
    """Атомарно увеличивает количество на 1. False, если строки нет."""
    updated = (
        db.query(ShoppingCartItem)
        .filter(ShoppingCartItem.user_id == user_id, ShoppingCartItem.product_id == product_id)
        .update({ShoppingCartItem.quantity: ShoppingCartItem.quantity + 1}, synchronize_session=False)
    )
    return updated > 0


def insert(db: Session, user_id: int, product_id: int, quantity: int = 1) -> None:
    db.add(ShoppingCartItem(user_id=user_id, product_id=product_id, quantity=quantity))
    db.flush()


def set_quantity(db: Session, user_id: int, product_id: int, quantity: int) -> bool:
    updated = (
        db.query(ShoppingCartItem)
        .filter(ShoppingCartItem.user_id == user_id, ShoppingCartItem.product_id == product_id)
        .update({ShoppingCartItem.quantity: quantity}, synchronize_session=False)
    )
    return updated > 0


def delete_item(db: Session, user_id: int, product_id: int) -> bool:
    deleted = (
        db.query(ShoppingCartItem)
        .filter(ShoppingCartItem.user_id == user_id, ShoppingCartItem.product_id == product_id)
        .delete(synchronize_session=False)
    )
    return deleted > 0


def delete_all(db: Session, user_id: int) -> int:
    return (
        db.query(ShoppingCartItem)
        .filter(ShoppingCartItem.user_id == user_id)
        .delete(synchronize_session=False)
    )
