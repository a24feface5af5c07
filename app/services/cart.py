# app/services/cart.py
# Агрегат корзины: добавление, изменение количества и очистка строк пользователя.
# Каждая изменяющая операция выполняется в одной транзакции.
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import InternalFailure, NotFoundError, ValidationFailure
from app.core.security import AuthContext
from app.dao import products, shopping_cart
from app.schemas.cart import CartLineItem, ShoppingCartOut
from app.schemas.catalog import ProductOut

logger = logging.getLogger(__name__)


def get_cart(db: Session, ctx: AuthContext) -> ShoppingCartOut:
    """Возвращает корзину пользователя; пустую, если строк нет."""
    cart = ShoppingCartOut()
    for item in shopping_cart.get_items(db, ctx.user_id):
        line_total = round(item.quantity * item.product.price, 2)
        cart.items[item.product_id] = CartLineItem(
            product=ProductOut.model_validate(item.product),
            quantity=item.quantity,
            line_total=line_total,
        )
    cart.total = round(sum(line.line_total for line in cart.items.values()), 2)
    return cart


def add_to_cart(db: Session, ctx: AuthContext, product_id: int) -> ShoppingCartOut:
    """
    Добавляет товар в корзину: +1 к существующей строке или новая строка с количеством 1.

    Увеличение делается одним UPDATE на стороне БД. Если параллельный запрос
    успел вставить ту же строку, ловим нарушение уникальности и повторяем как увеличение.
    """
    products.get_or_404(db, product_id)
    try:
        if not shopping_cart.increment(db, ctx.user_id, product_id):
            shopping_cart.insert(db, ctx.user_id, product_id)
        db.commit()
    except IntegrityError:
        db.rollback()
        # нарушение FK: товар удалили после проверки
        if products.get_by_id(db, product_id) is None:
            raise NotFoundError(f"Product {product_id} not found")
        logger.info(f"Concurrent insert of product {product_id} for user {ctx.user_id}, retrying as increment")
        if not shopping_cart.increment(db, ctx.user_id, product_id):
            db.rollback()
            raise InternalFailure(f"Could not add product {product_id} to cart")
        db.commit()
    logger.info(f"User {ctx.user_id} added product {product_id} to cart")
    return get_cart(db, ctx)


def update_quantity(db: Session, ctx: AuthContext, product_id: int, quantity: int) -> ShoppingCartOut:
    """
    Устанавливает количество существующей строки.

    0 удаляет строку, отрицательное значение отклоняется.
    Если строки нет, бросает NotFoundError и корзину не меняет.
    """
    if quantity < 0:
        raise ValidationFailure("Quantity must not be negative")
    if quantity == 0:
        changed = shopping_cart.delete_item(db, ctx.user_id, product_id)
    else:
        changed = shopping_cart.set_quantity(db, ctx.user_id, product_id, quantity)
    if not changed:
        db.rollback()
        raise NotFoundError(f"Product {product_id} not found in cart")
    db.commit()
    logger.info(f"User {ctx.user_id} set quantity of product {product_id} to {quantity}")
    return get_cart(db, ctx)


def clear_cart(db: Session, ctx: AuthContext) -> ShoppingCartOut:
    removed = shopping_cart.delete_all(db, ctx.user_id)
    db.commit()
    logger.info(f"User {ctx.user_id} cleared cart ({removed} items)")
    return ShoppingCartOut()
