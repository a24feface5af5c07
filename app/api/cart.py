# app/api/cart.py
# Корзина текущего пользователя. Каждый ответ содержит актуальное состояние корзины.
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.security import AuthContext, get_auth_context
from app.db.session import get_db
from app.schemas.cart import QuantityUpdate, ShoppingCartOut
from app.services import cart as cart_service

router = APIRouter()


@router.get("", response_model=ShoppingCartOut)
def get_cart(ctx: AuthContext = Depends(get_auth_context), db: Session = Depends(get_db)):
    return cart_service.get_cart(db, ctx)


@router.post("/products/{product_id}", response_model=ShoppingCartOut)
def add_product(product_id: int, ctx: AuthContext = Depends(get_auth_context), db: Session = Depends(get_db)):
    return cart_service.add_to_cart(db, ctx, product_id)


@router.put("/products/{product_id}", response_model=ShoppingCartOut)
def update_product(
    product_id: int,
    body: QuantityUpdate,
    ctx: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db),
):
    return cart_service.update_quantity(db, ctx, product_id, body.quantity)


@router.delete("", response_model=ShoppingCartOut)
def clear_cart(ctx: AuthContext = Depends(get_auth_context), db: Session = Depends(get_db)):
    return cart_service.clear_cart(db, ctx)
