# app/models/cart.py
# Модель ShoppingCartItem, строки корзины пользователя.
from sqlalchemy import Column, Integer, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from app.db.base import Base

class ShoppingCartItem(Base):
    __tablename__ = "shopping_cart"
    __table_args__ = (
        UniqueConstraint("user_id", "product_id", name="uq_shopping_cart_user_product"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False)
    quantity = Column(Integer, nullable=False, default=1)

    user = relationship("User")
    product = relationship("Product")
