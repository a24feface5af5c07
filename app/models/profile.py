# app/models/profile.py
# Модель Profile: контактные данные, ровно одна запись на пользователя.
from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from app.db.base import Base

class Profile(Base):
    __tablename__ = "profiles"

    # user_id одновременно первичный ключ: второй профиль для пользователя невозможен
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    first_name = Column(String(50), nullable=True)
    last_name = Column(String(50), nullable=True)
    phone = Column(String(20), nullable=True)
    email = Column(String(200), nullable=True)
    address = Column(String(200), nullable=True)
    city = Column(String(50), nullable=True)
    state = Column(String(2), nullable=True)
    zip = Column(String(20), nullable=True)

    user = relationship("User", back_populates="profile")
