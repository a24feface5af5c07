# app/dao/users.py
# Доступ к пользователям. Регистрация создаёт пользователя вместе с пустым профилем.
import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import ValidationFailure
from app.models.profile import Profile
from app.models.user import User, RoleEnum

logger = logging.getLogger(__name__)


def get_by_id(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def get_by_username(db: Session, username: str) -> Optional[User]:
    return db.query(User).filter(User.username == username).first()


def create_with_profile(db: Session, username: str, hashed_password: str, role: RoleEnum = RoleEnum.user) -> User:
    """Создаёт пользователя и его профиль в одной транзакции."""
    if get_by_username(db, username) is not None:
        raise ValidationFailure("Username already taken")
    user = User(username=username, hashed_password=hashed_password, role=role)
    db.add(user)
    try:
        db.flush()
        db.add(Profile(user_id=user.id))
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ValidationFailure("Username already taken")
    db.refresh(user)
    logger.info(f"Registered user {user.username} (id={user.id}, role={user.role.value})")
    return user
