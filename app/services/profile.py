# app/services/profile.py
# Агрегат профиля: ровно один профиль на пользователя.
import logging

from sqlalchemy.orm import Session

from app.core.errors import NotFoundError
from app.core.security import AuthContext
from app.dao import profiles
from app.models.profile import Profile
from app.schemas.profile import ProfileIn

logger = logging.getLogger(__name__)


def get_profile(db: Session, ctx: AuthContext) -> Profile:
    profile = profiles.get_by_user_id(db, ctx.user_id)
    if profile is None:
        raise NotFoundError("Profile not found")
    return profile


def update_profile(db: Session, ctx: AuthContext, data: ProfileIn) -> None:
    """Перезаписывает атрибуты профиля вызывающего пользователя."""
    if not profiles.update(db, ctx.user_id, data):
        db.rollback()
        raise NotFoundError("Profile not found")
    db.commit()
    logger.info(f"Updated profile of user {ctx.user_id}")
