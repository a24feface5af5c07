# app/dao/profiles.py
from typing import Optional

from sqlalchemy.orm import Session

from app.models.profile import Profile
from app.schemas.profile import ProfileIn


def get_by_user_id(db: Session, user_id: int) -> Optional[Profile]:
    return db.query(Profile).filter(Profile.user_id == user_id).first()


def update(db: Session, user_id: int, data: ProfileIn) -> bool:
    """Перезаписывает атрибуты профиля. False, если профиля нет."""
    updated = (
        db.query(Profile)
        .filter(Profile.user_id == user_id)
        .update(data.model_dump(), synchronize_session=False)
    )
    return updated > 0
