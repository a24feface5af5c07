# app/api/profile.py
# Профиль текущего пользователя. Отсутствие профиля отдаётся как 404.
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.core.security import AuthContext, get_auth_context
from app.db.session import get_db
from app.schemas.profile import ProfileIn, ProfileOut
from app.services import profile as profile_service

router = APIRouter()


@router.get("", response_model=ProfileOut)
def get_profile(ctx: AuthContext = Depends(get_auth_context), db: Session = Depends(get_db)):
    return profile_service.get_profile(db, ctx)


@router.put("", status_code=status.HTTP_204_NO_CONTENT)
def update_profile(body: ProfileIn, ctx: AuthContext = Depends(get_auth_context), db: Session = Depends(get_db)):
    profile_service.update_profile(db, ctx, body)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
