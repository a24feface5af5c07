# app/api/auth.py
# Роуты для регистрации и получения JWT токена.
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from fastapi.security import OAuth2PasswordRequestForm
from datetime import timedelta

from app.core import security
from app.core.config import settings
from app.core.errors import ValidationFailure
from app.dao import users
from app.db.session import get_db
from app.schemas.auth import RegisterRequest, Token, UserOut

router = APIRouter()

@router.post("/register", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def register(body: RegisterRequest, db: Session = Depends(get_db)):
    """
    Регистрация пользователя: username + password.
    Роль всегда user, пустой профиль создаётся сразу.
    """
    if body.password != body.confirm_password:
        raise ValidationFailure("Passwords do not match")
    hashed = security.get_password_hash(body.password)
    return users.create_with_profile(db, body.username, hashed)

@router.post("/token", response_model=Token)
def login(form_data: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(get_db)):
    """Логин: возвращает access_token (JWT) с sub = id пользователя."""
    user = users.get_by_username(db, form_data.username)
    if not user or not security.verify_password(form_data.password, user.hashed_password):
        raise HTTPException(status_code=400, detail="Incorrect credentials")
    access_token_expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    token = security.create_access_token(subject=str(user.id), expires_delta=access_token_expires)
    return {"access_token": token, "token_type": "bearer"}
