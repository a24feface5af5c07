# app/schemas/profile.py
# Длины строк повторяют колонки app/models/profile.py.
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ProfileIn(BaseModel):
    """Атрибуты профиля; user_id всегда берётся из токена, а не из тела запроса."""

    first_name: Optional[str] = Field(None, max_length=50)
    last_name: Optional[str] = Field(None, max_length=50)
    phone: Optional[str] = Field(None, max_length=20)
    email: Optional[str] = Field(None, max_length=200)
    address: Optional[str] = Field(None, max_length=200)
    city: Optional[str] = Field(None, max_length=50)
    state: Optional[str] = Field(None, max_length=2)
    zip: Optional[str] = Field(None, max_length=20)


class ProfileOut(ProfileIn):
    model_config = ConfigDict(from_attributes=True)

    user_id: int
