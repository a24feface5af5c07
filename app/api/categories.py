# app/api/categories.py
# Категории: чтение открыто всем, изменение: только admin.
from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.core.security import require_role
from app.dao import categories, products
from app.db.session import get_db
from app.models.user import RoleEnum
from app.schemas.catalog import CategoryIn, CategoryOut, ProductOut

router = APIRouter()
admin_only = [Depends(require_role(RoleEnum.admin))]


@router.get("", response_model=List[CategoryOut])
def get_all(db: Session = Depends(get_db)):
    return categories.get_all(db)


@router.get("/{category_id}", response_model=CategoryOut)
def get_by_id(category_id: int, db: Session = Depends(get_db)):
    return categories.get_or_404(db, category_id)


@router.get("/{category_id}/products", response_model=List[ProductOut])
def get_products(category_id: int, db: Session = Depends(get_db)):
    return products.get_by_category_id(db, category_id)


@router.post("", response_model=CategoryOut, status_code=status.HTTP_201_CREATED, dependencies=admin_only)
def add_category(body: CategoryIn, db: Session = Depends(get_db)):
    return categories.create(db, body)


@router.put("/{category_id}", status_code=status.HTTP_204_NO_CONTENT, dependencies=admin_only)
def update_category(category_id: int, body: CategoryIn, db: Session = Depends(get_db)):
    categories.update(db, category_id, body)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT, dependencies=admin_only)
def delete_category(category_id: int, db: Session = Depends(get_db)):
    categories.delete(db, category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
