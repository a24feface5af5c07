# app/api/products.py
# Товары: поиск и просмотр открыты, изменение: только admin.
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from app.core.security import require_role
from app.dao import products
from app.db.session import get_db
from app.models.user import RoleEnum
from app.schemas.catalog import ProductIn, ProductOut

router = APIRouter()
admin_only = [Depends(require_role(RoleEnum.admin))]


@router.get("", response_model=List[ProductOut])
def search(
    cat: Optional[int] = Query(default=None, description="Category id"),
    min_price: Optional[float] = None,
    max_price: Optional[float] = None,
    subcategory: Optional[str] = None,
    db: Session = Depends(get_db),
):
    return products.search(db, category_id=cat, min_price=min_price, max_price=max_price, subcategory=subcategory)


@router.get("/{product_id}", response_model=ProductOut)
def get_by_id(product_id: int, db: Session = Depends(get_db)):
    return products.get_or_404(db, product_id)


@router.post("", response_model=ProductOut, status_code=status.HTTP_201_CREATED, dependencies=admin_only)
def add_product(body: ProductIn, db: Session = Depends(get_db)):
    return products.create(db, body)


@router.put("/{product_id}", status_code=status.HTTP_204_NO_CONTENT, dependencies=admin_only)
def update_product(product_id: int, body: ProductIn, db: Session = Depends(get_db)):
    products.update(db, product_id, body)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT, dependencies=admin_only)
def delete_product(product_id: int, db: Session = Depends(get_db)):
    products.delete(db, product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
