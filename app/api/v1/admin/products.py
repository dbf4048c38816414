from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.api.deps import get_current_admin_user
from app.models.user import User
from app.models.product import Category, Product
from app.schemas.catalog import (
    CategoryCreate,
    Category as CategorySchema,
    ProductCreate,
    ProductUpdate,
    Product as ProductSchema,
)

router = APIRouter(prefix="/admin/products", tags=["Admin - Products"])
category_router = APIRouter(prefix="/admin/categories", tags=["Admin - Products"])


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _check_category(db: Session, category_id: int) -> None:
    if not db.query(Category.id).filter(Category.id == category_id).first():
        raise HTTPException(status_code=404, detail="Category not found")


def _check_sku_free(db: Session, sku: str, product_id: int = None) -> None:
    query = db.query(Product.id).filter(Product.sku == sku)
    if product_id is not None:
        query = query.filter(Product.id != product_id)
    if query.first():
        raise HTTPException(status_code=409, detail=f"SKU '{sku}' already exists")


# ---------------------------------------------------------------------------
# Category CRUD
# ---------------------------------------------------------------------------


@category_router.post("/", response_model=CategorySchema, status_code=status.HTTP_201_CREATED)
def create_category(
    data: CategoryCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    if db.query(Category.id).filter(Category.name == data.name).first():
        raise HTTPException(status_code=409, detail="Category already exists")
    category = Category(name=data.name)
    db.add(category)
    db.commit()
    db.refresh(category)
    return category


@category_router.put("/{id}", response_model=CategorySchema)
def update_category(
    id: int,
    data: CategoryCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    category = db.query(Category).filter(Category.id == id).first()
    if not category:
        raise HTTPException(status_code=404, detail="Category not found")
    if db.query(Category.id).filter(Category.name == data.name, Category.id != id).first():
        raise HTTPException(status_code=409, detail="Category already exists")
    category.name = data.name
    db.commit()
    db.refresh(category)
    return category


@category_router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category(
    id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    category = db.query(Category).filter(Category.id == id).first()
    if not category:
        raise HTTPException(status_code=404, detail="Category not found")
    if db.query(Product.id).filter(Product.category_id == id).first():
        raise HTTPException(status_code=409, detail="Category still has products")
    db.delete(category)
    db.commit()


# ---------------------------------------------------------------------------
# Product CRUD
# ---------------------------------------------------------------------------


@router.post("/", response_model=ProductSchema, status_code=status.HTTP_201_CREATED)
def create_product(
    data: ProductCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    _check_category(db, data.category_id)
    _check_sku_free(db, data.sku)

    product = Product(**data.model_dump())
    db.add(product)
    db.commit()
    db.refresh(product)
    return product


@router.patch("/{id}", response_model=ProductSchema)
def update_product(
    id: int,
    data: ProductUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    product = db.query(Product).filter(Product.id == id, Product.is_active == True).first()
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")

    update_data = data.model_dump(exclude_unset=True)
    if "category_id" in update_data:
        _check_category(db, update_data["category_id"])
    if "sku" in update_data:
        _check_sku_free(db, update_data["sku"], product_id=id)

    for field, value in update_data.items():
        setattr(product, field, value)

    db.commit()
    db.refresh(product)
    return product


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    """Soft delete: past order items keep pointing at the product."""
    product = db.query(Product).filter(Product.id == id, Product.is_active == True).first()
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")

    product.is_active = False
    db.commit()
