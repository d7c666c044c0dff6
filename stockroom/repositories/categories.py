from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from stockroom.models.category import Category
from stockroom.repositories.common import commit_or_raise
from stockroom.schemas.category import CategoryCreate


def create_category(db: Session, payload: CategoryCreate) -> Category:
    category = Category(category_name=payload.category_name, description=payload.description)
    db.add(category)
    commit_or_raise(db, "category")
    return category


def get_category(db: Session, category_id: int) -> Optional[Category]:
    return db.get(Category, category_id)


def list_categories(db: Session) -> list[Category]:
    stmt = select(Category).order_by(Category.category_name.asc())
    return list(db.execute(stmt).scalars().all())


def delete_category(db: Session, category_id: int) -> bool:
    """Delete a category. Fails with ConstraintViolation while items still reference it."""
    category = db.get(Category, category_id)
    if category is None:
        return False
    db.delete(category)
    commit_or_raise(db, "category")
    return True
