from typing import Optional

from sqlalchemy.orm import Session

from stockroom.models.user import User
from stockroom.repositories.common import commit_or_raise


def create_user(
    db: Session,
    username: str,
    *,
    email: Optional[str] = None,
    first_name: Optional[str] = None,
    last_name: Optional[str] = None,
    role: str = "staff",
) -> User:
    user = User(
        username=username,
        email=email,
        first_name=first_name,
        last_name=last_name,
        role=role,
    )
    db.add(user)
    commit_or_raise(db, "user")
    return user


def get_user(db: Session, user_id: int) -> Optional[User]:
    return db.get(User, user_id)
