from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, Integer, String

from stockroom.core import dates
from stockroom.core.constants import USER_ROLES
from stockroom.database.base import Base


class User(Base):
    __tablename__ = "users"

    user_id = Column(Integer, primary_key=True)
    username = Column(String(50), nullable=False, unique=True)
    email = Column(String(120))
    first_name = Column(String(80))
    last_name = Column(String(80))
    role = Column(String(20), nullable=False, default="staff")
    is_active = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: dates.utcnow())

    __table_args__ = (
        CheckConstraint(
            "role IN ({})".format(", ".join("'{}'".format(role) for role in USER_ROLES)),
            name="ck_users_role",
        ),
    )


__all__ = ["User"]
