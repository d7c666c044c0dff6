from sqlalchemy import JSON, Column, DateTime, ForeignKey, Index, Integer, String

from stockroom.core import dates
from stockroom.database.base import Base


class ActivityLog(Base):
    __tablename__ = "activity_logs"

    log_id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.user_id"))

    action = Column(String(50), nullable=False)
    entity_type = Column(String(50))
    entity_id = Column(Integer)
    details = Column(JSON)
    ip_address = Column(String(45))

    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: dates.utcnow())

    __table_args__ = (
        Index("idx_activity_logs_user", "user_id"),
        Index("idx_activity_logs_action", "action"),
    )


__all__ = ["ActivityLog"]
