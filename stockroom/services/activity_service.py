import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from stockroom.models.activity_log import ActivityLog
from stockroom.repositories.activity_logs import add_log
from stockroom.repositories.common import unit_of_work

logger = logging.getLogger(__name__)


def record_activity(
    db: Session,
    action: str,
    entity_type: Optional[str],
    entity_id: Optional[int],
    *,
    user_id: Optional[int] = None,
    details: Optional[dict] = None,
    ip_address: Optional[str] = None,
    commit: bool = True,
) -> ActivityLog:
    """Write an audit row.

    With ``commit=False`` the row is only staged so it lands in the caller's
    transaction.
    """
    if not commit:
        return add_log(
            db,
            action,
            user_id=user_id,
            entity_type=entity_type,
            entity_id=entity_id,
            details=details,
            ip_address=ip_address,
        )

    try:
        with unit_of_work(db, "activity log"):
            log = add_log(
                db,
                action,
                user_id=user_id,
                entity_type=entity_type,
                entity_id=entity_id,
                details=details,
                ip_address=ip_address,
            )
    except SQLAlchemyError:
        logger.exception("Activity logging failed for %s %s %s", action, entity_type, entity_id)
        raise
    return log


__all__ = ["record_activity"]
