from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from stockroom.models.activity_log import ActivityLog
from stockroom.repositories.common import paginate
from stockroom.schemas.paging import Page, PageRequest

SORTABLE_COLUMNS = {
    "log_id": ActivityLog.log_id,
    "created_at": ActivityLog.created_at,
    "action": ActivityLog.action,
    "entity_type": ActivityLog.entity_type,
}


def add_log(
    db: Session,
    action: str,
    *,
    user_id: Optional[int] = None,
    entity_type: Optional[str] = None,
    entity_id: Optional[int] = None,
    details: Optional[dict] = None,
    ip_address: Optional[str] = None,
) -> ActivityLog:
    """Stage an activity row; the caller commits."""
    log = ActivityLog(
        user_id=user_id,
        action=action,
        entity_type=entity_type,
        entity_id=entity_id,
        details=details,
        ip_address=ip_address,
    )
    db.add(log)
    return log


def find_page_by_user(db: Session, user_id: int, page_request: PageRequest) -> Page:
    stmt = select(ActivityLog).where(ActivityLog.user_id == user_id)
    return paginate(
        db,
        stmt,
        page_request,
        sortable=SORTABLE_COLUMNS,
        default_order=[ActivityLog.log_id.asc()],
    )


def find_page_by_action(db: Session, action: str, page_request: PageRequest) -> Page:
    stmt = select(ActivityLog).where(ActivityLog.action == action)
    return paginate(
        db,
        stmt,
        page_request,
        sortable=SORTABLE_COLUMNS,
        default_order=[ActivityLog.log_id.asc()],
    )
