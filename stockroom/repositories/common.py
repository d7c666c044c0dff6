import logging
from contextlib import contextmanager

from sqlalchemy import func, select
from sqlalchemy.exc import DataError, IntegrityError
from sqlalchemy.orm import Session

from stockroom.core.exceptions import ConstraintViolation, InvalidSortField
from stockroom.schemas.paging import Page, PageRequest

logger = logging.getLogger(__name__)


def escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def resolve_sort(sort, sortable):
    clauses = []
    for entry in sort or ():
        descending = entry.startswith("-")
        name = entry[1:] if descending else entry
        column = sortable.get(name)
        if column is None:
            raise InvalidSortField(name, sortable.keys())
        clauses.append(column.desc() if descending else column.asc())
    return clauses


def paginate(db: Session, stmt, page_request: PageRequest, *, sortable, default_order) -> Page:
    """Run ``stmt`` as one page.

    The primary-key ``default_order`` is always appended after any requested
    sort so rows never move between pages.
    """
    ordering = resolve_sort(page_request.sort, sortable) + list(default_order)

    total = db.execute(
        select(func.count()).select_from(stmt.order_by(None).subquery())
    ).scalar_one()

    rows = (
        db.execute(
            stmt.order_by(*ordering)
            .offset(page_request.offset)
            .limit(page_request.size)
        )
        .scalars()
        .all()
    )
    return Page(items=list(rows), page=page_request.page, size=page_request.size, total=total)


@contextmanager
def unit_of_work(db: Session, entity_label: str):
    """Commit everything staged inside the block, or roll all of it back."""
    try:
        yield db
        db.commit()
    except (IntegrityError, DataError) as exc:
        db.rollback()
        logger.warning("Rejected %s write: %s", entity_label, exc.orig)
        raise ConstraintViolation(
            "{} violates a schema constraint: {}".format(entity_label, exc.orig),
            entity=entity_label,
        ) from exc
    except Exception:
        db.rollback()
        raise


def commit_or_raise(db: Session, entity_label: str) -> None:
    with unit_of_work(db, entity_label):
        pass
