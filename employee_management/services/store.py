import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from employee_management.core.errors import StoreConflictError

logger = logging.getLogger(__name__)


def commit_or_conflict(db: Session) -> None:
    """Commit the session, turning constraint violations into a 409-able error."""
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.warning("Store rejected write: %s", exc.orig)
        raise StoreConflictError("Write conflicts with an existing record") from exc


LIKE_ESCAPE = "\\"


def contains_pattern(text: str) -> str:
    """LIKE pattern matching ``text`` literally anywhere; use with ``escape=LIKE_ESCAPE``."""
    escaped = (
        text.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"
