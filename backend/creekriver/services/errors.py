# backend/creekriver/services/errors.py
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

INVALID_DATA_MESSAGE = "Invalid data submitted"


class InvalidDataError(ValueError):
    """A write was rejected by a store constraint or a required-field check."""

    def __init__(self, message: str = INVALID_DATA_MESSAGE):
        super().__init__(message)


def require_text(value: str | None, field: str) -> str:
    if value is None or not value.strip():
        logger.warning("Rejected write: %s is blank", field)
        raise InvalidDataError()
    return value


def commit_or_invalid(db: Session) -> None:
    """Commit, turning FK / NOT NULL violations into InvalidDataError."""
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.warning("Rejected write: %s", exc.orig)
        raise InvalidDataError() from exc
