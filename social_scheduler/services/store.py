"""
Write helpers shared by the services.
"""
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..errors import StoreError
from ..logging_config import db_logger


def commit(db: Session, *instances) -> None:
    """Commit the session and refresh ``instances``; roll back on any store failure."""
    try:
        db.commit()
        for instance in instances:
            db.refresh(instance)
    except SQLAlchemyError as e:
        db.rollback()
        db_logger.error("Commit failed", error=e)
        raise StoreError("Database error") from e
