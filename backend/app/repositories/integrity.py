"""Commit helper: turns engine constraint failures into semantic errors."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import ErrorKind, ForeignKeyViolation, UniqueViolation
from app.infrastructure.database import classify_integrity_error

logger = logging.getLogger(__name__)


async def commit_or_translate(db: AsyncSession, entity: str) -> None:
    """Commit the pending write; on a constraint failure roll back and raise.

    Unique and foreign-key failures become UniqueViolation / ForeignKeyViolation.
    Other integrity errors are re-raised unchanged.
    """
    try:
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        kind = classify_integrity_error(e)
        logger.warning(
            f"Integrity error on {entity} write: {e.orig}",
            extra={"entity": entity, "error_code": kind.value if kind else None},
        )
        if kind is ErrorKind.UNIQUE_VIOLATION:
            raise UniqueViolation(entity) from e
        if kind is ErrorKind.FOREIGN_KEY_VIOLATION:
            raise ForeignKeyViolation() from e
        raise
