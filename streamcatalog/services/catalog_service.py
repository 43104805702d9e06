"""
Service layer for writing catalog rows.
Payloads are validated against the insert schemas before they reach the session;
database errors (unique email, ...) roll the session back and are re-raised unchanged.
"""
import logging
from datetime import datetime
from typing import Any, Mapping, Optional

from pydantic.alias_generators import to_camel
from sqlalchemy.orm import Session

from streamcatalog.exceptions import NotFoundError
from streamcatalog.models import User, Series, Episode, WatchHistory, Favorite
from streamcatalog.models.session import Session as LoginSession
from streamcatalog.validation import validate_insert

logger = logging.getLogger(__name__)


class CatalogService:

    @staticmethod
    def _commit(db: Session):
        # Leave the session usable after a failed flush; the error still propagates
        try:
            db.commit()
        except Exception:
            db.rollback()
            raise

    @staticmethod
    def _insert(model, payload: Mapping[str, Any], db: Session):
        values = validate_insert(model.__tablename__, payload)
        row = model(**values)
        db.add(row)
        CatalogService._commit(db)
        db.refresh(row)
        logger.debug("Inserted %r", row)
        return row

    @staticmethod
    def upsert_user(payload: Mapping[str, Any], db: Session) -> User:
        """Create the user, or overwrite the supplied fields of an existing one."""
        values = validate_insert(User.__tablename__, payload)
        user = db.query(User).filter(User.id == values["id"]).first()
        if user:
            # Only overwrite what the caller sent, not schema defaults
            for key, value in values.items():
                if key in payload or to_camel(key) in payload:
                    setattr(user, key, value)
            user.updated_at = datetime.utcnow()
        else:
            user = User(**values)
            db.add(user)
            logger.info("Created user %s", values["id"])
        CatalogService._commit(db)
        db.refresh(user)
        return user

    @staticmethod
    def get_user(user_id: str, db: Session) -> User:
        user = db.query(User).filter(User.id == user_id).first()
        if not user:
            raise NotFoundError("User", user_id)
        return user

    @staticmethod
    def create_session(payload: Mapping[str, Any], db: Session) -> LoginSession:
        return CatalogService._insert(LoginSession, payload, db)

    @staticmethod
    def create_series(payload: Mapping[str, Any], db: Session) -> Series:
        series = CatalogService._insert(Series, payload, db)
        logger.info("Created series %s: %s", series.id, series.title)
        return series

    @staticmethod
    def create_episode(payload: Mapping[str, Any], db: Session) -> Episode:
        return CatalogService._insert(Episode, payload, db)

    @staticmethod
    def record_watch(payload: Mapping[str, Any], db: Session) -> WatchHistory:
        return CatalogService._insert(WatchHistory, payload, db)

    @staticmethod
    def add_favorite(payload: Mapping[str, Any], db: Session) -> Favorite:
        # Repeated (user, series) pairs are stored as separate rows
        return CatalogService._insert(Favorite, payload, db)

    @staticmethod
    def update_watch_progress(
        record_id: int,
        db: Session,
        progress_percentage: Optional[int] = None,
        completed: Optional[bool] = None,
    ) -> WatchHistory:
        """
        Overwrite progress and/or completion of a watch record.
        The two values are stored as given; neither is derived from the other.
        watched_at moves only when at least one value is supplied.
        """
        record = db.query(WatchHistory).filter(WatchHistory.id == record_id).first()
        if not record:
            raise NotFoundError("WatchHistory", record_id)

        if progress_percentage is None and completed is None:
            return record

        if progress_percentage is not None:
            record.progress_percentage = progress_percentage
        if completed is not None:
            record.completed = completed
        record.watched_at = datetime.utcnow()

        CatalogService._commit(db)
        db.refresh(record)
        return record

    @staticmethod
    def purge_expired_sessions(db: Session, now: Optional[datetime] = None) -> int:
        """Delete sessions whose expiry is in the past. Returns the number removed."""
        cutoff = now or datetime.utcnow()
        removed = (
            db.query(LoginSession)
            .filter(LoginSession.expire < cutoff)
            .delete(synchronize_session=False)
        )
        CatalogService._commit(db)
        if removed:
            logger.info("Purged %d expired sessions", removed)
        return removed
