"""Server-side session store mapping opaque cookie tokens to users.

The store only needs a SQLAlchemy session, so it can be exercised directly in
tests without going through HTTP.
"""

import logging
from datetime import UTC, datetime, timedelta
from typing import Optional

from sqlalchemy.orm import Session

from backend.app.core.security import generate_session_token
from backend.app.core.settings import get_settings
from backend.app.core.time import utc_now
from backend.app.models.user import User
from backend.app.models.user_session import UserSession

logger = logging.getLogger(__name__)


def _as_utc(value: datetime) -> datetime:
    # SQLite hands datetimes back without tzinfo
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class SessionStore:
    def __init__(self, db: Session, expire_minutes: Optional[int] = None):
        self.db = db
        if expire_minutes is None:
            expire_minutes = get_settings().session_expire_minutes
        self.expire_minutes = expire_minutes

    def create(self, user: User) -> str:
        now = utc_now()
        token = generate_session_token()
        # Expired rows are swept on every login.
        self._delete_expired(now)
        self.db.add(
            UserSession(
                token=token,
                user_id=user.id,
                created_at=now,
                expires_at=now + timedelta(minutes=self.expire_minutes),
            )
        )
        self.db.commit()
        return token

    def resolve(self, token: Optional[str]) -> Optional[User]:
        """Return the user behind ``token`` or None for an anonymous caller."""
        if not token:
            return None
        session_row = self.db.query(UserSession).filter(UserSession.token == token).first()
        if session_row is None:
            return None
        if _as_utc(session_row.expires_at) <= utc_now():
            logger.info("Session for user_id=%s expired", session_row.user_id)
            self.db.delete(session_row)
            self.db.commit()
            return None
        return session_row.user

    def revoke(self, token: Optional[str]) -> None:
        if not token:
            return
        deleted = self.db.query(UserSession).filter(UserSession.token == token).delete()
        self.db.commit()
        if deleted:
            logger.info("Session revoked")

    def purge_expired(self) -> int:
        deleted = self._delete_expired(utc_now())
        self.db.commit()
        return deleted

    def _delete_expired(self, now: datetime) -> int:
        deleted = (
            self.db.query(UserSession)
            .filter(UserSession.expires_at <= now)
            .delete(synchronize_session=False)
        )
        if deleted:
            logger.info("Removed %d expired sessions", deleted)
        return deleted
