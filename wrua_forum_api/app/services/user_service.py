"""
Business logic for admin users.

Passwords are stored as salted PBKDF2 hashes (see ``core.security``).
``authenticate`` returns ``None`` both for unknown usernames and for
wrong passwords so callers cannot tell the two apart.
"""

import logging
import sqlite3
from typing import Optional

from ..core.db import Database
from ..core.errors import ValidationError
from ..core.security import hash_password, verify_password
from ..core.utils import new_id, utcnow_iso
from ..schemas.user import UserCreate, UserRead

logger = logging.getLogger(__name__)


class UserService:
    """Service for administrator accounts."""

    def __init__(self, db: Database) -> None:
        self.db = db

    async def get_user_by_id(self, user_id: str) -> Optional[UserRead]:
        conn = self.db.connect()
        try:
            row = conn.execute("SELECT id, username FROM users WHERE id = ?", (user_id,)).fetchone()
            return UserRead(id=row["id"], username=row["username"]) if row else None
        finally:
            conn.close()

    async def get_by_username(self, username: str) -> Optional[UserRead]:
        conn = self.db.connect()
        try:
            row = conn.execute("SELECT id, username FROM users WHERE username = ?", (username,)).fetchone()
            return UserRead(id=row["id"], username=row["username"]) if row else None
        finally:
            conn.close()

    async def create_user(self, data: UserCreate) -> UserRead:
        """Create an administrator.

        Raises ``ValidationError`` when the username is taken.
        """
        logger.info("Registering admin %s", data.username)
        user_id = new_id()
        conn = self.db.connect()
        try:
            conn.execute(
                "INSERT INTO users (id, username, password, created_at) VALUES (?, ?, ?, ?)",
                (user_id, data.username, hash_password(data.password), utcnow_iso()),
            )
            conn.commit()
        except sqlite3.IntegrityError as exc:
            conn.rollback()
            raise ValidationError("Username already exists") from exc
        finally:
            conn.close()
        return UserRead(id=user_id, username=data.username)

    async def authenticate(self, username: str, password: str) -> Optional[UserRead]:
        """Return the user if the credentials match, otherwise ``None``."""
        conn = self.db.connect()
        try:
            row = conn.execute(
                "SELECT id, username, password FROM users WHERE username = ?", (username,)
            ).fetchone()
        finally:
            conn.close()
        if not row or not verify_password(password, row["password"]):
            logger.info("Failed login for %s", username)
            return None
        return UserRead(id=row["id"], username=row["username"])

    async def set_password(self, username: str, password: str) -> bool:
        """Replace the password of ``username``; returns ``False`` for unknown users."""
        with self.db.cursor() as cursor:
            cursor.execute(
                "UPDATE users SET password = ? WHERE username = ?",
                (hash_password(password), username),
            )
            updated = cursor.rowcount > 0
        if updated:
            logger.info("Password updated for %s", username)
        return updated
