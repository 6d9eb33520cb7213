"""
Service layer for newsletter subscribers.

The unique constraint on ``email`` is the duplicate check: a second
signup with the same address raises ``ConflictError`` (409) and leaves
the table untouched.
"""

from __future__ import annotations

from ..schemas.newsletter import SubscriberRead
from .base import ResourceService


class SubscriberService(ResourceService[SubscriberRead]):
    table = "newsletter_subscribers"
    columns = ("email", "active")
    bool_columns = ("active",)
    unique_messages = {"email": "Email already subscribed"}
    order_by = "subscribed_at DESC, rowid DESC"
    created_column = "subscribed_at"
    read_model = SubscriberRead
    label = "newsletter subscriber"

    async def unsubscribe(self, email: str) -> bool:
        """Deactivate the subscription for ``email``; unknown addresses are ignored."""
        affected = self._write(
            f"UPDATE {self.table} SET active = 0 WHERE email = ?", (email.strip().lower(),)
        )
        if affected:
            self.logger.info("Unsubscribed %s", email)
        return affected > 0

    async def count(self) -> int:
        conn = self.db.connect()
        try:
            row = conn.execute(f"SELECT COUNT(*) AS count FROM {self.table}").fetchone()
            return row["count"]
        finally:
            conn.close()
