"""
Service layer for site settings.

Settings are key/value pairs where the value is any JSON document.
``upsert`` inserts the key or replaces its value, refreshing
``updated_at``; there is never more than one row per key.
"""

import json
import logging
from typing import Any, List, Optional

from ..core.db import Database
from ..core.utils import utcnow_iso
from ..schemas.setting import SettingRead

logger = logging.getLogger(__name__)

STATS_KEY = "stats"
DEFAULT_STATS = {
    "wruas": 30,
    "projects": 45,
    "hectares": "12,500",
    "communities": "150",
}


class SettingsService:
    """Service for managing site settings."""

    def __init__(self, db: Database) -> None:
        self.db = db

    async def list_settings(self) -> List[SettingRead]:
        conn = self.db.connect()
        try:
            rows = conn.execute("SELECT key, value, updated_at FROM site_settings ORDER BY key").fetchall()
            return [self._row_to_read(row) for row in rows]
        finally:
            conn.close()

    async def get_setting(self, key: str) -> Optional[SettingRead]:
        conn = self.db.connect()
        try:
            row = conn.execute(
                "SELECT key, value, updated_at FROM site_settings WHERE key = ?", (key,)
            ).fetchone()
            return self._row_to_read(row) if row else None
        finally:
            conn.close()

    async def upsert_setting(self, key: str, value: Any) -> SettingRead:
        """Insert or update a setting and return the stored row."""
        now = utcnow_iso()
        with self.db.cursor() as cursor:
            cursor.execute(
                "INSERT INTO site_settings (key, value, updated_at) VALUES (?, ?, ?)"
                " ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = excluded.updated_at",
                (key, json.dumps(value), now),
            )
        logger.info("Setting %s updated", key)
        return SettingRead(key=key, value=value, updated_at=now)

    async def get_stats(self) -> Any:
        """Return the ``stats`` setting, or the built-in figures when it was never set."""
        setting = await self.get_setting(STATS_KEY)
        if setting is None:
            return dict(DEFAULT_STATS)
        return setting.value

    @staticmethod
    def _row_to_read(row) -> SettingRead:
        return SettingRead(key=row["key"], value=json.loads(row["value"]), updated_at=row["updated_at"])
