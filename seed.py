#!/usr/bin/env python3
"""
Seed the WRUAs Forum database with the default admin and sample content.

Safe to run repeatedly; existing records are left alone.

Usage:
    python seed.py
    python seed.py --db ./data/wrua_forum.db
"""

import argparse
import asyncio
import logging
import sys

from wrua_forum_api.app.core.config import Settings
from wrua_forum_api.app.core.db import Database
from wrua_forum_api.app.core.logging_config import setup_logging
from wrua_forum_api.app.seed import DEFAULT_ADMIN_PASSWORD, DEFAULT_ADMIN_USERNAME, seed


def main() -> int:
    settings = Settings.from_env()
    ap = argparse.ArgumentParser(description="Seed the WRUAs Forum database.")
    ap.add_argument("--db", default=settings.database_url, help="SQLite database file (default: DATABASE_URL)")
    args = ap.parse_args()

    setup_logging(settings.log_level)
    db = Database(args.db)
    db.init_db()
    try:
        created = asyncio.run(seed(db))
    except Exception:
        logging.getLogger("seed").exception("Seeding failed")
        return 1

    print(f"[+] Database seeded at {db.path}")
    for kind, count in created.items():
        print(f"    {kind}: {count} created")
    if created["users"]:
        print(f"[!] Admin credentials: {DEFAULT_ADMIN_USERNAME} / {DEFAULT_ADMIN_PASSWORD}")
        print("[!] Change the admin password after first login (see reset_password.py).")
    return 0


if __name__ == "__main__":
    sys.exit(main())
