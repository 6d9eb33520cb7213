#!/usr/bin/env python3
"""
Reset an administrator's password in the WRUAs Forum SQLite database.

This script does not read or reveal any existing password.  It stores a
new PBKDF2 hash for the given username.

Usage:
    python reset_password.py --username admin --password "NewStrongPass!234"
    python reset_password.py --db ./wrua_forum.db --username admin

If --password is omitted, you will be prompted to enter it securely.
"""

import argparse
import asyncio
import getpass
import sys
from pathlib import Path

from wrua_forum_api.app.core.config import Settings
from wrua_forum_api.app.core.db import Database
from wrua_forum_api.app.services.user_service import UserService


def main() -> int:
    ap = argparse.ArgumentParser(description="Reset a WRUAs Forum admin password.")
    ap.add_argument("--db", default=Settings.from_env().database_url, help="SQLite database file")
    ap.add_argument("--username", required=True, help="Admin username to update")
    ap.add_argument("--password", help="New password. If omitted, you'll be prompted securely.")
    args = ap.parse_args()

    db = Database(args.db)
    if not Path(db.path).exists():
        print(f"[!] DB not found: {db.path}", file=sys.stderr)
        return 1

    new_password = args.password or getpass.getpass("Enter NEW password: ")
    if not new_password:
        print("[!] Empty password is not allowed.", file=sys.stderr)
        return 1

    if not asyncio.run(UserService(db).set_password(args.username, new_password)):
        print(f"[!] No admin found with username: {args.username}", file=sys.stderr)
        return 2
    print(f"[+] Password updated for admin: {args.username}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
