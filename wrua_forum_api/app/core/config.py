"""
Configuration management.

The ``Settings`` dataclass collects every tunable of the API in one
place.  Values are read from environment variables by
``Settings.from_env`` when the process starts; tests construct a
``Settings`` directly with a temporary database and upload directory.
The resulting object is handed to ``create_app`` and kept on
``app.state``, so no module holds configuration at import time.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass(frozen=True)
class Settings:
    """Application settings."""

    project_name: str = "MaraSondu WRUAs Forum API"
    api_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    log_file: str = ""

    # Secret used to sign bearer tokens.  Always override in production.
    secret_key: str = "your-secret-key-change-in-production"
    access_token_expire_minutes: int = 60 * 24

    # Path to the SQLite database file.  Relative paths are resolved
    # against the project root by ``Database``.
    database_url: str = "wrua_forum.db"

    # Uploaded images are written here and served under ``/uploads``.
    upload_dir: str = "uploads"
    max_upload_bytes: int = 5 * 1024 * 1024
    allowed_image_types: tuple = field(
        default=("image/jpeg", "image/jpg", "image/png", "image/gif", "image/webp")
    )

    # When false, POST /api/admin/register answers 403 and new admins can
    # only be created by the seed script.
    allow_registration: bool = True

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables, falling back to defaults."""
        defaults = cls()
        return cls(
            project_name=os.getenv("PROJECT_NAME", defaults.project_name),
            api_version=os.getenv("API_VERSION", defaults.api_version),
            debug=_env_flag("DEBUG", "false"),
            log_level=os.getenv("LOG_LEVEL", defaults.log_level),
            log_file=os.getenv("LOG_FILE", defaults.log_file),
            secret_key=os.getenv("SESSION_SECRET") or os.getenv("SECRET_KEY", defaults.secret_key),
            access_token_expire_minutes=int(
                os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(defaults.access_token_expire_minutes))
            ),
            database_url=os.getenv("DATABASE_URL", defaults.database_url),
            upload_dir=os.getenv("UPLOAD_DIR", defaults.upload_dir),
            max_upload_bytes=int(float(os.getenv("MAX_UPLOAD_MB", "5")) * 1024 * 1024),
            allow_registration=_env_flag("ALLOW_ADMIN_REGISTRATION", "true"),
        )


PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent


def resolve_path(path: str) -> Path:
    """Resolve ``path`` against the project root unless it is absolute."""
    candidate = Path(path).expanduser()
    if candidate.is_absolute():
        return candidate
    return (PROJECT_ROOT / candidate).resolve()
