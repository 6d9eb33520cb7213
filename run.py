"""Entry point for the WRUAs Forum API.

Builds the application from environment settings and serves it with
uvicorn.  Host and port come from ``HOST`` and ``PORT`` (defaults
``0.0.0.0`` and ``5000``).

Usage:
    python run.py
"""
import asyncio
import os

from uvicorn import Config, Server

from wrua_forum_api.app.core.config import Settings
from wrua_forum_api.app.main import create_app


async def main() -> None:
    settings = Settings.from_env()
    app = create_app(settings)
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "5000"))
    config = Config(app=app, host=host, port=port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
