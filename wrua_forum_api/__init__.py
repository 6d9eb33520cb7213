"""
Top-level package for the MaraSondu WRUAs Forum API.

Everything lives under ``app``; import the application factory as
``wrua_forum_api.app.create_app``.
"""

__all__ = []
