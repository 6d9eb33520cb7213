"""
Request-scoped dependencies.

The ``Database`` and ``Settings`` live on ``app.state`` (see
``create_app``); these providers hand them, or a service built on top
of them, to the endpoints.  Tests get isolated state simply by building
a fresh application.
"""

from fastapi import Depends, Request

from ..core.config import Settings
from ..core.db import Database
from ..services.blog_service import BlogService
from ..services.funding_service import FundingService
from ..services.message_service import MessageService
from ..services.project_service import ProjectService
from ..services.settings_service import SettingsService
from ..services.subscriber_service import SubscriberService
from ..services.user_service import UserService
from ..services.wrua_service import WruaService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_db(request: Request) -> Database:
    return request.app.state.db


def get_project_service(db: Database = Depends(get_db)) -> ProjectService:
    return ProjectService(db)


def get_wrua_service(db: Database = Depends(get_db)) -> WruaService:
    return WruaService(db)


def get_blog_service(db: Database = Depends(get_db)) -> BlogService:
    return BlogService(db)


def get_funding_service(db: Database = Depends(get_db)) -> FundingService:
    return FundingService(db)


def get_message_service(db: Database = Depends(get_db)) -> MessageService:
    return MessageService(db)


def get_subscriber_service(db: Database = Depends(get_db)) -> SubscriberService:
    return SubscriberService(db)


def get_settings_service(db: Database = Depends(get_db)) -> SettingsService:
    return SettingsService(db)


def get_user_service(db: Database = Depends(get_db)) -> UserService:
    return UserService(db)
