"""
Top-level router for the ``/api`` namespace.

Public routes are mounted directly.  Admin routes share the ``/admin``
prefix and sit behind ``get_current_admin`` at router level, so no
admin endpoint can be added without the token check.  Login and
register are the only exceptions and live on their own router.
"""

from fastapi import APIRouter, Depends

from ..core.security import get_current_admin
from .endpoints import (
    auth,
    blog,
    contact,
    funding,
    newsletter,
    projects,
    settings,
    stats,
    uploads,
    wruas,
)

public_router = APIRouter()
public_router.include_router(projects.router, prefix="/projects", tags=["projects"])
public_router.include_router(wruas.router, prefix="/wruas", tags=["wruas"])
public_router.include_router(blog.router, prefix="/blog", tags=["blog"])
public_router.include_router(funding.router, prefix="/funding", tags=["funding"])
public_router.include_router(stats.router, prefix="/stats", tags=["stats"])
public_router.include_router(contact.router, prefix="/contact", tags=["contact"])
public_router.include_router(newsletter.router, prefix="/newsletter", tags=["newsletter"])

admin_router = APIRouter(dependencies=[Depends(get_current_admin)])
admin_router.include_router(uploads.admin_router, tags=["admin"])
admin_router.include_router(projects.admin_router, prefix="/projects", tags=["admin"])
admin_router.include_router(wruas.admin_router, prefix="/wruas", tags=["admin"])
admin_router.include_router(blog.admin_router, prefix="/blog", tags=["admin"])
admin_router.include_router(funding.admin_router, prefix="/funding", tags=["admin"])
admin_router.include_router(contact.admin_router, prefix="/messages", tags=["admin"])
admin_router.include_router(newsletter.admin_router, prefix="/subscribers", tags=["admin"])
admin_router.include_router(settings.admin_router, prefix="/settings", tags=["admin"])

router = APIRouter()
router.include_router(public_router)
router.include_router(auth.router, prefix="/admin", tags=["auth"])
router.include_router(admin_router, prefix="/admin")
