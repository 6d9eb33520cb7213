"""
Project endpoints.

``router`` is the public catalogue: list with optional filters and a
detail view addressed by id or slug.  ``admin_router`` holds the CRUD
operations and is mounted behind the admin token guard.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from ...core.errors import NotFoundError
from ...schemas.project import ProjectCreate, ProjectRead, ProjectStatus, ProjectUpdate
from ...services.project_service import ProjectService
from ..deps import get_project_service

router = APIRouter()
admin_router = APIRouter()


@router.get("", response_model=List[ProjectRead])
async def list_projects(
    category: Optional[str] = Query(None, description="Exact category match"),
    location: Optional[str] = Query(None, description="Substring of the location"),
    sdg: Optional[int] = Query(None, ge=1, le=17, description="Projects tagged with this SDG"),
    service: ProjectService = Depends(get_project_service),
) -> List[ProjectRead]:
    """Return all projects, newest first."""
    return await service.list(category=category, location=location, sdg=sdg)


@router.get("/{id_or_slug}", response_model=ProjectRead)
async def get_project(
    id_or_slug: str,
    service: ProjectService = Depends(get_project_service),
) -> ProjectRead:
    """Retrieve a project by id, falling back to its slug."""
    project = await service.get_by_id_or_slug(id_or_slug)
    if project is None:
        raise NotFoundError("Project not found")
    return project


@admin_router.get("", response_model=List[ProjectRead])
async def admin_list_projects(
    status_filter: Optional[ProjectStatus] = Query(None, alias="status"),
    service: ProjectService = Depends(get_project_service),
) -> List[ProjectRead]:
    return await service.list(status=status_filter)


@admin_router.get("/{project_id}", response_model=ProjectRead)
async def admin_get_project(
    project_id: str,
    service: ProjectService = Depends(get_project_service),
) -> ProjectRead:
    project = await service.get(project_id)
    if project is None:
        raise NotFoundError("Project not found")
    return project


@admin_router.post("", response_model=ProjectRead, status_code=status.HTTP_201_CREATED)
async def create_project(
    project_in: ProjectCreate,
    service: ProjectService = Depends(get_project_service),
) -> ProjectRead:
    """Create a project.  The slug is derived from the title when omitted."""
    return await service.create(project_in)


@admin_router.api_route("/{project_id}", methods=["PUT", "PATCH"], response_model=ProjectRead)
async def update_project(
    project_id: str,
    project_in: ProjectUpdate,
    service: ProjectService = Depends(get_project_service),
) -> ProjectRead:
    """Update the provided fields of a project."""
    project = await service.update(project_id, project_in)
    if project is None:
        raise NotFoundError("Project not found")
    return project


@admin_router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
    project_id: str,
    service: ProjectService = Depends(get_project_service),
) -> None:
    """Delete a project.  Deleting an unknown id is not an error."""
    await service.delete(project_id)
    return None
