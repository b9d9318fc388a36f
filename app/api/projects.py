import logging
from typing import ClassVar, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from app.api.common import CamelModel, PartialModel, UTCDateTime
from app.database import get_db
from app.errors import StorageError
from app.services import projects as storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/projects", tags=["projects"])


class ProjectCreate(CamelModel):
    title: str
    description: str
    long_description: Optional[str] = None
    category: str
    image_url: str
    technologies: List[str]
    live_url: Optional[str] = None
    github_url: Optional[str] = None
    featured: bool = False
    order: int = 0


class ProjectUpdate(PartialModel):
    nullable_fields: ClassVar[frozenset] = frozenset({"long_description", "live_url", "github_url"})

    title: Optional[str] = None
    description: Optional[str] = None
    long_description: Optional[str] = None
    category: Optional[str] = None
    image_url: Optional[str] = None
    technologies: Optional[List[str]] = None
    live_url: Optional[str] = None
    github_url: Optional[str] = None
    featured: Optional[bool] = None
    order: Optional[int] = None


class ProjectResponse(CamelModel):
    id: str
    title: str
    description: str
    long_description: Optional[str] = None
    category: str
    image_url: str
    technologies: List[str]
    live_url: Optional[str] = None
    github_url: Optional[str] = None
    featured: bool
    order: int
    created_at: UTCDateTime
    updated_at: UTCDateTime


@router.get("", response_model=List[ProjectResponse])
def get_projects(db: Session = Depends(get_db)):
    """All projects, highest `order` first"""
    try:
        return storage.get_all_projects(db)
    except StorageError:
        logger.exception("Error in get_projects")
        raise HTTPException(status_code=500, detail="Failed to fetch projects")


@router.get("/featured", response_model=List[ProjectResponse])
def get_featured_projects(db: Session = Depends(get_db)):
    try:
        return storage.get_featured_projects(db)
    except StorageError:
        logger.exception("Error in get_featured_projects")
        raise HTTPException(status_code=500, detail="Failed to fetch featured projects")


@router.get("/{project_id}", response_model=ProjectResponse)
def get_project(project_id: str, db: Session = Depends(get_db)):
    try:
        project = storage.get_project_by_id(db, project_id)
    except StorageError:
        logger.exception("Error in get_project")
        raise HTTPException(status_code=500, detail="Failed to fetch project")

    if not project:
        raise HTTPException(status_code=404, detail="Project not found")
    return project


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
def create_project(data: ProjectCreate, db: Session = Depends(get_db)):
    try:
        return storage.create_project(db, data.model_dump())
    except StorageError:
        logger.exception("Error in create_project")
        raise HTTPException(status_code=500, detail="Failed to create project")


@router.put("/{project_id}", response_model=ProjectResponse)
def update_project(project_id: str, data: ProjectUpdate, db: Session = Depends(get_db)):
    try:
        project = storage.update_project(db, project_id, data.changes())
    except StorageError:
        logger.exception("Error in update_project")
        raise HTTPException(status_code=500, detail="Failed to update project")

    if not project:
        raise HTTPException(status_code=404, detail="Project not found")
    return project


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_project(project_id: str, db: Session = Depends(get_db)):
    try:
        deleted = storage.delete_project(db, project_id)
    except StorageError:
        logger.exception("Error in delete_project")
        raise HTTPException(status_code=500, detail="Failed to delete project")

    if not deleted:
        raise HTTPException(status_code=404, detail="Project not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
