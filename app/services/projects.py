import logging

from sqlalchemy.orm import Session

from app.models.project import Project
from app.services.common import apply_fields, delete_row, get_row, storage_errors, writable

logger = logging.getLogger(__name__)


def get_all_projects(db: Session) -> list[Project]:
    """All projects, highest `order` first."""
    with storage_errors(db, "fetch projects"):
        return db.query(Project).order_by(Project.order.desc()).all()


def get_featured_projects(db: Session) -> list[Project]:
    with storage_errors(db, "fetch featured projects"):
        return (
            db.query(Project)
            .filter(Project.featured == True)  # noqa: E712
            .order_by(Project.order.desc())
            .all()
        )


def get_project_by_id(db: Session, project_id: str) -> Project | None:
    return get_row(db, Project, project_id, "fetch project")


def create_project(db: Session, fields: dict) -> Project:
    project = Project(**writable(fields))
    with storage_errors(db, "create project"):
        db.add(project)
        db.commit()
        db.refresh(project)
    logger.info("created project id=%s", project.id)
    return project


def update_project(db: Session, project_id: str, fields: dict) -> Project | None:
    with storage_errors(db, "update project"):
        project = db.query(Project).filter(Project.id == project_id).first()
        if not project:
            return None
        apply_fields(project, fields)
        db.commit()
        db.refresh(project)
    logger.info("updated project id=%s fields=%s", project_id, sorted(fields))
    return project


def delete_project(db: Session, project_id: str) -> bool:
    return delete_row(db, Project, project_id, "delete project")
