"""
Projects API

CRUD endpoints for portfolio projects.
"""
from fastapi import Depends
from sqlalchemy.orm import Session

from apps.content.entity import EntityType
from apps.content.repository import SqlAlchemyRepository
from apps.content.router import build_router
from apps.content.service import ResourceService
from apps.projects.models import Project
from apps.projects.schemas import ProjectCreate, ProjectResponse, ProjectUpdate
from apps.shared.database import get_db

PROJECT = EntityType(
    name="project",
    plural="projects",
    label="Project",
    model=Project,
    create_schema=ProjectCreate,
    update_schema=ProjectUpdate,
    read_schema=ProjectResponse,
)


def get_project_service(db: Session = Depends(get_db)) -> ResourceService:
    return ResourceService(PROJECT, SqlAlchemyRepository(Project, db))


router = build_router(PROJECT, get_project_service)
