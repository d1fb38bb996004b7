"""
Blogs API

CRUD endpoints for blog posts.
"""
from fastapi import Depends
from sqlalchemy.orm import Session

from apps.blog.models import Blog
from apps.blog.schemas import BlogCreate, BlogResponse, BlogUpdate
from apps.content.entity import EntityType
from apps.content.repository import SqlAlchemyRepository
from apps.content.router import build_router
from apps.content.service import ResourceService
from apps.shared.database import get_db

BLOG = EntityType(
    name="blog",
    plural="blogs",
    label="Blog",
    model=Blog,
    create_schema=BlogCreate,
    update_schema=BlogUpdate,
    read_schema=BlogResponse,
)


def get_blog_service(db: Session = Depends(get_db)) -> ResourceService:
    """Per-request service bound to the request's database session."""
    return ResourceService(BLOG, SqlAlchemyRepository(Blog, db))


router = build_router(BLOG, get_blog_service)
