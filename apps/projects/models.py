"""
Projects database models.

Stores project information including summary, scope and links.
"""
from sqlalchemy import Column, Boolean, Text

from apps.content.models import ContentMixin
from apps.shared.database import Base


class Project(ContentMixin, Base):
    """
    Project model for portfolio projects.

    Stores all project data including:
    - Basic info (title, excerpt, abstract, scope, content)
    - Media (cover image URL)
    - Links (live project, GitHub, documentation)
    - Lifecycle (status, published_at)
    """
    __tablename__ = "projects"

    abstract = Column(Text)
    project_scope = Column(Text)
    is_group = Column(Boolean, nullable=False, default=False)
    project_link = Column(Text)
    github_link = Column(Text)
    documentation_link = Column(Text)
    content = Column(Text)  # Markdown for detailed description

    def __repr__(self) -> str:
        return f"<Project id={self.id} status={self.status!r}>"
