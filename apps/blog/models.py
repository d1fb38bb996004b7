"""
Blog database models.

Stores blog posts with their draft/published lifecycle.
"""
from sqlalchemy import Column, Text

from apps.content.models import ContentMixin
from apps.shared.database import Base


class Blog(ContentMixin, Base):
    """
    Blog post.

    Shares title, excerpt, cover image and lifecycle columns with projects;
    the body (content) is required.
    """
    __tablename__ = "blogs"

    content = Column(Text, nullable=False)  # Markdown body

    def __repr__(self) -> str:
        return f"<Blog id={self.id} status={self.status!r}>"
