"""
Blog database models.

Stores blog posts with the author's name kept as two columns.
"""
from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import Column, String, Text, DateTime

from apps.shared.database import Base


def generate_post_id() -> str:
    return uuid4().hex


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BlogPost(Base):
    """
    A single blog post.

    The id is assigned on insert and never changes. The author is stored as
    first/last name and exposed as one display string.
    """
    __tablename__ = "blog_posts"

    id = Column(String(32), primary_key=True, default=generate_post_id)
    author_first_name = Column(String(100), nullable=False)
    author_last_name = Column(String(100), nullable=False)
    title = Column(String(200), nullable=False)
    content = Column(Text, nullable=False)
    created = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)

    @property
    def author_name(self) -> str:
        return f"{self.author_first_name} {self.author_last_name}"

    def to_dict(self) -> dict:
        """Convert blog post to its API view."""
        return {
            "id": self.id,
            "author": self.author_name,
            "title": self.title,
            "content": self.content,
            "created": self.created.isoformat() if self.created else None,
        }

    def __repr__(self) -> str:
        return f"<BlogPost id={self.id!r} title={self.title!r}>"
