"""
Blog post service layer

Wraps a SQLAlchemy session with the five blog post operations. Each
operation is a single transaction: committed on success, rolled back on
any error so no partially written post is left behind.
"""

import logging
from datetime import timezone
from typing import Optional

from fastapi import Depends
from sqlalchemy.orm import Session

from apps.shared.database import get_db
from apps.blog.models import BlogPost
from apps.blog.schemas import BlogPostCreate, BlogPostUpdate

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "content")


class PostNotFound(Exception):
    """No blog post exists with the given id."""

    def __init__(self, post_id: str):
        super().__init__(f"Blog post {post_id} not found")
        self.post_id = post_id


class PostIdMismatch(ValueError):
    """Path id and body id disagree on an update."""

    def __init__(self, path_id: str, body_id: str):
        super().__init__(
            f"Request path id ({path_id}) and request body id ({body_id}) must match"
        )
        self.path_id = path_id
        self.body_id = body_id


class BlogPostService:
    """CRUD operations on blog posts for one database session."""

    def __init__(self, db: Session):
        self.db = db

    def list_posts(self) -> list[BlogPost]:
        return self.db.query(BlogPost).order_by(BlogPost.created.desc()).all()

    def count(self) -> int:
        return self.db.query(BlogPost).count()

    def find(self, post_id: str) -> Optional[BlogPost]:
        return self.db.get(BlogPost, post_id)

    def get_post(self, post_id: str) -> BlogPost:
        post = self.find(post_id)
        if post is None:
            raise PostNotFound(post_id)
        return post

    def create_post(self, data: BlogPostCreate) -> BlogPost:
        post = BlogPost(
            author_first_name=data.author.firstName,
            author_last_name=data.author.lastName,
            title=data.title,
            content=data.content,
        )
        if data.created is not None:
            created = data.created
            if created.tzinfo is not None:
                # SQLite drops offsets; store aware values as UTC
                created = created.astimezone(timezone.utc)
            post.created = created

        try:
            self.db.add(post)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        self.db.refresh(post)
        logger.info("Created blog post %s", post.id)
        return post

    def update_post(self, post_id: str, data: BlogPostUpdate) -> BlogPost:
        if data.id is not None and data.id != post_id:
            raise PostIdMismatch(post_id, data.id)

        post = self.get_post(post_id)
        changes = {
            key: value for key, value in data.changes().items()
            if key in UPDATABLE_FIELDS
        }

        try:
            for key, value in changes.items():
                setattr(post, key, value)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.info("Updated blog post %s (%s)", post_id, ", ".join(sorted(changes)) or "no changes")
        return post

    def delete_post(self, post_id: str) -> bool:
        """Delete a post. Returns False when there was nothing to delete."""
        try:
            deleted = (
                self.db.query(BlogPost)
                .filter(BlogPost.id == post_id)
                .delete(synchronize_session=False)
            )
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        if deleted:
            logger.info("Deleted blog post %s", post_id)
        else:
            logger.info("Delete requested for missing blog post %s", post_id)
        return bool(deleted)


def get_blog_service(db: Session = Depends(get_db)) -> BlogPostService:
    """FastAPI dependency returning a service bound to the request's session."""
    return BlogPostService(db)
