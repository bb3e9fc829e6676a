"""
Pydantic schemas for the Blog API.

Defines request/response models with validation.
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class AuthorName(BaseModel):
    """Author name as submitted by clients."""
    firstName: str = Field(..., min_length=1, max_length=100)
    lastName: str = Field(..., min_length=1, max_length=100)


class BlogPostCreate(BaseModel):
    """Schema for creating a new blog post."""
    author: AuthorName
    title: str = Field(..., min_length=1, max_length=200)
    content: str = Field(..., min_length=1)
    created: Optional[datetime] = None


class BlogPostUpdate(BaseModel):
    """
    Schema for updating a blog post.

    Only title and content are applied. Unknown fields such as author or
    created are accepted and ignored.
    """
    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    content: Optional[str] = Field(None, min_length=1)

    def changes(self) -> dict:
        """Fields the client actually sent, minus the id."""
        data = self.model_dump(exclude_unset=True, exclude={"id"})
        return {key: value for key, value in data.items() if value is not None}


class BlogPostResponse(BaseModel):
    """Schema for blog post responses."""
    id: str
    author: str
    title: str
    content: str
    created: Optional[datetime] = None


class BlogPostList(BaseModel):
    blogposts: list[BlogPostResponse]
