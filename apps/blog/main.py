"""
Blog Service API

CRUD endpoints for blog posts.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, APIRouter, Depends, HTTPException, Request, status

from apps.shared.database import Database, DATABASE_URL, get_database
from apps.shared.cors import setup_cors
from apps.shared.errors import setup_error_handlers
from apps.shared.security_headers import setup_security_headers
from apps.blog.schemas import (
    BlogPostCreate,
    BlogPostUpdate,
    BlogPostResponse,
    BlogPostList,
)
from apps.blog.service import (
    BlogPostService,
    PostIdMismatch,
    PostNotFound,
    get_blog_service,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("", response_model=BlogPostList)
def list_posts(service: BlogPostService = Depends(get_blog_service)):
    """List all blog posts, newest first."""
    return {"blogposts": [post.to_dict() for post in service.list_posts()]}


@router.get("/{post_id}", response_model=BlogPostResponse)
def get_post(post_id: str, service: BlogPostService = Depends(get_blog_service)):
    """Get a single blog post by id."""
    try:
        return service.get_post(post_id).to_dict()
    except PostNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("", response_model=BlogPostResponse, status_code=201)
def create_post(
    post_data: BlogPostCreate,
    service: BlogPostService = Depends(get_blog_service),
):
    """Create a new blog post."""
    return service.create_post(post_data).to_dict()


@router.put("/{post_id}", status_code=204)
def update_post(
    post_id: str,
    post_data: BlogPostUpdate,
    service: BlogPostService = Depends(get_blog_service),
):
    """
    Update title and/or content of a blog post.
    Any id in the body must match the path id.
    """
    try:
        service.update_post(post_id, post_data)
    except PostIdMismatch as e:
        raise HTTPException(status_code=400, detail=str(e))
    except PostNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{post_id}", status_code=204)
def delete_post(post_id: str, service: BlogPostService = Depends(get_blog_service)):
    """Delete a blog post. Deleting a missing post is not an error."""
    service.delete_post(post_id)


def health(request: Request):
    """Health check endpoint - returns service status and database connectivity"""
    db_connected = get_database(request).check_connection()
    return {
        "status": "ok" if db_connected else "degraded",
        "service": "blog",
        "database": "connected" if db_connected else "disconnected",
    }


def create_app(database_url: Optional[str] = None) -> FastAPI:
    """Build a Blog Service app bound to its own database."""
    database = Database(database_url or DATABASE_URL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Create tables
        database.create_tables()
        logger.info("Blog service started against %s", database.engine.url)
        yield
        database.dispose()
        logger.info("Blog service stopped")

    app = FastAPI(
        title="Blog Service",
        version="1.0.0",
        description="Blog post CRUD API",
        lifespan=lifespan,
    )
    app.state.database = database

    setup_cors(app)
    setup_security_headers(app)
    setup_error_handlers(app)

    app.add_api_route("/health", health, methods=["GET"], status_code=status.HTTP_200_OK)
    app.include_router(router)
    return app
