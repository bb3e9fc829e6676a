"""Shared fixtures: a fresh SQLite database per test, seeded with fake posts."""

import logging

import pytest
from faker import Faker
from fastapi.testclient import TestClient

from apps.blog.main import create_app
from apps.blog.models import BlogPost

logger = logging.getLogger(__name__)

fake = Faker()

TITLES = ["Test1", "Test2", "Test3", "Test4", "Test5", "Test6"]


def generate_blog_post_data() -> dict:
    return {
        "author": {
            "firstName": fake.first_name(),
            "lastName": fake.last_name(),
        },
        "title": fake.random_element(TITLES),
        "content": fake.text(),
        "created": fake.date_time_this_month(),
    }


def seed_blog_post_data(database, count: int = 10) -> None:
    logger.info("seeding blog post data")
    db = database.session()
    try:
        for _ in range(count):
            data = generate_blog_post_data()
            db.add(BlogPost(
                author_first_name=data["author"]["firstName"],
                author_last_name=data["author"]["lastName"],
                title=data["title"],
                content=data["content"],
                created=data["created"],
            ))
        db.commit()
    finally:
        db.close()


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'test-blog.db'}"


@pytest.fixture
def app(database_url):
    return create_app(database_url)


@pytest.fixture
def database(app):
    return app.state.database


@pytest.fixture
def client(app, database):
    # Entering the client runs the lifespan, which creates the tables
    with TestClient(app) as test_client:
        seed_blog_post_data(database)
        yield test_client
    logger.warning("Deleting database")
    database.drop_tables()
    database.dispose()


@pytest.fixture
def db_session(client, database):
    session = database.session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def existing_post(db_session):
    return db_session.query(BlogPost).first()
