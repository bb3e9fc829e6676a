"""
Blog Service entry point

Starts and stops a uvicorn server for the blog API.
Run with: python -m app.main
"""

import logging
import os
import threading
import time
from typing import Optional

import uvicorn

from apps.shared.database import DATABASE_URL
from apps.blog.main import create_app

logger = logging.getLogger("blog-service")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8080"))


class BlogServer:
    """A uvicorn server running the blog app in a background thread."""

    def __init__(self, database_url: str = DATABASE_URL, host: str = HOST, port: int = PORT):
        self.app = create_app(database_url)
        self.server = uvicorn.Server(
            uvicorn.Config(self.app, host=host, port=port, log_level="info")
        )
        self._thread: Optional[threading.Thread] = None

    def start(self, timeout: float = 10.0) -> "BlogServer":
        self._thread = threading.Thread(target=self.server.run, name="blog-server", daemon=True)
        self._thread.start()

        deadline = time.monotonic() + timeout
        while not self.server.started:
            if not self._thread.is_alive():
                raise RuntimeError("Blog server exited during startup")
            if time.monotonic() > deadline:
                self.stop()
                raise RuntimeError(f"Blog server did not start within {timeout}s")
            time.sleep(0.05)

        logger.info("Your app is listening on port %s", self.server.config.port)
        return self

    def stop(self) -> None:
        if self._thread is None:
            return
        logger.info("Closing server")
        self.server.should_exit = True
        self._thread.join()
        self._thread = None


def run_server(database_url: str = DATABASE_URL, host: str = HOST, port: int = PORT) -> BlogServer:
    """Start a server bound to database_url and return it once it is listening."""
    return BlogServer(database_url, host, port).start()


def close_server(server: BlogServer) -> None:
    server.stop()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    logger.info("Starting Blog Service on port %s", PORT)
    uvicorn.run(create_app(DATABASE_URL), host=HOST, port=PORT)
