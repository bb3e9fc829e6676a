"""Sikkerhetsheaders for API-tjenester."""

from fastapi import FastAPI, Request
from fastapi.responses import Response


# JSON-only API: nothing should be loaded from responses
DEFAULT_CSP = "default-src 'none'; frame-ancestors 'none'"


def setup_security_headers(app: FastAPI) -> None:
    """Legg til Content-Security-Policy og X-Content-Type-Options headers."""

    @app.middleware("http")
    async def add_security_headers(request: Request, call_next) -> Response:
        response = await call_next(request)
        response.headers.setdefault("Content-Security-Policy", DEFAULT_CSP)
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        return response
