"""FastAPI application entry point for the name registry service.

This module builds the application around a single in-memory registry:

- ``GET /list`` returns every registered name.
- ``POST /hello/{name}`` and ``POST /hello`` register a name if absent.

Request bodies larger than the configured cap are rejected before routing.
Configuration comes from environment variables (see ``App.Config.config``)
and logging is initialized at import-time.
"""
from typing import Optional

import uvicorn
from fastapi import FastAPI

from App.Api.routes_names import router as names_router
from App.Config.config import settings
from App.Core.limits import ContentLengthLimitMiddleware
from App.Core.registry import InMemoryNameRegistry, NameRegistry
from App.Services.utility import setup_logging, logging_function
setup_logging(settings.log_level)


def create_app(
    registry: Optional[NameRegistry] = None,
    max_body_bytes: Optional[int] = None,
) -> FastAPI:
    """Build the application and bind it to ``registry``.

    A fresh, empty ``InMemoryNameRegistry`` is created when none is given.
    Raises ValueError when ``max_body_bytes`` is not positive.
    """
    if max_body_bytes is None:
        max_body_bytes = settings.max_body_bytes
    if max_body_bytes <= 0:
        raise ValueError(f"max_body_bytes must be positive, got {max_body_bytes}")
    app = FastAPI(title="Name Registry", version="0.1.0")
    app.state.registry = registry if registry is not None else InMemoryNameRegistry()
    app.add_middleware(ContentLengthLimitMiddleware, max_body_bytes=max_body_bytes)
    app.include_router(names_router, tags=["names"])
    return app


app = create_app()


def main() -> None:
    logging_function(
        f"Let's gooooo! Serving on {settings.api_host}:{settings.api_port} ({settings.app_env})",
        level="info",
    )
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    main()
