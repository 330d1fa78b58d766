"""Main FastAPI application for the newsindex groups API."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
import logging
from fastapi.responses import RedirectResponse

from newsindex.core.db import init_db
from newsindex.core.logging import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    setup_logging()
    logger = logging.getLogger(__name__)
    init_db()
    logger.info("newsindex API started")

    yield

    logger.info("newsindex API shutdown")


app = FastAPI(
    title="newsindex API",
    description="Usenet group index",
    version="0.1.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)

from newsindex.api import health, groups

# Health endpoints stay unversioned for infra probes (/health, /ready)
app.include_router(health.router)
app.include_router(groups.router, prefix="/api/v1")


@app.get("/")
async def root() -> RedirectResponse:
    """Redirect root to Swagger UI."""
    return RedirectResponse(url="/api/docs")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8080)
