"""
Portfolio Content API

Blog posts, projects and image uploads behind one FastAPI app.
"""
import logging
import os
from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, FastAPI
from sqlalchemy.orm import Session

from apps.blog.main import router as blogs_router
from apps.projects.main import router as projects_router
from apps.shared.cors import setup_cors
from apps.shared.database import check_db_connection, get_db, init_db
from apps.shared.errors import register_exception_handlers
from apps.shared.middleware import RequestIDMiddleware
from apps.shared.responses import success_body
from apps.uploads.main import router as uploads_router

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO"),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

API_PREFIX = os.getenv("API_PREFIX", "/api")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Create tables on startup."""
    init_db()
    logger.info("Database tables ready")
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Portfolio Content API",
        version="1.0.0",
        description="REST API for blog posts and projects with image uploads",
        lifespan=lifespan,
    )

    # Request ID + access log
    app.add_middleware(RequestIDMiddleware)
    setup_cors(app)
    register_exception_handlers(app)

    api = APIRouter(prefix=API_PREFIX)

    @api.get("/health", tags=["health"])
    def health(db: Session = Depends(get_db)):
        """Health check endpoint."""
        db_connected = check_db_connection(db)
        return success_body(
            {
                "status": "healthy" if db_connected else "degraded",
                "database": "connected" if db_connected else "disconnected",
                "timestamp": datetime.now(timezone.utc).isoformat(),
            },
            "Service is running",
        )

    api.include_router(blogs_router)
    api.include_router(projects_router)
    api.include_router(uploads_router)
    app.include_router(api)

    @app.get("/", include_in_schema=False)
    def root():
        return success_body(
            {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()},
            "Portfolio Content API is running",
        )

    return app


app = create_app()
