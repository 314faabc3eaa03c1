"""FastAPI application entrypoint."""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text

from fieldmeta.config import get_settings
from fieldmeta.db.session import SessionLocal
from fieldmeta.routers import fields
from fieldmeta.schema.semantic_types import get_type_hierarchy

logger = logging.getLogger(__name__)


def _warm_backend_state() -> None:
    """Resolve the semantic type hierarchy and prime the DB connection at process start."""

    hierarchy = get_type_hierarchy()
    logger.info("fieldmeta.semantic_types_loaded count=%d", len(hierarchy.tags))
    try:
        with SessionLocal() as db:
            db.execute(text("SELECT 1"))
    except Exception:
        logger.exception("Backend warm-up failed; continuing without startup pre-warm.")


@asynccontextmanager
async def lifespan(_: FastAPI):
    _warm_backend_state()
    yield


settings = get_settings()
app = FastAPI(title=settings.app_name, version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(fields.router, tags=["fields"])


@app.get("/health")
def health() -> dict[str, str]:
    """Simple health check endpoint."""

    return {"status": "ok"}
