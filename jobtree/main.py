"""
JobTree API - Main Application

FastAPI backend with:
- MongoDB for users, postings and contacts
- Opaque bearer tokens issued at signup
- Owner-scoped CRUD for postings and contacts

Run: uvicorn jobtree.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from pymongo import MongoClient
from pymongo.errors import PyMongoError
from starlette.concurrency import run_in_threadpool

from jobtree import __version__
from jobtree.api.routes import api_router
from jobtree.core.config import Settings, get_settings
from jobtree.core.errors import register_exception_handlers
from jobtree.core.logging_config import setup_logging
from jobtree.db.context import build_context
from jobtree.db.mongodb import init_mongo_indexes, test_mongo_connection
from jobtree.schemas import HealthResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create MongoDB indexes on startup, close the client on shutdown."""
    context = app.state.context
    try:
        await run_in_threadpool(init_mongo_indexes, context.db)
    except PyMongoError as e:
        # Without the unique indexes duplicate names/emails are not rejected
        logger.error("MongoDB index initialization failed: %s", e)
    logger.info("JobTree API started (database %s)", context.settings.database_name)
    yield
    context.client.close()
    logger.info("JobTree API stopped")


def create_app(settings: Optional[Settings] = None, mongo_client: Optional[MongoClient] = None) -> FastAPI:
    """
    Build the FastAPI app.

    Args:
        settings: defaults to the environment-derived settings
        mongo_client: client to use instead of connecting to MONGO_URL (tests pass mongomock)
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.json_logs)

    app = FastAPI(
        title="JobTree API",
        description="""
        Track job applications and networking contacts.

        ## Features
        - **Users**: signup and login; the access token is issued once at signup
        - **Postings**: job applications with a stage (applied, interview, offer, rejected)
        - **Contacts**: people you met, with notes

        Send the access token in the `Authorization` header on every postings/contacts call.
        """,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.context = build_context(settings, mongo_client)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(api_router)

    @app.get("/", response_class=PlainTextResponse, tags=["Health"])
    def root():
        return "Hello from JobTree!"

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    def health_check(request: Request):
        connected = test_mongo_connection(request.app.state.context.client)
        return HealthResponse(
            status="healthy" if connected else "degraded",
            mongodb="connected" if connected else "disconnected",
        )

    return app


app = create_app()
