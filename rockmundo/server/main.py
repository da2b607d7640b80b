"""
Main Application Entry Point.

Initializes the FastAPI application, configures middleware (CORS, request
logging) and exception handlers, and mounts the edge functions and the JSON
API routers.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rockmundo import __version__
from rockmundo.core.database import check_connection
from rockmundo.core.logging_config import get_logger, setup_logging
from rockmundo.core.monitoring import initialize_logfire

from .api.functions import festivals, jam_sessions, major_events, progression, responses
from .api.v1 import bands, health, merch, rehearsals, skills
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import LogfireMiddleware

setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Verifies the database is reachable and turns on Logfire instrumentation
    when it is configured.
    """
    logger.info("Starting up Rockmundo Functions server...")
    initialize_logfire(app)
    try:
        await check_connection()
    except Exception as e:
        logger.error(f"Database connection check failed: {e}", exc_info=True)

    yield

    logger.info("Shutting down Rockmundo Functions server...")


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    Rockmundo Functions API

    Serverless functions that settle multi-table game events (major events,
    festival sets, jam sessions, progression) and a small JSON API around the
    game calculators (skills, rehearsals, merch designer, band overview).
    """,
    version=__version__,
    openapi_url=f"{constant.API_V1_STR}/openapi.json",
    docs_url=f"{constant.API_V1_STR}/docs",
    redoc_url=f"{constant.API_V1_STR}/redoc",
    lifespan=lifespan,
)

app.add_middleware(LogfireMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors.origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=settings.cors.allow_headers,
)

setup_exception_handlers(app)

app.include_router(health.router, tags=["health"])

app.include_router(responses.router, prefix=constant.FUNCTIONS_V1_STR)
app.include_router(major_events.router, prefix=constant.FUNCTIONS_V1_STR)
app.include_router(festivals.router, prefix=constant.FUNCTIONS_V1_STR)
app.include_router(jam_sessions.router, prefix=constant.FUNCTIONS_V1_STR)
app.include_router(progression.router, prefix=constant.FUNCTIONS_V1_STR)

app.include_router(skills.router, prefix=f"{constant.API_V1_STR}/skills")
app.include_router(rehearsals.router, prefix=f"{constant.API_V1_STR}/rehearsals")
app.include_router(merch.router, prefix=f"{constant.API_V1_STR}/merch")
app.include_router(bands.router, prefix=f"{constant.API_V1_STR}/bands")
