import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from importlib.metadata import version as pkg_version

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cardslug.api import health_router, slugs_router
from cardslug.config import settings
from cardslug.services.dictionaries import get_default_dictionaries, load_dictionaries

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler: load classification tables once."""
    logging.basicConfig(level=settings.log_level)

    if settings.dictionaries_path is not None:
        app.state.dictionaries = load_dictionaries(settings.dictionaries_path)
    else:
        app.state.dictionaries = get_default_dictionaries()

    logger.info("DICTIONARIES_READY: sizes=%s", app.state.dictionaries.sizes())
    yield


app = FastAPI(
    title=settings.app_name,
    version=pkg_version("cardslug"),
    debug=settings.debug,
    lifespan=lifespan,
)

app.include_router(health_router)
app.include_router(slugs_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Tighten in production
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)
