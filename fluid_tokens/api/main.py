import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from fluid_tokens import __version__
from fluid_tokens.api.deps import get_rules, get_settings

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()

    # Load rules on startup (fail-fast)
    try:
        get_rules(settings)
        logger.info("Rules loaded from %s", settings.rules_path)
    except (FileNotFoundError, ValueError) as e:
        logger.critical("Rules load failed: %s", e)
        sys.exit(1)

    yield


app = FastAPI(
    title="Fluid Tokens API",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# --- Routers ---
from fluid_tokens.api.routes import preferences, tokens  # noqa: E402

app.include_router(tokens.router, prefix="/api/tokens", tags=["Tokens"])
app.include_router(preferences.router, prefix="/api", tags=["Preferences"])


@app.get("/health")
def health_check() -> dict[str, Any]:
    return {"status": "ok", "version": __version__}
