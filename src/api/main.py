import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from src.api.deps import get_ledger_context, get_settings, reset_ledger_context
from src.api.errors import install_error_handlers
from src.app_shell.config import validate_ops_rules
from src.rules.loader import load_rules

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()

    # Load rules and validate on startup (fail-fast)
    try:
        rules = load_rules(settings.rules_path)
        validate_ops_rules(rules, settings.data_dir)
        logger.info(f"Rules loaded from {settings.rules_path}")
    except (FileNotFoundError, ValueError) as e:
        logger.critical(f"Rules load failed: {e}")
        sys.exit(1)

    # Open the store (and apply migrations) before the first request
    try:
        get_ledger_context()
    except RuntimeError as e:
        logger.critical(f"Ledger startup failed: {e}")
        sys.exit(1)

    yield

    reset_ledger_context()


app = FastAPI(
    title="Content Ledger API",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

install_error_handlers(app)

# --- Routers ---
from src.api.routes import admin, content, earnings, purchases  # noqa: E402

app.include_router(content.router, prefix="/api/content", tags=["Content"])
app.include_router(purchases.router, prefix="/api/purchases", tags=["Purchases"])
app.include_router(earnings.router, prefix="/api/earnings", tags=["Earnings"])
app.include_router(admin.router, prefix="/api/admin", tags=["Administration"])


@app.get("/health")
def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "ok", "service": "ledger"}
