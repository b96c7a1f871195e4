# storefront/main.py

import logging
import subprocess
from contextlib import asynccontextmanager

from fastapi import FastAPI

from storefront.core.config import get_settings
from storefront.core.logging_config import configure_logging
from storefront.integrations.hooks import HookRegistry
from storefront.services.notification_rules import register_notification_hooks

from storefront import models  # noqa: F401  registers every table on Base.metadata

from storefront.routes import health, notifications, orders, products

logger = logging.getLogger(__name__)


def run_migrations():
    """Run `alembic upgrade head`; failures are logged, startup continues."""
    logger.info("Running database migrations...")
    try:
        result = subprocess.run(['alembic', 'upgrade', 'head'], capture_output=True, text=True)
    except OSError as e:
        logger.error(f"Migration error: {e}")
        return
    if result.returncode == 0:
        logger.info("Migrations completed successfully")
    else:
        logger.error(f"Migration failed: {result.stderr}")


def build_hooks(settings=None) -> HookRegistry:
    """Hook registry with the notification rules bound."""
    hooks = HookRegistry()
    register_notification_hooks(hooks, settings)
    return hooks


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)

    if settings.RUN_MIGRATIONS:
        run_migrations()

    if not hasattr(app.state, "hooks"):
        app.state.hooks = build_hooks(settings)

    yield


app = FastAPI(
    title="Storefront Backend",
    description="Store collections and notification hooks",
    version="1.0.0",
    lifespan=lifespan
)

app.include_router(health.router)
app.include_router(orders.router)
app.include_router(products.router)
app.include_router(notifications.router)
