"""Optional Sentry error reporting."""
import logging

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import LoggingIntegration

from app.core.config import settings
from app.core.exceptions import InventoryException

logger = logging.getLogger(__name__)

_initialized = False


def _drop_client_errors(event, hint):
    """Domain errors below 500 (not found, validation, conflict) are expected traffic."""
    exc_info = hint.get("exc_info")
    if exc_info:
        exc = exc_info[1]
        if isinstance(exc, InventoryException) and exc.status_code < 500:
            return None
    return event


def init_monitoring() -> bool:
    """Initialize Sentry once when ``SENTRY_DSN`` is configured. Returns whether it is active."""
    global _initialized
    if _initialized:
        return True
    if not settings.SENTRY_DSN:
        return False
    try:
        sentry_sdk.init(
            dsn=settings.SENTRY_DSN,
            integrations=[
                FastApiIntegration(),
                LoggingIntegration(level=logging.INFO, event_level=logging.ERROR),
            ],
            traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
            environment=settings.ENV,
            release=f"store-inventory-api@{settings.ENV}",
            before_send=_drop_client_errors,
            send_default_pii=False,
        )
    except Exception as exc:  # noqa: BLE001
        logger.warning("Failed to init Sentry: %s", exc)
        return False
    logger.info("Sentry initialized (env=%s)", settings.ENV)
    _initialized = True
    return True
