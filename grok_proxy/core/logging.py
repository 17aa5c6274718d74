import sys

from loguru import logger

from grok_proxy.core.config import settings

_configured = False


def setup_logging() -> None:
    """Replace loguru's default sink with one stderr sink at LOG_LEVEL. Idempotent."""
    global _configured
    if _configured:
        return

    logger.remove()
    logger.add(
        sys.stderr,
        level=settings.LOG_LEVEL,
        format="{time:YYYY-MM-DDTHH:mm:ss.SSS} | {level: <8} | {name} | {message}",
    )
    _configured = True
