"""
Logging Infrastructure - Logging structure avec structlog.

Usage:
------
    from src.infrastructure.logging import get_logger

    logger = get_logger(__name__)
    logger.info("advert_registered", advert_id=12, user_id=3)
"""

from src.infrastructure.logging.config import (
    RequestLogger,
    configure_logging,
    get_logger,
    is_production,
)

__all__ = ["configure_logging", "get_logger", "is_production", "RequestLogger"]
