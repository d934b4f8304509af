"""
Logging Config - Configuration structlog.

Responsabilite unique:
----------------------
Configurer structlog pour l'API annonces.

Modes:
------
- Development: Pretty print, couleurs
- Production (ENV=production): JSON, timestamp ISO

Usage:
------
    from src.infrastructure.logging import configure_logging, get_logger

    configure_logging(json_logs=True, log_level="DEBUG")
    logger = get_logger(__name__)
    logger.debug("find_by_category", category="TOYS")
"""

import logging
import os
import sys
import time
import uuid
from typing import Optional

import structlog


def is_production() -> bool:
    """True si ENV=production."""
    return os.getenv("ENV", "development") == "production"


def configure_logging(
    json_logs: bool = False,
    log_level: str = "INFO",
) -> None:
    """
    Configure le logging global.

    Args:
        json_logs: True pour JSON (production), False pour pretty.
        log_level: Niveau minimum (DEBUG, INFO, WARNING, ERROR).
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_logs:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )
    logging.getLogger().setLevel(level)
    # SQLAlchemy reste silencieux sauf en DEBUG
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if level == logging.DEBUG else logging.WARNING
    )


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """
    Retourne un logger structure.

    Example:
        logger = get_logger(__name__)
        logger.info("advert_registered", advert_id=12)
    """
    return structlog.get_logger(name)


class RequestLogger:
    """
    Middleware de logging pour FastAPI.

    Log chaque requete avec duree et statut, et renvoie
    l'identifiant de requete dans l'en-tete X-Request-ID.
    """

    header_name = "x-request-id"

    def __init__(self, logger: Optional[structlog.stdlib.BoundLogger] = None):
        self._logger = logger or get_logger("api.requests")

    async def __call__(self, request, call_next):
        start_time = time.perf_counter()
        request_id = request.headers.get(self.header_name) or uuid.uuid4().hex

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
            client_ip=request.client.host if request.client else None,
        )

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = (time.perf_counter() - start_time) * 1000
            self._logger.error(
                "request_failed",
                error=str(e),
                error_type=type(e).__name__,
                duration_ms=round(duration_ms, 2),
            )
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000
        self._logger.info(
            "request_completed",
            status_code=response.status_code,
            duration_ms=round(duration_ms, 2),
        )
        response.headers[self.header_name] = request_id
        return response
