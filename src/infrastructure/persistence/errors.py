"""
Traduction des erreurs SQLAlchemy en PersistenceError.
"""

from functools import wraps

from sqlalchemy.exc import SQLAlchemyError

from src.domain.exceptions import PersistenceError
from src.infrastructure.logging import get_logger

logger = get_logger(__name__)


def translate_errors(operation: str):
    """
    Decorateur: toute SQLAlchemyError devient PersistenceError.

    Usage:
        @translate_errors("save_and_flush")
        def save_and_flush(self, advert): ...
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except SQLAlchemyError as e:
                logger.error("persistence_failed", operation=operation, error=str(e))
                raise PersistenceError(str(e), operation=operation) from e
        return wrapper
    return decorator
