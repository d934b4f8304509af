"""
Error handlers - Traduction des exceptions du domaine en reponses HTTP.

Mapping:
--------
- ResourceNotFoundError -> 404
- AuthorizationError -> 403
- InvalidArgumentError (categorie, image, email...) -> 400
- AdvertRegistrationError -> 400
- AuthenticationError (OAuth2, username, credentials) -> 401
- PersistenceError -> 503

Corps de reponse: {"message": ..., "code": ...}
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from src.domain.exceptions import (
    AdvertRegistrationError,
    AuthenticationError,
    AuthorizationError,
    DomainException,
    InvalidArgumentError,
    PersistenceError,
    ResourceNotFoundError,
)
from src.infrastructure.logging import get_logger

logger = get_logger(__name__)

# Ordre significatif: la premiere classe correspondante l'emporte
STATUS_BY_EXCEPTION = (
    (ResourceNotFoundError, status.HTTP_404_NOT_FOUND),
    (AuthorizationError, status.HTTP_403_FORBIDDEN),
    (InvalidArgumentError, status.HTTP_400_BAD_REQUEST),
    (AdvertRegistrationError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (PersistenceError, status.HTTP_503_SERVICE_UNAVAILABLE),
)


def status_for(exc: DomainException) -> int:
    """Code HTTP d'une exception du domaine (500 si non mappee)."""
    for exception_class, status_code in STATUS_BY_EXCEPTION:
        if isinstance(exc, exception_class):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    status_code = status_for(exc)
    log = logger.error if status_code >= 500 else logger.info
    log("domain_error", code=exc.code, status_code=status_code, error=exc.message)

    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}

    return JSONResponse(
        status_code=status_code,
        content={"message": exc.message, "code": exc.code},
        headers=headers,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Installe le handler des exceptions du domaine."""
    app.add_exception_handler(DomainException, domain_exception_handler)
