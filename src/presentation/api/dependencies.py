"""
Dependencies - Injection de dependances FastAPI.

Responsabilite unique:
----------------------
Fournir les dependances (container, services, appelant) aux endpoints.

Usage:
------
    @router.get("/my")
    def my_adverts(user: AuthenticatedUser = Depends(get_current_user)):
        ...

Les tests remplacent get_container via app.dependency_overrides.
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from src.application.security.principal import AuthenticatedUser
from src.domain.exceptions import ResourceNotFoundError
from src.infrastructure.container import Container
from src.infrastructure.persistence.database import DatabaseManager
from src.presentation.api.config import get_settings, APISettings
from src.presentation.api.auth.jwt_service import JWTService, TokenPayload


# Security scheme
bearer_scheme = HTTPBearer(auto_error=False)


@lru_cache
def get_db() -> DatabaseManager:
    """Retourne le DatabaseManager (un seul moteur par processus)."""
    settings = get_settings()
    db = DatabaseManager(settings.database_url)
    if settings.auto_create_tables:
        db.create_tables()
    return db


@lru_cache
def _build_container() -> Container:
    return Container.create(get_db(), image_max_bytes=get_settings().image_max_bytes)


def get_container() -> Container:
    """Retourne le Container de l'application."""
    return _build_container()


def get_advert_search_service(container: Container = Depends(get_container)):
    return container.advert_search_service


def get_advert_registration_service(container: Container = Depends(get_container)):
    return container.advert_registration_service


def get_advert_view_service(container: Container = Depends(get_container)):
    return container.advert_view_service


def get_image_data_service(container: Container = Depends(get_container)):
    return container.image_data_service


def get_user_login_service(container: Container = Depends(get_container)):
    return container.user_login_service


def get_user_registration_service(container: Container = Depends(get_container)):
    return container.user_registration_service


def get_oauth2_user_service(container: Container = Depends(get_container)):
    return container.oauth2_user_service


def get_user_repository(container: Container = Depends(get_container)):
    return container.user_repository


def get_jwt_service(
    settings: APISettings = Depends(get_settings)
) -> JWTService:
    """Retourne le JWTService."""
    return JWTService(settings)


def get_token_payload(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> Optional[TokenPayload]:
    """
    Extrait le payload du token JWT.

    Returns:
        TokenPayload si token valide, None sinon.
    """
    if not credentials:
        return None

    return jwt_service.verify_access_token(credentials.credentials)


def get_current_user(
    payload: Optional[TokenPayload] = Depends(get_token_payload),
    login_service=Depends(get_user_login_service),
) -> AuthenticatedUser:
    """
    Retourne l'appelant authentifie.

    Raises:
        HTTPException 401 si non authentifie ou utilisateur disparu.
    """
    if not payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token invalide ou expire",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        principal = login_service.load_user_by_id(payload.user_id)
    except ResourceNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Utilisateur inexistant",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return principal.to_authenticated_user()


def require_role(role: str):
    """
    Factory pour exiger un role.

    Usage:
        @router.post("")
        def create(user: AuthenticatedUser = Depends(require_role("USER"))):
            ...
    """
    def dependency(
        user: AuthenticatedUser = Depends(get_current_user),
    ) -> AuthenticatedUser:
        if not user.has_role(role):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Role requis: {role}",
            )
        return user

    return dependency
