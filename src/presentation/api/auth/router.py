"""
Auth Router - Endpoints d'authentification locale.

Responsabilite unique:
----------------------
Exposer les endpoints signup, login, refresh et me.

Endpoints:
----------
- POST /auth/signup: Inscription email + mot de passe
- POST /auth/login: Authentification
- POST /auth/refresh: Rafraichir le token
- GET /auth/me: Profil utilisateur
"""

from fastapi import APIRouter, Depends, HTTPException, status

from src.application.security.principal import AuthenticatedUser
from src.application.security.user_login_service import UserLoginService
from src.application.security.user_registration_service import UserRegistrationService
from src.domain.exceptions import ResourceNotFoundError
from src.presentation.api.auth.schemas import (
    ErrorResponse,
    LoginRequest,
    RefreshRequest,
    SignUpRequest,
    TokenResponse,
    UserResponse,
)
from src.presentation.api.auth.jwt_service import JWTService
from src.presentation.api.dependencies import (
    get_current_user,
    get_jwt_service,
    get_user_login_service,
    get_user_registration_service,
    get_user_repository,
)
from src.infrastructure.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post(
    "/signup",
    response_model=TokenResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
    summary="Inscription",
    description="Cree un compte local et retourne les tokens.",
)
def signup(
    data: SignUpRequest,
    registration_service: UserRegistrationService = Depends(get_user_registration_service),
    jwt_service: JWTService = Depends(get_jwt_service),
):
    """
    Inscrit un utilisateur.

    EmailAlreadyUsedError est traduit en 400 par le handler global.
    """
    principal = registration_service.register_user(
        email=data.email,
        password=data.password,
        first_name=data.first_name,
        last_name=data.last_name,
    )
    logger.info("signup_success", user_id=principal.id)
    return jwt_service.create_tokens(principal.id, principal.email, principal.role.name)


@router.post(
    "/login",
    response_model=TokenResponse,
    responses={401: {"model": ErrorResponse}},
    summary="Authentification",
    description="Retourne un access token et refresh token.",
)
def login(
    data: LoginRequest,
    login_service: UserLoginService = Depends(get_user_login_service),
    jwt_service: JWTService = Depends(get_jwt_service),
):
    """
    Authentifie un utilisateur.

    BadCredentialsError est traduit en 401 par le handler global.
    """
    principal = login_service.authenticate(data.email, data.password)
    return jwt_service.create_tokens(principal.id, principal.email, principal.role.name)


@router.post(
    "/refresh",
    response_model=TokenResponse,
    responses={401: {"model": ErrorResponse}},
    summary="Rafraichir le token",
    description="Genere un nouveau access token depuis le refresh token.",
)
def refresh(
    data: RefreshRequest,
    login_service: UserLoginService = Depends(get_user_login_service),
    jwt_service: JWTService = Depends(get_jwt_service),
):
    """
    Rafraichit l'access token.

    Raises:
        HTTPException 401 si refresh token invalide ou utilisateur disparu.
    """
    payload = jwt_service.verify_refresh_token(data.refresh_token)
    if not payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Refresh token invalide ou expire",
        )

    try:
        principal = login_service.load_user_by_id(payload.user_id)
    except ResourceNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Utilisateur inexistant",
        )

    return jwt_service.create_tokens(principal.id, principal.email, principal.role.name)


@router.get(
    "/me",
    response_model=UserResponse,
    summary="Profil utilisateur",
    description="Retourne le profil de l'utilisateur authentifie.",
)
def get_me(
    current_user: AuthenticatedUser = Depends(get_current_user),
    user_repo=Depends(get_user_repository),
):
    """Retourne le profil de l'utilisateur courant."""
    user = user_repo.get_by_id(current_user.id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Utilisateur inexistant",
        )

    return UserResponse(
        id=user.id,
        email=user.email,
        first_name=user.first_name,
        last_name=user.last_name,
        image_url=user.image_url,
        provider=user.provider.value,
        role=user.role.name,
        created_date=user.created_date,
    )
