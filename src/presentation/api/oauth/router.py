"""
OAuth Router - Endpoints OAuth2.

Responsabilite unique:
----------------------
Exposer le flux OAuth2 generique par fournisseur.

Endpoints:
----------
- GET /oauth2/authorize/{provider}: Redirige vers le fournisseur
- GET /oauth2/callback/{provider}: Callback, retourne les tokens JWT

Un fournisseur inconnu est refuse par OAuth2UserInfoFactory
(401 via le handler global). Un fournisseur connu mais non
configure repond 503.
"""

import secrets
import time
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import RedirectResponse

from src.application.security.oauth2_user_info import OAuth2UserInfoFactory
from src.application.security.oauth2_user_service import OAuth2UserService
from src.domain.exceptions import OAuth2AuthenticationProcessingError
from src.presentation.api.auth.jwt_service import JWTService
from src.presentation.api.config import APISettings, get_settings
from src.presentation.api.dependencies import get_jwt_service, get_oauth2_user_service
from src.presentation.api.oauth.config import OAuthSettings, get_oauth_settings
from src.presentation.api.oauth.providers import PROVIDER_CLIENTS
from src.infrastructure.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/oauth2", tags=["OAuth"])

# State storage (en production, utiliser Redis)
# state -> (provider, instant d'emission)
_oauth_states: dict[str, tuple[str, float]] = {}

# Duree de validite d'un state non consomme
STATE_TTL_SECONDS = 600


def _store_state(state: str, provider: str) -> None:
    """Enregistre un state et purge ceux qui ont expire."""
    now = time.monotonic()
    expired = [
        key for key, (_, issued_at) in _oauth_states.items()
        if now - issued_at > STATE_TTL_SECONDS
    ]
    for key in expired:
        del _oauth_states[key]
    _oauth_states[state] = (provider, now)


def _consume_state(state: str) -> Optional[str]:
    """Retire un state et retourne son fournisseur, None si inconnu ou expire."""
    entry = _oauth_states.pop(state, None)
    if entry is None:
        return None
    provider, issued_at = entry
    if time.monotonic() - issued_at > STATE_TTL_SECONDS:
        return None
    return provider


def _get_provider_client(
    provider: str,
    oauth_settings: OAuthSettings,
    settings: APISettings,
):
    """Retourne le client HTTP du fournisseur, ou leve l'erreur adaptee."""
    registration_id = provider.lower()
    if registration_id not in OAuth2UserInfoFactory.supported_providers() \
            or registration_id not in PROVIDER_CLIENTS:
        raise OAuth2AuthenticationProcessingError(
            f"Sorry! Login with {provider} is not supported yet."
        )

    if not oauth_settings.is_enabled(registration_id):
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"OAuth {registration_id} non configure",
        )

    callback_path = f"{settings.api_prefix}/oauth2/callback/{registration_id}"
    return PROVIDER_CLIENTS[registration_id](oauth_settings, callback_path)


@router.get(
    "/authorize/{provider}",
    summary="Login OAuth2",
    description="Redirige vers la page de login du fournisseur.",
)
def authorize(
    provider: str,
    oauth_settings: OAuthSettings = Depends(get_oauth_settings),
    settings: APISettings = Depends(get_settings),
):
    """Initie le flux OAuth2."""
    client = _get_provider_client(provider, oauth_settings, settings)

    # Generer state anti-CSRF
    state = secrets.token_urlsafe(32)
    _store_state(state, provider.lower())

    return RedirectResponse(url=client.get_authorization_url(state))


@router.get(
    "/callback/{provider}",
    summary="Callback OAuth2",
    description="Callback apres authentification aupres du fournisseur.",
)
async def callback(
    provider: str,
    code: str = Query(...),
    state: str = Query(...),
    oauth_settings: OAuthSettings = Depends(get_oauth_settings),
    settings: APISettings = Depends(get_settings),
    oauth2_user_service: OAuth2UserService = Depends(get_oauth2_user_service),
    jwt_service: JWTService = Depends(get_jwt_service),
):
    """Traite le callback du fournisseur."""
    registration_id = provider.lower()
    client = _get_provider_client(provider, oauth_settings, settings)

    # Verifier state (usage unique)
    if _consume_state(state) != registration_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="State invalide",
        )

    attributes = await client.get_user_attributes(code)
    if not attributes:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Impossible de recuperer les informations {registration_id}",
        )

    principal = oauth2_user_service.process_oauth2_user(registration_id, attributes)
    tokens = jwt_service.create_tokens(principal.id, principal.email, principal.role.name)

    logger.info(
        "oauth_login_success",
        provider=registration_id,
        user_id=principal.id,
    )

    return {
        "message": "Authentification reussie",
        "provider": registration_id,
        "email": principal.email,
        **tokens,
    }
