"""
OAuth Providers - Clients HTTP des fournisseurs OAuth2.

Responsabilite unique:
----------------------
Gerer le flux authorization code avec le fournisseur et renvoyer
les attributs bruts de l'utilisateur. La normalisation de ces
attributs est faite par OAuth2UserInfoFactory.

Usage:
------
    provider = GoogleOAuth(settings, callback_path="/v1.0/oauth2/callback/google")
    auth_url = provider.get_authorization_url(state="xxx")
    attributes = await provider.get_user_attributes(code="yyy")
"""

from typing import Any, Dict, Optional
from urllib.parse import urlencode

import httpx

from src.presentation.api.oauth.config import OAuthSettings
from src.infrastructure.logging import get_logger

logger = get_logger(__name__)


class GoogleOAuth:
    """
    Provider OAuth Google.

    Gere le flux authorization code avec Google.
    """

    AUTHORIZE_URL = "https://accounts.google.com/o/oauth2/v2/auth"
    TOKEN_URL = "https://oauth2.googleapis.com/token"
    USERINFO_URL = "https://openidconnect.googleapis.com/v1/userinfo"

    def __init__(self, settings: OAuthSettings, callback_path: str, timeout: float = 10.0):
        """
        Args:
            settings: Configuration OAuth.
            callback_path: Chemin de callback (prefixe API inclus).
            timeout: Timeout HTTP en secondes.
        """
        self._client_id = settings.google_client_id
        self._client_secret = settings.google_client_secret
        self._redirect_uri = f"{settings.oauth_redirect_base.rstrip('/')}{callback_path}"
        self._timeout = timeout

    @property
    def redirect_uri(self) -> str:
        return self._redirect_uri

    def get_authorization_url(self, state: str) -> str:
        """
        Genere l'URL d'autorisation Google.

        Args:
            state: Token anti-CSRF.
        """
        params = {
            "client_id": self._client_id,
            "redirect_uri": self._redirect_uri,
            "response_type": "code",
            "scope": "openid email profile",
            "state": state,
            "access_type": "online",
            "prompt": "select_account",
        }
        return f"{self.AUTHORIZE_URL}?{urlencode(params)}"

    async def get_user_attributes(self, code: str) -> Optional[Dict[str, Any]]:
        """
        Echange le code contre les attributs utilisateur.

        Returns:
            Attributs userinfo (sub, email, name, picture...) ou None si erreur.
        """
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            token_response = await client.post(
                self.TOKEN_URL,
                data={
                    "client_id": self._client_id,
                    "client_secret": self._client_secret,
                    "code": code,
                    "redirect_uri": self._redirect_uri,
                    "grant_type": "authorization_code",
                },
            )

            if token_response.status_code != 200:
                logger.warning(
                    "oauth_token_exchange_failed",
                    provider="google",
                    status_code=token_response.status_code,
                )
                return None

            access_token = token_response.json().get("access_token")
            if not access_token:
                return None

            user_response = await client.get(
                self.USERINFO_URL,
                headers={"Authorization": f"Bearer {access_token}"},
            )

            if user_response.status_code != 200:
                logger.warning(
                    "oauth_userinfo_failed",
                    provider="google",
                    status_code=user_response.status_code,
                )
                return None

            return user_response.json()


# Clients HTTP par identifiant de fournisseur
PROVIDER_CLIENTS = {
    "google": GoogleOAuth,
}
