"""
OAuth Config - Configuration des providers OAuth.

Responsabilite unique:
----------------------
Configurer les providers OAuth2 (Google).

Variables requises:
-------------------
- GOOGLE_CLIENT_ID: ID client Google
- GOOGLE_CLIENT_SECRET: Secret client Google
- OAUTH_REDIRECT_BASE: URL publique de l'API (callback)
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class OAuthSettings(BaseSettings):
    """
    Configuration OAuth.

    Chargee depuis les variables d'environnement.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Google OAuth
    google_client_id: str = ""
    google_client_secret: str = ""

    # URLs
    oauth_redirect_base: str = "http://localhost:8000"

    @property
    def google_enabled(self) -> bool:
        """Retourne True si Google OAuth est configure."""
        return bool(self.google_client_id and self.google_client_secret)

    def is_enabled(self, provider: str) -> bool:
        """Retourne True si le provider est configure."""
        return bool(getattr(self, f"{provider}_enabled", False))


@lru_cache
def get_oauth_settings() -> OAuthSettings:
    """Retourne la configuration OAuth (cached)."""
    return OAuthSettings()
