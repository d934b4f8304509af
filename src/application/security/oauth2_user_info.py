"""
Informations utilisateur OAuth2.

Responsabilite unique:
----------------------
Normaliser les attributs renvoyes par un fournisseur OAuth2
(chaque fournisseur a son propre format) en un contrat commun.

La fabrique est une table fermee sur AuthProvider: tout
fournisseur sans classe d'info est une erreur explicite.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from src.domain.exceptions import OAuth2AuthenticationProcessingError
from src.domain.value_objects.auth_provider import AuthProvider


class OAuth2UserInfo(ABC):
    """Vue normalisee des attributs d'un fournisseur."""

    def __init__(self, attributes: Dict[str, Any]):
        self.attributes = dict(attributes or {})

    @property
    @abstractmethod
    def id(self) -> Optional[str]:
        ...

    @property
    @abstractmethod
    def name(self) -> Optional[str]:
        ...

    @property
    @abstractmethod
    def email(self) -> Optional[str]:
        ...

    @property
    @abstractmethod
    def image_url(self) -> Optional[str]:
        ...


class GoogleOAuth2UserInfo(OAuth2UserInfo):
    """
    Attributs Google (OpenID Connect userinfo).

    L'identifiant est "sub" (OpenID) ou "id" (API v2).
    """

    @property
    def id(self) -> Optional[str]:
        value = self.attributes.get("sub") or self.attributes.get("id")
        return str(value) if value is not None else None

    @property
    def name(self) -> Optional[str]:
        return self.attributes.get("name")

    @property
    def email(self) -> Optional[str]:
        return self.attributes.get("email")

    @property
    def image_url(self) -> Optional[str]:
        return self.attributes.get("picture")


_USER_INFO_CLASSES = {
    AuthProvider.GOOGLE: GoogleOAuth2UserInfo,
}


class OAuth2UserInfoFactory:
    """
    Fabrique d'OAuth2UserInfo par identifiant de fournisseur.

    Example:
        >>> info = OAuth2UserInfoFactory.get_oauth2_user_info("Google", {"sub": "1"})
        >>> isinstance(info, GoogleOAuth2UserInfo)
        True
    """

    @staticmethod
    def get_oauth2_user_info(registration_id: str, attributes: Dict[str, Any]) -> OAuth2UserInfo:
        """
        Retourne l'info utilisateur pour le fournisseur demande.

        Raises:
            OAuth2AuthenticationProcessingError: Fournisseur non supporte.
        """
        provider = AuthProvider.find(registration_id)
        info_class = _USER_INFO_CLASSES.get(provider)
        if info_class is None:
            raise OAuth2AuthenticationProcessingError(
                f"Sorry! Login with {registration_id} is not supported yet."
            )
        return info_class(attributes)

    @staticmethod
    def supported_providers() -> list[str]:
        return [provider.value for provider in _USER_INFO_CLASSES]
