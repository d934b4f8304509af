"""
OAuth2UserService - Rattachement d'un login OAuth2 a un utilisateur.

Responsabilite unique:
----------------------
Depuis les attributs renvoyes par le fournisseur, retrouver ou
creer l'utilisateur local et produire son UserPrincipal.

Regles:
-------
- Email absent chez le fournisseur: erreur
- Email deja inscrit via un autre fournisseur: erreur (utiliser l'autre)
- Email connu, meme fournisseur: mise a jour nom + avatar
- Email inconnu: creation d'un utilisateur (role user)
"""

from typing import Any, Dict

from src.application.security.oauth2_user_info import OAuth2UserInfoFactory
from src.application.security.principal import UserPrincipal
from src.domain.entities.user import User
from src.domain.exceptions import OAuth2AuthenticationProcessingError
from src.domain.value_objects.auth_provider import AuthProvider
from src.domain.ports.user_repository import UserRepository
from src.infrastructure.logging import get_logger


class OAuth2UserService:
    """
    Service de traitement des utilisateurs OAuth2.

    Example:
        >>> service = OAuth2UserService(user_repo)
        >>> principal = service.process_oauth2_user("google", attributes)
    """

    def __init__(self, user_repository: UserRepository, logger=None):
        self._user_repository = user_repository
        self._logger = logger or get_logger(__name__)

    def process_oauth2_user(
        self, registration_id: str, attributes: Dict[str, Any]
    ) -> UserPrincipal:
        """
        Retrouve ou cree l'utilisateur correspondant.

        Raises:
            OAuth2AuthenticationProcessingError: Fournisseur non supporte,
                email absent ou compte lie a un autre fournisseur.
        """
        info = OAuth2UserInfoFactory.get_oauth2_user_info(registration_id, attributes)
        if not info.email:
            raise OAuth2AuthenticationProcessingError(
                "Email not found from OAuth2 provider"
            )

        provider = AuthProvider.find(registration_id)
        user = self._user_repository.get_by_email(info.email)

        if user is not None:
            if user.provider != provider:
                raise OAuth2AuthenticationProcessingError(
                    f"Looks like you're signed up with {user.provider} account. "
                    f"Please use your {user.provider} account to login."
                )
            user.update_profile(info.name, info.image_url)
            user = self._user_repository.save(user)
            self._logger.info("oauth2_user_updated", user_id=user.id, provider=str(provider))
        else:
            user = self._user_repository.save(
                User.create_from_provider(
                    provider=provider,
                    provider_id=info.id,
                    email=info.email,
                    name=info.name,
                    image_url=info.image_url,
                )
            )
            self._logger.info("oauth2_user_registered", user_id=user.id, provider=str(provider))

        return UserPrincipal.create(user, info.attributes)
