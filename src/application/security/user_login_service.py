"""
UserLoginService - Resolution des utilisateurs pour l'authentification.

Responsabilite unique:
----------------------
Charger un utilisateur par email (login) ou par id (token) et le
projeter en UserPrincipal. Verifier les identifiants locaux.
"""

from src.application.security.principal import UserPrincipal
from src.domain.exceptions import (
    BadCredentialsError,
    ResourceNotFoundError,
    UsernameNotFoundError,
)
from src.domain.ports.user_repository import UserRepository
from src.infrastructure.logging import get_logger


class UserLoginService:
    """
    Service de chargement des utilisateurs.

    Example:
        >>> service = UserLoginService(user_repo)
        >>> principal = service.load_user_by_username("john@example.com")
    """

    def __init__(self, user_repository: UserRepository, logger=None):
        self._user_repository = user_repository
        self._logger = logger or get_logger(__name__)

    def load_user_by_username(self, email: str) -> UserPrincipal:
        """
        Charge un utilisateur par son email.

        Raises:
            UsernameNotFoundError: Email inconnu.
        """
        user = self._user_repository.get_by_email(email)
        if user is None:
            raise UsernameNotFoundError(email)
        return UserPrincipal.create(user)

    def load_user_by_id(self, user_id: int) -> UserPrincipal:
        """
        Charge un utilisateur par son id.

        Raises:
            ResourceNotFoundError: Id inconnu.
        """
        user = self._user_repository.get_by_id(user_id)
        if user is None:
            raise ResourceNotFoundError("User", "id", user_id)
        return UserPrincipal.create(user)

    def authenticate(self, email: str, password: str) -> UserPrincipal:
        """
        Verifie email + mot de passe.

        Un email inconnu et un mot de passe faux produisent la
        meme erreur, pour ne pas reveler l'existence du compte.

        Raises:
            BadCredentialsError: Identifiants incorrects.
        """
        user = self._user_repository.get_by_email(email)
        if user is None or not user.verify_password(password):
            self._logger.info("login_failed", email=email)
            raise BadCredentialsError()

        self._logger.info("login_success", user_id=user.id)
        return UserPrincipal.create(user)
