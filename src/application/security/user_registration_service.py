"""
UserRegistrationService - Inscription locale (email + mot de passe).
"""

from typing import Optional

from src.application.security.principal import UserPrincipal
from src.domain.entities.user import User
from src.domain.exceptions import EmailAlreadyUsedError, InvalidArgumentError
from src.domain.ports.user_repository import UserRepository
from src.infrastructure.logging import get_logger

MIN_PASSWORD_LENGTH = 8


class UserRegistrationService:
    """Cree des comptes locaux avec mot de passe hashe (bcrypt)."""

    def __init__(self, user_repository: UserRepository, logger=None):
        self._user_repository = user_repository
        self._logger = logger or get_logger(__name__)

    def register_user(
        self,
        email: str,
        password: str,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> UserPrincipal:
        """
        Inscrit un nouvel utilisateur.

        Raises:
            InvalidArgumentError: Email vide ou mot de passe trop court.
            EmailAlreadyUsedError: Email deja associe a un compte.
        """
        if not email or not email.strip():
            raise InvalidArgumentError("Email obligatoire")
        if not password or len(password) < MIN_PASSWORD_LENGTH:
            raise InvalidArgumentError(
                f"Le mot de passe doit contenir au moins {MIN_PASSWORD_LENGTH} caracteres"
            )

        email = email.strip().lower()
        if self._user_repository.exists_by_email(email):
            raise EmailAlreadyUsedError(email)

        user = User.create_local(
            email=email,
            password=password,
            first_name=first_name,
            last_name=last_name,
        )
        saved = self._user_repository.save(user)
        self._logger.info("user_registered", user_id=saved.id, provider="local")
        return UserPrincipal.create(saved)
