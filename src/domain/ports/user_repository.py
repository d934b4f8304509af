"""
Port UserRepository - Interface pour la persistance des utilisateurs.

Ce port definit le contrat que doivent implementer les adapters
de persistance pour les utilisateurs. Il suit le pattern Repository
de Domain-Driven Design.

Responsabilite unique:
----------------------
Definir les operations de lecture/ecriture pour l'entite User.

Usage:
------
    class UserLoginService:
        def __init__(self, user_repository: UserRepository):
            self._user_repository = user_repository

        def load_user_by_username(self, email: str) -> UserPrincipal:
            user = self._user_repository.get_by_email(email)
            ...
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities.user import User


class UserRepository(ABC):
    """
    Interface Repository pour les utilisateurs.

    Contrat pour la persistance des entites User.
    Implementee par SqlAlchemyUserRepository.
    """

    @abstractmethod
    def save(self, user: User) -> User:
        """Persiste un utilisateur (create ou update) et retourne l'etat stocke."""
        ...

    @abstractmethod
    def get_by_id(self, user_id: int) -> Optional[User]:
        """Recupere un utilisateur par son ID."""
        ...

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[User]:
        """Recupere un utilisateur par son email (insensible a la casse)."""
        ...

    @abstractmethod
    def exists_by_email(self, email: str) -> bool:
        """Verifie si un email est deja utilise."""
        ...
