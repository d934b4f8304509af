"""
Entite User - Utilisateur de la place de marche.

Un utilisateur publie des annonces et consulte celles des autres.
Il peut s'inscrire localement (email + mot de passe) ou via un
fournisseur OAuth2 (Google).

Attributes:
-----------
- id: Identifiant (attribue par la base)
- email: Adresse email unique, cle de connexion (stockee en minuscules)
- password_hash: Hash bcrypt (vide pour les comptes OAuth2)
- provider / provider_id: Origine du compte
- role: Role (user, admin)

Les annonces publiees et consultees sont lues via AdvertRepository.

Securite:
---------
- Mots de passe hashes avec bcrypt (work factor 12)
- Aucun mot de passe pour les comptes OAuth2
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

import bcrypt

from src.domain.value_objects.auth_provider import AuthProvider
from src.domain.value_objects.role import Role


@dataclass
class User:
    """
    Utilisateur de l'application.

    Example:
        >>> user = User.create_local(
        ...     email="John@Example.com",
        ...     password="secret123",
        ...     first_name="John",
        ... )
        >>> user.email
        'john@example.com'
        >>> user.verify_password("secret123")
        True
    """

    email: str
    id: Optional[int] = None
    password_hash: str = ""
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    image_url: Optional[str] = None
    email_verified: bool = False
    provider: AuthProvider = AuthProvider.LOCAL
    provider_id: Optional[str] = None
    role: Role = field(default_factory=Role.user)
    created_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create_local(
        cls,
        email: str,
        password: str,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> "User":
        """
        Factory pour un compte local (email + mot de passe).

        Args:
            email: Adresse email.
            password: Mot de passe en clair (sera hashe).
            first_name: Prenom.
            last_name: Nom.

        Returns:
            Nouvelle instance User avec mot de passe hashe.
        """
        return cls(
            email=email.strip().lower(),
            password_hash=cls._hash_password(password),
            first_name=first_name,
            last_name=last_name,
            provider=AuthProvider.LOCAL,
        )

    @classmethod
    def create_from_provider(
        cls,
        provider: AuthProvider,
        provider_id: str,
        email: str,
        name: Optional[str] = None,
        image_url: Optional[str] = None,
    ) -> "User":
        """
        Factory pour un compte cree via OAuth2.

        Le nom complet est decoupe en prenom / nom sur le premier espace.
        """
        first_name, last_name = cls._split_name(name)
        return cls(
            email=email.strip().lower(),
            first_name=first_name,
            last_name=last_name,
            image_url=image_url,
            email_verified=True,
            provider=provider,
            provider_id=provider_id,
        )

    @staticmethod
    def _hash_password(password: str) -> str:
        """Hash un mot de passe avec bcrypt."""
        salt = bcrypt.gensalt(rounds=12)
        return bcrypt.hashpw(password.encode('utf-8'), salt).decode('utf-8')

    @staticmethod
    def _split_name(name: Optional[str]) -> tuple:
        if not name:
            return None, None
        parts = name.strip().split(" ", 1)
        return parts[0], (parts[1] if len(parts) > 1 else None)

    def verify_password(self, password: str) -> bool:
        """
        Verifie un mot de passe contre le hash stocke.

        Returns:
            False pour les comptes sans mot de passe (OAuth2).
        """
        if not self.password_hash:
            return False
        return bcrypt.checkpw(
            password.encode('utf-8'),
            self.password_hash.encode('utf-8')
        )

    def update_profile(self, name: Optional[str], image_url: Optional[str]) -> None:
        """Met a jour le nom et l'avatar depuis le fournisseur OAuth2."""
        first_name, last_name = self._split_name(name)
        if first_name:
            self.first_name = first_name
            self.last_name = last_name
        if image_url:
            self.image_url = image_url

    @property
    def display_name(self) -> str:
        """Nom affichable (prenom + nom, sinon email)."""
        parts = [p for p in (self.first_name, self.last_name) if p]
        return " ".join(parts) if parts else self.email

    def __eq__(self, other: object) -> bool:
        """Compare par ID."""
        if isinstance(other, User):
            return self.id == other.id
        return False

    def __hash__(self) -> int:
        """Hash base sur l'ID."""
        return hash(self.id)

    def __str__(self) -> str:
        return f"{self.email} ({self.role})"

    def __repr__(self) -> str:
        return f"User(id={self.id}, email='{self.email}', role={self.role})"
