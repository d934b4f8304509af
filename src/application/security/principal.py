"""
Principaux d'authentification.

- UserPrincipal: projection lecture seule d'un User, produite par le
  login (local ou OAuth2). Porte le hash du mot de passe et les
  attributs OAuth2 eventuels.
- AuthenticatedUser: identite minimale (id, email, role) utilisee
  pour les controles d'autorisation. Jamais persistee.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from src.domain.entities.user import User
from src.domain.value_objects.role import Role


@dataclass(frozen=True)
class UserPrincipal:
    """
    Principal issu d'une authentification.

    Example:
        >>> principal = UserPrincipal.create(user)
        >>> principal.id == user.id
        True
    """

    id: int
    email: str
    password_hash: str
    role: Role
    attributes: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def create(cls, user: User, attributes: Optional[Dict[str, Any]] = None) -> "UserPrincipal":
        """Construit un principal depuis un utilisateur (et ses attributs OAuth2)."""
        return cls(
            id=user.id,
            email=user.email,
            password_hash=user.password_hash,
            role=user.role,
            attributes=dict(attributes or {}),
        )

    @property
    def authorities(self) -> list[str]:
        """Roles au format ROLE_XXX."""
        return [f"ROLE_{self.role.name.upper()}"]

    def to_authenticated_user(self) -> "AuthenticatedUser":
        return AuthenticatedUser(id=self.id, email=self.email, role=self.role)


@dataclass(frozen=True)
class AuthenticatedUser:
    """Identite de l'appelant pour une requete."""

    id: int
    email: str
    role: Role = field(default_factory=Role.user)

    def has_role(self, role_name: str) -> bool:
        return self.role.has_role(role_name)
