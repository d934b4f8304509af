"""
Value Object Role - Roles utilisateur.

Roles disponibles:
------------------
- user: Publier des annonces, gerer ses images
- admin: Role utilisateur + administration

Un role "admin" satisfait aussi toute exigence "user".
"""

from dataclasses import dataclass
from enum import Enum


class RoleLevel(Enum):
    """Niveaux de role utilisateur."""

    USER = "user"
    ADMIN = "admin"

    def __str__(self) -> str:
        return self.value


# Roles implicitement accordes par chaque niveau
ROLE_HIERARCHY: dict[RoleLevel, set[RoleLevel]] = {
    RoleLevel.ADMIN: {RoleLevel.ADMIN, RoleLevel.USER},
    RoleLevel.USER: {RoleLevel.USER},
}


@dataclass(frozen=True)
class Role:
    """
    Role utilisateur.

    Value Object immutable representant le niveau d'acces
    d'un utilisateur.

    Example:
        >>> Role.admin().has_role("USER")
        True
        >>> Role.user().has_role("admin")
        False
    """

    level: RoleLevel

    @classmethod
    def user(cls) -> "Role":
        """Cree un role utilisateur."""
        return cls(level=RoleLevel.USER)

    @classmethod
    def admin(cls) -> "Role":
        """Cree un role administrateur."""
        return cls(level=RoleLevel.ADMIN)

    @classmethod
    def from_string(cls, role_str: str) -> "Role":
        """
        Cree un Role depuis une chaine.

        Accepte aussi la forme prefixee "ROLE_USER".

        Raises:
            ValueError: Si le role est inconnu.
        """
        normalized = role_str.lower().strip()
        if normalized.startswith("role_"):
            normalized = normalized[len("role_"):]
        try:
            return cls(level=RoleLevel(normalized))
        except ValueError:
            raise ValueError(f"Role inconnu: {role_str}")

    def has_role(self, role_name: str) -> bool:
        """
        Verifie si ce role couvre le role demande.

        Args:
            role_name: Nom du role requis (user, ADMIN, ROLE_USER...).
        """
        try:
            required = Role.from_string(role_name).level
        except ValueError:
            return False
        return required in ROLE_HIERARCHY[self.level]

    @property
    def name(self) -> str:
        """Nom du role."""
        return self.level.value

    @property
    def is_admin(self) -> bool:
        """True si role administrateur."""
        return self.level == RoleLevel.ADMIN

    def __str__(self) -> str:
        return str(self.level)

    def __repr__(self) -> str:
        return f"Role({self.level.value})"
