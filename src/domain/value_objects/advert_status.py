"""
Value Object AdvertStatus - Etat de publication d'une annonce.
"""

from enum import Enum


class AdvertStatus(Enum):
    """Etats de publication."""

    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"
    ARCHIVED = "ARCHIVED"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, value: str) -> "AdvertStatus":
        """
        Cree un AdvertStatus depuis une chaine.

        Raises:
            ValueError: Si l'etat est inconnu.
        """
        try:
            return cls(value.strip().upper())
        except (ValueError, AttributeError):
            raise ValueError(f"Etat d'annonce inconnu: {value}")
