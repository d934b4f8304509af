"""
Value Object Category - Categories d'annonces.

Liste fermee des rubriques dans lesquelles une annonce peut etre
publiee. La recherche par categorie est insensible a la casse.
"""

from enum import Enum

from src.domain.exceptions import InvalidCategoryError


class Category(Enum):
    """Rubriques d'annonces."""

    TOYS = "TOYS"
    ELECTRONICS = "ELECTRONICS"
    CLOTHES = "CLOTHES"
    FURNITURE = "FURNITURE"
    BOOKS = "BOOKS"
    SPORT = "SPORT"
    VEHICLES = "VEHICLES"
    REAL_ESTATE = "REAL_ESTATE"
    ANIMALS = "ANIMALS"
    SERVICES = "SERVICES"
    OTHER = "OTHER"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, value: str) -> "Category":
        """
        Retrouve une categorie depuis son nom, sans tenir compte de la casse.

        Args:
            value: Nom de la categorie (ex: "toys", "TOYS").

        Returns:
            Category correspondante.

        Raises:
            InvalidCategoryError: Si aucune categorie ne correspond.

        Example:
            >>> Category.from_string("toys")
            <Category.TOYS: 'TOYS'>
        """
        if not isinstance(value, str):
            raise InvalidCategoryError(value)

        wanted = value.strip().upper()
        for category in cls:
            if category.name == wanted:
                return category

        raise InvalidCategoryError(value)
