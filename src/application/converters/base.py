"""
Contrat commun des convertisseurs DTO <-> entite.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

S = TypeVar("S")
T = TypeVar("T")


class TypeConverter(ABC, Generic[S, T]):
    """Convertit une valeur source en valeur cible."""

    @abstractmethod
    def convert(self, source: S) -> T:
        ...
