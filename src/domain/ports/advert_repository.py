"""
Port AdvertRepository - Interface pour la persistance des annonces.

Responsabilite unique:
----------------------
Definir les lectures (par id, par proprietaire, par categorie,
mises en avant) et l'ecriture immediate (save_and_flush) des annonces.

Les listes triees le sont par la base; aucun tri en memoire
n'est attendu des appelants.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities.advert import Advert
from src.domain.value_objects.category import Category


class AdvertRepository(ABC):
    """
    Interface Repository pour les annonces.

    Implementee par SqlAlchemyAdvertRepository.
    """

    @abstractmethod
    def find_by_id(self, advert_id: int) -> Optional[Advert]:
        """Recupere une annonce par son ID."""
        ...

    @abstractmethod
    def find_all(self) -> List[Advert]:
        """Liste toutes les annonces."""
        ...

    @abstractmethod
    def save_and_flush(self, advert: Advert) -> Advert:
        """
        Persiste une annonce et force l'ecriture.

        Returns:
            Annonce persistee, avec son id et sa date de creation.
        """
        ...

    @abstractmethod
    def find_all_by_order_by_created_date_desc(self) -> List[Advert]:
        """Liste toutes les annonces, plus recentes d'abord."""
        ...

    @abstractmethod
    def find_all_by_user_order_by_created_date_desc(self, user_id: int) -> List[Advert]:
        """Liste les annonces d'un proprietaire, plus recentes d'abord."""
        ...

    @abstractmethod
    def find_by_category(self, category: Category) -> List[Advert]:
        """Liste les annonces d'une categorie."""
        ...

    @abstractmethod
    def find_discounted(self) -> List[Advert]:
        """Liste les annonces en promotion de prix."""
        ...

    @abstractmethod
    def find_promoted(self) -> List[Advert]:
        """Liste les annonces mises en avant."""
        ...

    @abstractmethod
    def find_10_max_viewed(self) -> List[Advert]:
        """Liste au plus 10 annonces, les plus consultees d'abord."""
        ...

    @abstractmethod
    def register_view(self, advert_id: int, user_id: int) -> Optional[Advert]:
        """
        Incremente le compteur et lie l'annonce aux consultations
        de l'utilisateur, en une seule ecriture atomique.

        Returns:
            Annonce a jour, ou None si l'annonce est inconnue.
        """
        ...

    @abstractmethod
    def find_viewed_by_user(self, user_id: int) -> List[Advert]:
        """Liste les annonces consultees par un utilisateur."""
        ...

    @abstractmethod
    def delete(self, advert_id: int) -> bool:
        """Supprime une annonce. Retourne False si absente."""
        ...
