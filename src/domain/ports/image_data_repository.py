"""
Port ImageDataRepository - Interface pour la persistance des images.

Une image est toujours adressee par le couple (image_id, advert_id):
une image n'est jamais lue hors du contexte de son annonce.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities.image_data import ImageData


class ImageDataRepository(ABC):
    """
    Interface Repository pour les images d'annonces.

    Implementee par SqlAlchemyImageDataRepository.
    """

    @abstractmethod
    def save(self, image: ImageData) -> ImageData:
        """Persiste une image et retourne l'etat stocke."""
        ...

    @abstractmethod
    def find_by_id_and_advert_id(self, image_id: int, advert_id: int) -> Optional[ImageData]:
        """Recupere une image par sa cle composite."""
        ...

    @abstractmethod
    def find_all_by_advert_id(self, advert_id: int) -> List[ImageData]:
        """Liste les images d'une annonce."""
        ...

    @abstractmethod
    def delete(self, image_id: int, advert_id: int) -> bool:
        """Supprime une image. Retourne False si absente."""
        ...
