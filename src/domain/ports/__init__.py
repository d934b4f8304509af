"""
Ports du domaine (Hexagonal Architecture).

Les Ports sont des interfaces qui definissent les contrats
entre le domaine et le monde exterieur.

Ports disponibles:
------------------
- AdvertRepository: Persistance des annonces
- UserRepository: Persistance des utilisateurs
- ImageDataRepository: Persistance des images

Pattern:
--------
Les Ports sont des ABC implementees par des Adapters
dans la couche Infrastructure (SQLAlchemy).
"""

from src.domain.ports.advert_repository import AdvertRepository
from src.domain.ports.image_data_repository import ImageDataRepository
from src.domain.ports.user_repository import UserRepository

__all__ = [
    "AdvertRepository",
    "ImageDataRepository",
    "UserRepository",
]
