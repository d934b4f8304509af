"""
Entites du domaine.

Les entites sont des objets metier avec une identite propre
et un cycle de vie. Contrairement aux Value Objects, deux entites
avec les memes attributs ne sont pas egales si leurs identifiants different.

Entites principales:
    - Advert: Annonce publiee par un utilisateur
    - User: Utilisateur avec role et fournisseur d'identite
    - ImageData: Image rattachee a une annonce
"""

from src.domain.entities.advert import Advert
from src.domain.entities.image_data import ImageData
from src.domain.entities.user import User

__all__ = [
    "Advert",
    "ImageData",
    "User",
]
