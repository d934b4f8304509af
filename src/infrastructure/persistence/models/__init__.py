"""
Modeles SQLAlchemy - exports centralises.

Organisation par domaine:
- base: Base declarative
- user_models: Utilisateurs et annonces consultees
- advert_models: Annonces et images
"""

from src.infrastructure.persistence.models.base import Base
from src.infrastructure.persistence.models.advert_models import AdvertModel, ImageDataModel
from src.infrastructure.persistence.models.user_models import UserModel, user_viewed_adverts

__all__ = [
    "Base",
    "AdvertModel",
    "ImageDataModel",
    "UserModel",
    "user_viewed_adverts",
]
