"""
Adapters pour la persistence des donnees.

Ce module expose le DatabaseManager, les modeles et les
repositories SQLAlchemy qui implementent les ports du domaine.
"""

from src.infrastructure.persistence.database import DatabaseManager
from src.infrastructure.persistence.models import (
    AdvertModel,
    Base,
    ImageDataModel,
    UserModel,
)
from src.infrastructure.persistence.sqlalchemy_advert_repository import (
    SqlAlchemyAdvertRepository,
)
from src.infrastructure.persistence.sqlalchemy_image_data_repository import (
    SqlAlchemyImageDataRepository,
)
from src.infrastructure.persistence.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)

__all__ = [
    "DatabaseManager",
    "Base",
    "AdvertModel",
    "ImageDataModel",
    "UserModel",
    "SqlAlchemyAdvertRepository",
    "SqlAlchemyImageDataRepository",
    "SqlAlchemyUserRepository",
]
