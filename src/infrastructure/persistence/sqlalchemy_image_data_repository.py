"""
SqlAlchemyImageDataRepository - Adapter SQLAlchemy pour les images.
"""

from typing import List, Optional

from sqlalchemy.orm import undefer

from src.domain.entities.image_data import ImageData
from src.domain.ports.image_data_repository import ImageDataRepository
from src.infrastructure.persistence.database import DatabaseManager
from src.infrastructure.persistence.errors import translate_errors
from src.infrastructure.persistence.mappers import image_to_entity
from src.infrastructure.persistence.models import ImageDataModel


class SqlAlchemyImageDataRepository(ImageDataRepository):
    """Repository SQLAlchemy pour les images d'annonces."""

    def __init__(self, db: DatabaseManager):
        self._db = db

    @translate_errors("save_image")
    def save(self, image: ImageData) -> ImageData:
        with self._db.get_session() as session:
            model = ImageDataModel(
                advert_id=image.advert_id,
                name=image.name,
                content_type=image.content_type,
                payload=image.payload,
            )
            session.add(model)
            session.flush()
            return image_to_entity(model)

    @translate_errors("find_image")
    def find_by_id_and_advert_id(self, image_id: int, advert_id: int) -> Optional[ImageData]:
        with self._db.get_session() as session:
            model = session.query(ImageDataModel).options(
                undefer(ImageDataModel.payload)
            ).filter(
                ImageDataModel.id == image_id,
                ImageDataModel.advert_id == advert_id,
            ).first()
            return image_to_entity(model) if model else None

    @translate_errors("find_images_by_advert")
    def find_all_by_advert_id(self, advert_id: int) -> List[ImageData]:
        with self._db.get_session() as session:
            models = session.query(ImageDataModel).options(
                undefer(ImageDataModel.payload)
            ).filter(
                ImageDataModel.advert_id == advert_id
            ).order_by(ImageDataModel.id).all()
            return [image_to_entity(m) for m in models]

    @translate_errors("delete_image")
    def delete(self, image_id: int, advert_id: int) -> bool:
        with self._db.get_session() as session:
            deleted = session.query(ImageDataModel).filter(
                ImageDataModel.id == image_id,
                ImageDataModel.advert_id == advert_id,
            ).delete(synchronize_session=False)
            return deleted > 0
