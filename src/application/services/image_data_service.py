"""
ImageDataService - Images des annonces.

Responsabilite unique:
----------------------
Televerser, lire et supprimer les images rattachees a une annonce.
Seul le proprietaire de l'annonce peut ajouter ou supprimer.

Le fichier recu suit le protocole UploadedFile (filename,
content_type, file), satisfait par starlette UploadFile.
"""

from typing import BinaryIO, List, Optional, Protocol

from src.application.security.principal import AuthenticatedUser
from src.domain.entities.advert import Advert
from src.domain.entities.image_data import ImageData
from src.domain.exceptions import (
    AuthorizationError,
    InvalidImageError,
    ResourceNotFoundError,
)
from src.domain.ports.advert_repository import AdvertRepository
from src.domain.ports.image_data_repository import ImageDataRepository
from src.infrastructure.logging import get_logger

DEFAULT_IMAGE_MAX_BYTES = 5 * 1024 * 1024


class UploadedFile(Protocol):
    filename: Optional[str]
    content_type: Optional[str]
    file: BinaryIO


class ImageDataService:
    """
    Service de gestion des images.

    Example:
        >>> service = ImageDataService(image_repo, advert_repo)
        >>> image = service.upload_image_to_advert(12, upload, current_user)
    """

    def __init__(
        self,
        image_repository: ImageDataRepository,
        advert_repository: AdvertRepository,
        max_bytes: int = DEFAULT_IMAGE_MAX_BYTES,
        logger=None,
    ):
        self._image_repository = image_repository
        self._advert_repository = advert_repository
        self._max_bytes = max_bytes
        self._logger = logger or get_logger(__name__)

    def upload_image_to_advert(
        self,
        advert_id: int,
        file: UploadedFile,
        authenticated_user: AuthenticatedUser,
    ) -> ImageData:
        """
        Ajoute une image a une annonce.

        Raises:
            ResourceNotFoundError: Annonce inconnue.
            AuthorizationError: Appelant non proprietaire.
            InvalidImageError: Type non image ou taille depassee.
            OSError: Lecture du flux impossible.
        """
        self._get_owned_advert(advert_id, authenticated_user)

        content_type = (file.content_type or "").lower()
        if not content_type.startswith("image/"):
            raise InvalidImageError(f"type '{file.content_type}' non supporte")

        payload = file.file.read(self._max_bytes + 1)
        if not payload:
            raise InvalidImageError("fichier vide")
        if len(payload) > self._max_bytes:
            raise InvalidImageError(f"taille superieure a {self._max_bytes} octets")

        image = self._image_repository.save(
            ImageData(
                advert_id=advert_id,
                name=file.filename or "image",
                content_type=content_type,
                payload=payload,
            )
        )
        self._logger.info(
            "image_uploaded", advert_id=advert_id, image_id=image.id, size=image.size
        )
        return image

    def find_image_by_id_and_by_advert_id(self, image_id: int, advert_id: int) -> ImageData:
        """
        Raises:
            ResourceNotFoundError: Couple (image, annonce) inconnu.
        """
        self._logger.debug("find_image", image_id=image_id, advert_id=advert_id)
        image = self._image_repository.find_by_id_and_advert_id(image_id, advert_id)
        if image is None:
            raise ResourceNotFoundError("Image", "id", image_id)
        return image

    def find_byte_list_to_advert(self, advert_id: int) -> List[bytes]:
        """Contenus des images d'une annonce (liste vide si aucune)."""
        self._logger.debug("find_byte_list_to_advert", advert_id=advert_id)
        return [
            image.payload
            for image in self._image_repository.find_all_by_advert_id(advert_id)
        ]

    def delete_image_by_id_and_by_advert_id(
        self,
        image_id: int,
        advert_id: int,
        authenticated_user: AuthenticatedUser,
    ) -> None:
        """
        Raises:
            ResourceNotFoundError: Annonce ou image inconnue.
            AuthorizationError: Appelant non proprietaire.
        """
        self._get_owned_advert(advert_id, authenticated_user)
        if not self._image_repository.delete(image_id, advert_id):
            raise ResourceNotFoundError("Image", "id", image_id)
        self._logger.info("image_deleted", advert_id=advert_id, image_id=image_id)

    def _get_owned_advert(self, advert_id: int, authenticated_user: AuthenticatedUser) -> Advert:
        advert = self._advert_repository.find_by_id(advert_id)
        if advert is None:
            raise ResourceNotFoundError("Advert", "id", advert_id)
        if authenticated_user is None or not advert.is_owned_by(authenticated_user.id):
            raise AuthorizationError("Unauthorized access")
        return advert
