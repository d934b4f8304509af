"""
AdvertViewService - Comptage des consultations.

Une consultation incremente le compteur de l'annonce et l'ajoute
aux annonces consultees de l'appelant, en une seule ecriture
(AdvertRepository.register_view). Ces donnees alimentent
find_10_max_viewed et find_viewed.
"""

from src.application.converters.base import TypeConverter
from src.application.dto.advert_dto import AdvertReadDto
from src.application.security.principal import AuthenticatedUser
from src.domain.entities.advert import Advert
from src.domain.exceptions import ResourceNotFoundError
from src.domain.ports.advert_repository import AdvertRepository
from src.infrastructure.logging import get_logger


class AdvertViewService:
    """Enregistre les consultations d'annonces."""

    def __init__(
        self,
        advert_repository: AdvertRepository,
        read_converter: TypeConverter[Advert, AdvertReadDto],
        logger=None,
    ):
        self._advert_repository = advert_repository
        self._read_converter = read_converter
        self._logger = logger or get_logger(__name__)

    def register_view(self, advert_id: int, authenticated_user: AuthenticatedUser) -> AdvertReadDto:
        """
        Raises:
            ResourceNotFoundError: Annonce ou utilisateur inconnu.
        """
        advert = self._advert_repository.register_view(advert_id, authenticated_user.id)
        if advert is None:
            raise ResourceNotFoundError("Advert", "id", advert_id)

        self._logger.debug(
            "advert_viewed",
            advert_id=advert_id,
            user_id=authenticated_user.id,
            viewing_quantity=advert.viewing_quantity,
        )
        return self._read_converter.convert(advert)
