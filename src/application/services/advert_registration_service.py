"""
AdvertRegistrationService - Publication d'une annonce.

Responsabilite unique:
----------------------
Transformer une demande de creation en annonce persistee,
rattachee a l'utilisateur authentifie.

Etapes:
-------
1. Resoudre l'utilisateur par email (ResourceNotFoundError sinon)
2. Convertir le DTO en entite (AdvertRegistrationError propage tel quel)
3. Rattacher le proprietaire et persister (une seule ecriture)
4. Convertir l'entite persistee en AdvertReadDto
"""

from src.application.converters.base import TypeConverter
from src.application.dto.advert_dto import AdvertCreateDto, AdvertReadDto
from src.application.security.principal import AuthenticatedUser
from src.domain.entities.advert import Advert
from src.domain.exceptions import ResourceNotFoundError
from src.domain.ports.advert_repository import AdvertRepository
from src.domain.ports.user_repository import UserRepository
from src.infrastructure.logging import get_logger


class AdvertRegistrationService:
    """
    Service d'enregistrement des annonces.

    Example:
        >>> service = AdvertRegistrationService(
        ...     advert_repo, user_repo, create_converter, read_converter
        ... )
        >>> dto = service.register_advert(create_dto, current_user)
    """

    def __init__(
        self,
        advert_repository: AdvertRepository,
        user_repository: UserRepository,
        create_converter: TypeConverter[AdvertCreateDto, Advert],
        read_converter: TypeConverter[Advert, AdvertReadDto],
        logger=None,
    ):
        self._advert_repository = advert_repository
        self._user_repository = user_repository
        self._create_converter = create_converter
        self._read_converter = read_converter
        self._logger = logger or get_logger(__name__)

    def register_advert(
        self,
        create_dto: AdvertCreateDto,
        authenticated_user: AuthenticatedUser,
    ) -> AdvertReadDto:
        """
        Enregistre une nouvelle annonce.

        Args:
            create_dto: Donnees saisies.
            authenticated_user: Appelant authentifie.

        Returns:
            AdvertReadDto de l'annonce persistee.

        Raises:
            ResourceNotFoundError: Utilisateur introuvable.
            AdvertRegistrationError: Donnees non convertibles.
            PersistenceError: Echec du stockage.
        """
        user = self._user_repository.get_by_email(authenticated_user.email)
        if user is None:
            raise ResourceNotFoundError("User", "email", authenticated_user.email)

        advert = self._create_converter.convert(create_dto)
        advert.assign_owner(user)

        saved = self._advert_repository.save_and_flush(advert)
        self._logger.info("advert_registered", advert_id=saved.id, user_id=user.id)

        return self._read_converter.convert(saved)
