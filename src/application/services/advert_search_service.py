"""
AdvertSearchService - Lectures d'annonces.

Responsabilite unique:
----------------------
Exposer les recherches d'annonces (publiques ou liees a l'appelant)
sous forme de DTOs. Aucune ecriture.

Vues:
-----
- Publiques (AdvertReadWithoutAuthDto): par id, toutes, par categorie,
  promotions, mises en avant, plus consultees
- Completes (AdvertReadDto): tri par date, annonces de l'appelant,
  annonces consultees
"""

from typing import List, Set

from src.application.converters.base import TypeConverter
from src.application.dto.advert_dto import AdvertReadDto, AdvertReadWithoutAuthDto
from src.application.security.principal import AuthenticatedUser
from src.domain.entities.advert import Advert
from src.domain.entities.user import User
from src.domain.exceptions import AuthorizationError, ResourceNotFoundError
from src.domain.ports.advert_repository import AdvertRepository
from src.domain.ports.user_repository import UserRepository
from src.domain.value_objects.category import Category
from src.infrastructure.logging import get_logger

MAX_VIEWED_LIMIT = 10


class AdvertSearchService:
    """
    Service de recherche d'annonces.

    Chaque requete est tracee en debug.
    """

    def __init__(
        self,
        advert_repository: AdvertRepository,
        user_repository: UserRepository,
        read_converter: TypeConverter[Advert, AdvertReadDto],
        public_converter: TypeConverter[Advert, AdvertReadWithoutAuthDto],
        logger=None,
    ):
        self._advert_repository = advert_repository
        self._user_repository = user_repository
        self._read_converter = read_converter
        self._public_converter = public_converter
        self._logger = logger or get_logger(__name__)

    def find_advert_by_id(self, advert_id: int) -> AdvertReadWithoutAuthDto:
        """
        Recupere une annonce publique.

        Raises:
            ResourceNotFoundError: Id inconnu.
        """
        self._logger.debug("find_advert_by_id", advert_id=advert_id)
        advert = self._advert_repository.find_by_id(advert_id)
        if advert is None:
            raise ResourceNotFoundError("Advert", "id", advert_id)
        return self._public_converter.convert(advert)

    def find_all_adverts(self) -> List[AdvertReadWithoutAuthDto]:
        self._logger.debug("find_all_adverts")
        return self._to_public(self._advert_repository.find_all())

    def find_all_by_order_by_created_date_desc(self) -> List[AdvertReadDto]:
        self._logger.debug("find_all_by_order_by_created_date_desc")
        return self._to_read(
            self._advert_repository.find_all_by_order_by_created_date_desc()
        )

    def find_all_adverts_by_user(self, authenticated_user: AuthenticatedUser) -> List[AdvertReadDto]:
        """
        Annonces de l'appelant, plus recentes d'abord.

        Raises:
            AuthorizationError: Appelant non resolu.
        """
        user = self._get_user_by_authenticated_user(authenticated_user)
        self._logger.debug("find_all_adverts_by_user", user_id=user.id)
        return self._to_read(
            self._advert_repository.find_all_by_user_order_by_created_date_desc(user.id)
        )

    def find_by_category(self, category_name: str) -> List[AdvertReadWithoutAuthDto]:
        """
        Annonces d'une categorie (nom insensible a la casse).

        Raises:
            InvalidCategoryError: Categorie inconnue.
        """
        category = Category.from_string(category_name)
        self._logger.debug("find_by_category", category=str(category))
        return self._to_public(self._advert_repository.find_by_category(category))

    def find_discounted(self) -> List[AdvertReadWithoutAuthDto]:
        self._logger.debug("find_discounted")
        return self._to_public(self._advert_repository.find_discounted())

    def find_promoted(self) -> List[AdvertReadWithoutAuthDto]:
        self._logger.debug("find_promoted")
        return self._to_public(self._advert_repository.find_promoted())

    def find_10_max_viewed(self) -> List[AdvertReadWithoutAuthDto]:
        """Au plus 10 annonces, les plus consultees d'abord."""
        self._logger.debug("find_10_max_viewed")
        adverts = self._advert_repository.find_10_max_viewed()
        return self._to_public(adverts[:MAX_VIEWED_LIMIT])

    def find_viewed(self, user: User) -> Set[AdvertReadDto]:
        """Annonces consultees par l'utilisateur, sans doublon."""
        self._logger.debug("find_viewed", user_id=user.id)
        viewed = self._advert_repository.find_viewed_by_user(user.id)
        return {self._read_converter.convert(advert) for advert in viewed}

    def find_viewed_by_authenticated_user(
        self, authenticated_user: AuthenticatedUser
    ) -> Set[AdvertReadDto]:
        """
        Raises:
            AuthorizationError: Appelant non resolu.
        """
        return self.find_viewed(self._get_user_by_authenticated_user(authenticated_user))

    def _get_user_by_authenticated_user(self, authenticated_user: AuthenticatedUser) -> User:
        user = None
        if authenticated_user is not None:
            user = self._user_repository.get_by_email(authenticated_user.email)
        if user is None:
            raise AuthorizationError("Unauthorized access")
        return user

    def _to_public(self, adverts: List[Advert]) -> List[AdvertReadWithoutAuthDto]:
        return [self._public_converter.convert(advert) for advert in adverts]

    def _to_read(self, adverts: List[Advert]) -> List[AdvertReadDto]:
        return [self._read_converter.convert(advert) for advert in adverts]
