"""
Container d'injection de dependances.

Ce module fournit un conteneur qui initialise et connecte
les repositories, convertisseurs et services de l'application.
"""

from dataclasses import dataclass
from typing import Optional

from src.application.converters.advert_converters import (
    AdvertCreateDtoConverter,
    AdvertReadDtoConverter,
    AdvertReadWithoutAuthDtoConverter,
)
from src.application.security.oauth2_user_service import OAuth2UserService
from src.application.security.user_login_service import UserLoginService
from src.application.security.user_registration_service import UserRegistrationService
from src.application.services.advert_registration_service import AdvertRegistrationService
from src.application.services.advert_search_service import AdvertSearchService
from src.application.services.advert_view_service import AdvertViewService
from src.application.services.image_data_service import (
    DEFAULT_IMAGE_MAX_BYTES,
    ImageDataService,
)
from src.domain.ports.advert_repository import AdvertRepository
from src.domain.ports.image_data_repository import ImageDataRepository
from src.domain.ports.user_repository import UserRepository
from src.infrastructure.persistence.database import DatabaseManager
from src.infrastructure.persistence.sqlalchemy_advert_repository import (
    SqlAlchemyAdvertRepository,
)
from src.infrastructure.persistence.sqlalchemy_image_data_repository import (
    SqlAlchemyImageDataRepository,
)
from src.infrastructure.persistence.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)


@dataclass
class Container:
    """
    Conteneur d'injection de dependances.

    Example:
        >>> db = DatabaseManager("sqlite:///:memory:")
        >>> container = Container.create(db)
        >>> container.advert_search_service.find_all_adverts()
        []
    """

    # Repositories
    advert_repository: AdvertRepository
    user_repository: UserRepository
    image_repository: ImageDataRepository

    # Services
    advert_registration_service: AdvertRegistrationService
    advert_search_service: AdvertSearchService
    advert_view_service: AdvertViewService
    image_data_service: ImageDataService

    # Securite
    user_login_service: UserLoginService
    user_registration_service: UserRegistrationService
    oauth2_user_service: OAuth2UserService

    db_manager: Optional[DatabaseManager] = None

    @classmethod
    def create(
        cls,
        db_manager: DatabaseManager,
        image_max_bytes: int = DEFAULT_IMAGE_MAX_BYTES,
        advert_repository: AdvertRepository = None,
        user_repository: UserRepository = None,
        image_repository: ImageDataRepository = None,
    ) -> "Container":
        """
        Factory pour creer un conteneur avec toutes les dependances.

        Les repositories peuvent etre fournis (tests); sinon les
        adapters SQLAlchemy sont construits sur db_manager.
        """
        advert_repository = advert_repository or SqlAlchemyAdvertRepository(db_manager)
        user_repository = user_repository or SqlAlchemyUserRepository(db_manager)
        image_repository = image_repository or SqlAlchemyImageDataRepository(db_manager)

        # Convertisseurs (sans etat, partages)
        create_converter = AdvertCreateDtoConverter()
        read_converter = AdvertReadDtoConverter()
        public_converter = AdvertReadWithoutAuthDtoConverter()

        return cls(
            advert_repository=advert_repository,
            user_repository=user_repository,
            image_repository=image_repository,
            advert_registration_service=AdvertRegistrationService(
                advert_repository, user_repository, create_converter, read_converter
            ),
            advert_search_service=AdvertSearchService(
                advert_repository, user_repository, read_converter, public_converter
            ),
            advert_view_service=AdvertViewService(advert_repository, read_converter),
            image_data_service=ImageDataService(
                image_repository, advert_repository, max_bytes=image_max_bytes
            ),
            user_login_service=UserLoginService(user_repository),
            user_registration_service=UserRegistrationService(user_repository),
            oauth2_user_service=OAuth2UserService(user_repository),
            db_manager=db_manager,
        )
