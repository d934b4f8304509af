"""
Tests unitaires pour le Container d'injection de dependances.
"""

from unittest.mock import MagicMock, Mock

from src.domain.ports.advert_repository import AdvertRepository
from src.infrastructure.container import Container
from src.infrastructure.persistence.sqlalchemy_advert_repository import SqlAlchemyAdvertRepository
from src.infrastructure.persistence.sqlalchemy_image_data_repository import SqlAlchemyImageDataRepository
from src.infrastructure.persistence.sqlalchemy_user_repository import SqlAlchemyUserRepository


class TestContainer:
    """Tests pour Container."""

    def test_create_with_db_manager(self) -> None:
        """Les adapters SQLAlchemy sont construits sur le db_manager."""
        mock_db = MagicMock()

        container = Container.create(db_manager=mock_db)

        assert isinstance(container.advert_repository, SqlAlchemyAdvertRepository)
        assert isinstance(container.user_repository, SqlAlchemyUserRepository)
        assert isinstance(container.image_repository, SqlAlchemyImageDataRepository)
        assert container.advert_repository._db is mock_db
        assert container.db_manager is mock_db

    def test_services_share_repositories(self) -> None:
        container = Container.create(db_manager=MagicMock())

        assert container.advert_search_service._advert_repository is container.advert_repository
        assert container.advert_registration_service._user_repository is container.user_repository

    def test_create_with_injected_repository(self) -> None:
        """Un repository fourni remplace l'adapter SQLAlchemy."""
        advert_repo = Mock(spec=AdvertRepository)
        advert_repo.find_all.return_value = []

        container = Container.create(db_manager=MagicMock(), advert_repository=advert_repo)

        assert container.advert_repository is advert_repo
        assert container.advert_search_service.find_all_adverts() == []

    def test_image_max_bytes(self) -> None:
        container = Container.create(db_manager=MagicMock(), image_max_bytes=1024)

        assert container.image_data_service._max_bytes == 1024

    def test_create_on_sqlite(self, db) -> None:
        container = Container.create(db)

        assert container.advert_search_service.find_all_adverts() == []
