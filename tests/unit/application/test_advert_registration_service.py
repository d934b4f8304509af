"""
Tests unitaires pour AdvertRegistrationService.

Teste l'ordre des etapes: resolution utilisateur, conversion,
ecriture unique, conversion de lecture.
"""

from unittest.mock import Mock

import pytest

from src.application.services.advert_registration_service import AdvertRegistrationService
from src.domain.entities.advert import Advert
from src.domain.exceptions import (
    AdvertRegistrationError,
    PersistenceError,
    ResourceNotFoundError,
)


def _saved(advert: Advert) -> Advert:
    advert.id = 55
    return advert


class TestAdvertRegistrationService:
    """Tests pour AdvertRegistrationService."""

    def test_register_advert_success(
        self, advert_repo, user_repo, create_converter, read_converter,
        create_dto, authenticated_user, sample_user,
    ):
        """Une demande valide produit un DTO et une seule ecriture."""
        # Arrange
        user_repo.get_by_email.return_value = sample_user
        advert_repo.save_and_flush.side_effect = _saved
        service = AdvertRegistrationService(
            advert_repo, user_repo, create_converter, read_converter
        )

        # Act
        dto = service.register_advert(create_dto, authenticated_user)

        # Assert
        assert dto.title == create_dto.title
        assert dto.id == 55
        assert dto.user_id == sample_user.id
        advert_repo.save_and_flush.assert_called_once()
        user_repo.get_by_email.assert_called_once_with(authenticated_user.email)

    def test_unknown_user_raises_before_conversion(
        self, advert_repo, user_repo, read_converter, create_dto, authenticated_user,
    ):
        """Utilisateur inconnu: aucune conversion ni ecriture."""
        # Arrange
        user_repo.get_by_email.return_value = None
        create_converter = Mock()
        service = AdvertRegistrationService(
            advert_repo, user_repo, create_converter, read_converter
        )

        # Act / Assert
        with pytest.raises(ResourceNotFoundError):
            service.register_advert(create_dto, authenticated_user)

        create_converter.convert.assert_not_called()
        advert_repo.save_and_flush.assert_not_called()

    def test_converter_failure_propagates_without_write(
        self, advert_repo, user_repo, create_dto, authenticated_user, sample_user,
    ):
        """Echec de conversion: l'exception d'origine remonte, pas d'ecriture."""
        # Arrange
        user_repo.get_by_email.return_value = sample_user
        error = AdvertRegistrationError("Categorie inexistante", field="category")
        create_converter = Mock()
        create_converter.convert.side_effect = error
        read_converter = Mock()
        service = AdvertRegistrationService(
            advert_repo, user_repo, create_converter, read_converter
        )

        # Act / Assert
        with pytest.raises(AdvertRegistrationError) as exc_info:
            service.register_advert(create_dto, authenticated_user)

        assert exc_info.value is error
        advert_repo.save_and_flush.assert_not_called()
        read_converter.convert.assert_not_called()

    def test_store_failure_skips_read_conversion(
        self, advert_repo, user_repo, create_converter, create_dto,
        authenticated_user, sample_user,
    ):
        """Echec du stockage: pas de conversion de lecture."""
        # Arrange
        user_repo.get_by_email.return_value = sample_user
        advert_repo.save_and_flush.side_effect = PersistenceError("down", "save_and_flush")
        read_converter = Mock()
        service = AdvertRegistrationService(
            advert_repo, user_repo, create_converter, read_converter
        )

        # Act / Assert
        with pytest.raises(PersistenceError):
            service.register_advert(create_dto, authenticated_user)

        read_converter.convert.assert_not_called()

    def test_logs_registration(
        self, advert_repo, user_repo, create_converter, read_converter,
        create_dto, authenticated_user, sample_user,
    ):
        """Le logger injecte recoit l'evenement d'enregistrement."""
        user_repo.get_by_email.return_value = sample_user
        advert_repo.save_and_flush.side_effect = _saved
        logger = Mock()
        service = AdvertRegistrationService(
            advert_repo, user_repo, create_converter, read_converter, logger=logger
        )

        service.register_advert(create_dto, authenticated_user)

        logger.info.assert_called_once_with(
            "advert_registered", advert_id=55, user_id=sample_user.id
        )
