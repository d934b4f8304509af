"""
Tests unitaires pour l'API REST.

Teste la configuration JWT, les schemas et le mapping des erreurs.
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from src.domain.exceptions import (
    AdvertRegistrationError,
    AuthorizationError,
    BadCredentialsError,
    DomainException,
    InvalidCategoryError,
    OAuth2AuthenticationProcessingError,
    PersistenceError,
    ResourceNotFoundError,
)
from src.presentation.api.adverts.schemas import AdvertCreateRequest, AdvertResponse
from src.presentation.api.auth.jwt_service import JWTService
from src.presentation.api.auth.schemas import LoginRequest, SignUpRequest
from src.presentation.api.config import APISettings
from src.presentation.api.errors import status_for


class TestJWTService:
    """Tests pour le service JWT."""

    def test_create_tokens_returns_access_and_refresh(self):
        """create_tokens retourne access et refresh tokens."""
        service = JWTService(APISettings(jwt_secret_key="test-secret-key"))

        tokens = service.create_tokens(1, "john@example.com", "user")

        assert "access_token" in tokens
        assert "refresh_token" in tokens
        assert tokens["token_type"] == "bearer"
        assert tokens["expires_in"] == 30 * 60

    def test_verify_access_token_valid(self):
        """verify_access_token retourne payload si valide."""
        service = JWTService(APISettings(jwt_secret_key="test-secret-key"))
        tokens = service.create_tokens(7, "john@example.com", "admin")

        payload = service.verify_access_token(tokens["access_token"])

        assert payload is not None
        assert payload.user_id == 7
        assert payload.email == "john@example.com"
        assert payload.role == "admin"
        assert payload.token_type == "access"

    def test_verify_access_token_invalid(self):
        service = JWTService(APISettings(jwt_secret_key="test-secret-key"))

        assert service.verify_access_token("invalid-token") is None

    def test_access_token_not_valid_as_refresh(self):
        """Un access token n'est pas valide comme refresh."""
        service = JWTService(APISettings(jwt_secret_key="test-secret-key"))
        tokens = service.create_tokens(1, "john@example.com", "user")

        assert service.verify_refresh_token(tokens["access_token"]) is None
        assert service.verify_refresh_token(tokens["refresh_token"]).user_id == 1

    def test_token_signed_with_other_secret_rejected(self):
        tokens = JWTService(APISettings(jwt_secret_key="secret-a")).create_tokens(1, "a@b.c", "user")

        other = JWTService(APISettings(jwt_secret_key="secret-b"))

        assert other.verify_access_token(tokens["access_token"]) is None

    def test_expired_token_rejected(self):
        service = JWTService(APISettings(jwt_secret_key="k", jwt_access_expire_minutes=-1))
        tokens = service.create_tokens(1, "a@b.c", "user")

        assert service.verify_access_token(tokens["access_token"]) is None


class TestAPISettings:
    """Tests pour APISettings."""

    def test_defaults(self):
        settings = APISettings()

        assert settings.api_prefix == "/v1.0"
        assert settings.jwt_algorithm == "HS256"
        assert settings.image_max_bytes == 5 * 1024 * 1024


class TestSchemas:
    """Tests pour les schemas Pydantic."""

    def test_login_request_requires_password(self):
        with pytest.raises(ValidationError):
            LoginRequest(email="john@example.com", password="")

    def test_signup_request_min_password(self):
        with pytest.raises(ValidationError):
            SignUpRequest(email="john@example.com", password="short")

    def test_advert_create_request_to_dto(self):
        request = AdvertCreateRequest(title="Velo", description="Bon etat", category="sport", price="12.5")

        dto = request.to_dto()

        assert dto.title == "Velo"
        assert dto.price == Decimal("12.5")
        assert dto.category == "sport"

    def test_advert_response_from_dto(self, read_converter, sample_advert):
        response = AdvertResponse.model_validate(read_converter.convert(sample_advert))

        assert response.id == sample_advert.id
        assert response.phone == sample_advert.phone


class TestErrorMapping:
    """Tests pour le mapping exceptions -> statut HTTP."""

    @pytest.mark.parametrize("exc,expected", [
        (ResourceNotFoundError("Advert", "id", 1), 404),
        (AuthorizationError(), 403),
        (InvalidCategoryError("bogus"), 400),
        (AdvertRegistrationError("x"), 400),
        (OAuth2AuthenticationProcessingError("x"), 401),
        (BadCredentialsError(), 401),
        (PersistenceError("x"), 503),
        (DomainException("x"), 500),
    ])
    def test_status_for(self, exc, expected):
        assert status_for(exc) == expected
