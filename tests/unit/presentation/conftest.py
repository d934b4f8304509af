"""
Fixtures des tests de la couche presentation.
"""

from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from src.application.services.advert_registration_service import AdvertRegistrationService
from src.application.services.advert_search_service import AdvertSearchService
from src.application.services.advert_view_service import AdvertViewService
from src.application.services.image_data_service import ImageDataService
from src.application.security.user_login_service import UserLoginService
from src.application.security.user_registration_service import UserRegistrationService
from src.domain.ports.user_repository import UserRepository
from src.presentation.api.dependencies import (
    get_advert_registration_service,
    get_advert_search_service,
    get_advert_view_service,
    get_current_user,
    get_image_data_service,
    get_user_login_service,
    get_user_registration_service,
    get_user_repository,
)
from src.presentation.api.main import create_app


@pytest.fixture
def services() -> dict:
    """Mocks des services injectes dans l'application."""
    return {
        "search": Mock(spec=AdvertSearchService),
        "registration": Mock(spec=AdvertRegistrationService),
        "view": Mock(spec=AdvertViewService),
        "image": Mock(spec=ImageDataService),
        "login": Mock(spec=UserLoginService),
        "signup": Mock(spec=UserRegistrationService),
        "user_repo": Mock(spec=UserRepository),
    }


@pytest.fixture
def app(services):
    """Application FastAPI sans base de donnees."""
    application = create_app()
    overrides = application.dependency_overrides
    overrides[get_advert_search_service] = lambda: services["search"]
    overrides[get_advert_registration_service] = lambda: services["registration"]
    overrides[get_advert_view_service] = lambda: services["view"]
    overrides[get_image_data_service] = lambda: services["image"]
    overrides[get_user_login_service] = lambda: services["login"]
    overrides[get_user_registration_service] = lambda: services["signup"]
    overrides[get_user_repository] = lambda: services["user_repo"]
    return application


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def auth_client(app, authenticated_user) -> TestClient:
    """Client dont l'appelant est authenticated_user."""
    app.dependency_overrides[get_current_user] = lambda: authenticated_user
    return TestClient(app)
