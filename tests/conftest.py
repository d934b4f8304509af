"""
Configuration et fixtures pytest.
"""

import sys
from datetime import datetime
from decimal import Decimal
from pathlib import Path
from unittest.mock import Mock

import pytest

# Ajouter le repertoire racine au path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.application.converters.advert_converters import (
    AdvertCreateDtoConverter,
    AdvertReadDtoConverter,
    AdvertReadWithoutAuthDtoConverter,
)
from src.application.dto.advert_dto import AdvertCreateDto
from src.application.security.principal import AuthenticatedUser
from src.domain.entities.advert import Advert
from src.domain.entities.user import User
from src.domain.ports.advert_repository import AdvertRepository
from src.domain.ports.image_data_repository import ImageDataRepository
from src.domain.ports.user_repository import UserRepository
from src.domain.value_objects import AdvertStatus, Category, Currency, Role
from src.infrastructure.persistence.database import DatabaseManager

# Hash bcrypt de "secret123", calcule une fois (bcrypt est lent)
_PASSWORD_HASH = User._hash_password("secret123")


# ═══════════════════════════════════════════════════════════════════════════════
# FIXTURES - ENTITIES
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.fixture
def password_hash() -> str:
    """Hash bcrypt de "secret123"."""
    return _PASSWORD_HASH


@pytest.fixture
def sample_user(password_hash: str) -> User:
    """Utilisateur local persiste."""
    return User(
        id=1,
        email="john@example.com",
        password_hash=password_hash,
        first_name="John",
        last_name="Doe",
        role=Role.user(),
    )


@pytest.fixture
def authenticated_user(sample_user: User) -> AuthenticatedUser:
    """Appelant authentifie correspondant a sample_user."""
    return AuthenticatedUser(id=sample_user.id, email=sample_user.email, role=sample_user.role)


@pytest.fixture
def sample_advert() -> Advert:
    """Annonce persistee appartenant a sample_user."""
    return Advert(
        id=10,
        title="Velo de course",
        description="Cadre carbone, tres bon etat",
        category=Category.SPORT,
        status=AdvertStatus.PUBLISHED,
        phone="+33600000000",
        price=Decimal("450.00"),
        currency=Currency.EUR,
        address="Lyon",
        created_date=datetime(2024, 5, 1, 10, 0, 0),
        user_id=1,
        viewing_quantity=3,
    )


@pytest.fixture
def create_dto() -> AdvertCreateDto:
    """Demande de creation valide."""
    return AdvertCreateDto(
        title="Velo de course",
        description="Cadre carbone, tres bon etat",
        category="sport",
        price=Decimal("450.00"),
        currency="EUR",
        phone="+33600000000",
    )


@pytest.fixture
def multiple_adverts() -> list[Advert]:
    """Annonces variees pour les tests."""
    categories = [Category.TOYS, Category.BOOKS, Category.TOYS, Category.ELECTRONICS]
    return [
        Advert(
            id=100 + i,
            title=f"Annonce {i}",
            description=f"Description {i}",
            category=categories[i % len(categories)],
            created_date=datetime(2024, 1, 1 + i),
            user_id=1,
            viewing_quantity=i * 5,
            promoted=i % 2 == 0,
            discounted=i % 3 == 0,
        )
        for i in range(12)
    ]


# ═══════════════════════════════════════════════════════════════════════════════
# FIXTURES - PORTS ET CONVERTISSEURS
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.fixture
def advert_repo() -> Mock:
    """Mock du port AdvertRepository."""
    return Mock(spec=AdvertRepository)


@pytest.fixture
def user_repo() -> Mock:
    """Mock du port UserRepository."""
    return Mock(spec=UserRepository)


@pytest.fixture
def image_repo() -> Mock:
    """Mock du port ImageDataRepository."""
    return Mock(spec=ImageDataRepository)


@pytest.fixture
def create_converter() -> AdvertCreateDtoConverter:
    return AdvertCreateDtoConverter()


@pytest.fixture
def read_converter() -> AdvertReadDtoConverter:
    return AdvertReadDtoConverter()


@pytest.fixture
def public_converter() -> AdvertReadWithoutAuthDtoConverter:
    return AdvertReadWithoutAuthDtoConverter()


# ═══════════════════════════════════════════════════════════════════════════════
# FIXTURES - BASE DE DONNEES
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.fixture
def db() -> DatabaseManager:
    """Base SQLite en memoire, tables creees."""
    manager = DatabaseManager("sqlite:///:memory:")
    manager.create_tables()
    yield manager
    manager.drop_tables()
    manager.engine.dispose()


# ═══════════════════════════════════════════════════════════════════════════════
# MARKERS
# ═══════════════════════════════════════════════════════════════════════════════

def pytest_configure(config):
    """Configure les markers personnalises."""
    config.addinivalue_line("markers", "unit: Tests unitaires rapides")
    config.addinivalue_line("markers", "integration: Tests d'integration")
