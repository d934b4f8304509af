"""
Tests d'integration des repositories SQLAlchemy.

Base SQLite en memoire (fixture db).
"""

import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from decimal import Decimal
from unittest.mock import patch

import pytest
from sqlalchemy import event
from sqlalchemy.exc import OperationalError

from src.domain.entities.advert import Advert
from src.domain.entities.image_data import ImageData
from src.domain.entities.user import User
from src.domain.exceptions import PersistenceError, ResourceNotFoundError
from src.domain.value_objects import AuthProvider, Category, Currency
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

pytestmark = pytest.mark.integration


@pytest.fixture
def users(db):
    return SqlAlchemyUserRepository(db)


@pytest.fixture
def adverts(db):
    return SqlAlchemyAdvertRepository(db)


@pytest.fixture
def images(db):
    return SqlAlchemyImageDataRepository(db)


@pytest.fixture
def owner(users, password_hash):
    return users.save(User(email="Owner@Example.com", password_hash=password_hash))


def _advert(owner, title="Velo", **kwargs) -> Advert:
    advert = Advert(title=title, description=f"{title} description", **kwargs)
    advert.assign_owner(owner)
    return advert


class TestSqlAlchemyUserRepository:
    """Tests pour SqlAlchemyUserRepository."""

    def test_save_assigns_id_and_lowercases_email(self, owner):
        assert owner.id is not None
        assert owner.email == "owner@example.com"

    def test_get_by_email_is_case_insensitive(self, users, owner):
        found = users.get_by_email("OWNER@example.com")

        assert found is not None
        assert found.id == owner.id

    def test_get_by_email_unknown(self, users):
        assert users.get_by_email("ghost@example.com") is None

    def test_exists_by_email(self, users, owner):
        assert users.exists_by_email("owner@example.com") is True
        assert users.exists_by_email("ghost@example.com") is False

    def test_update_existing(self, users, owner):
        owner.first_name = "Ann"
        owner.provider = AuthProvider.GOOGLE

        users.save(owner)
        reloaded = users.get_by_id(owner.id)

        assert reloaded.first_name == "Ann"
        assert reloaded.provider is AuthProvider.GOOGLE


class TestSqlAlchemyAdvertRepository:
    """Tests pour SqlAlchemyAdvertRepository."""

    def test_save_and_flush_round_trip(self, adverts, owner):
        saved = adverts.save_and_flush(
            _advert(owner, category=Category.BOOKS, price=Decimal("12.50"), currency=Currency.USD)
        )

        found = adverts.find_by_id(saved.id)

        assert found.title == "Velo"
        assert found.category is Category.BOOKS
        assert found.currency is Currency.USD
        assert found.price == Decimal("12.50")
        assert found.user_id == owner.id

    def test_find_by_id_unknown(self, adverts):
        assert adverts.find_by_id(12345) is None

    def test_update_existing(self, adverts, owner):
        saved = adverts.save_and_flush(_advert(owner))
        saved.viewing_quantity = 1

        updated = adverts.save_and_flush(saved)

        assert updated.id == saved.id
        assert adverts.find_by_id(saved.id).viewing_quantity == 1

    def test_update_missing_raises(self, adverts, owner):
        ghost = _advert(owner)
        ghost.id = 777

        with pytest.raises(PersistenceError):
            adverts.save_and_flush(ghost)

    def test_order_by_created_date_desc(self, adverts, owner):
        for day in (3, 1, 2):
            adverts.save_and_flush(_advert(owner, title=f"J{day}", created_date=datetime(2024, 1, day)))

        titles = [a.title for a in adverts.find_all_by_order_by_created_date_desc()]

        assert titles == ["J3", "J2", "J1"]

    def test_find_by_user(self, users, adverts, owner, password_hash):
        other = users.save(User(email="other@example.com", password_hash=password_hash))
        adverts.save_and_flush(_advert(owner, title="Mine"))
        adverts.save_and_flush(_advert(other, title="Theirs"))

        mine = adverts.find_all_by_user_order_by_created_date_desc(owner.id)

        assert [a.title for a in mine] == ["Mine"]

    def test_find_by_category_and_flags(self, adverts, owner):
        adverts.save_and_flush(_advert(owner, title="Lego", category=Category.TOYS, promoted=True))
        adverts.save_and_flush(_advert(owner, title="Livre", category=Category.BOOKS, discounted=True))

        assert [a.title for a in adverts.find_by_category(Category.TOYS)] == ["Lego"]
        assert [a.title for a in adverts.find_promoted()] == ["Lego"]
        assert [a.title for a in adverts.find_discounted()] == ["Livre"]

    def test_find_10_max_viewed(self, adverts, owner):
        for i in range(12):
            adverts.save_and_flush(_advert(owner, title=f"A{i}", viewing_quantity=i))

        result = adverts.find_10_max_viewed()

        assert len(result) == 10
        assert result[0].viewing_quantity == 11
        assert [a.viewing_quantity for a in result] == sorted(
            (a.viewing_quantity for a in result), reverse=True
        )

    def test_delete(self, adverts, owner):
        saved = adverts.save_and_flush(_advert(owner))

        assert adverts.delete(saved.id) is True
        assert adverts.delete(saved.id) is False

    def test_register_view_increments_and_links(self, users, adverts, owner, password_hash):
        visitor = users.save(User(email="visitor@example.com", password_hash=password_hash))
        saved = adverts.save_and_flush(_advert(owner))

        adverts.register_view(saved.id, visitor.id)
        viewed = adverts.register_view(saved.id, visitor.id)

        assert viewed.viewing_quantity == 2
        assert [a.id for a in adverts.find_viewed_by_user(visitor.id)] == [saved.id]
        assert adverts.find_viewed_by_user(owner.id) == []

    def test_register_view_unknown_advert(self, adverts, owner):
        assert adverts.register_view(999, owner.id) is None

    def test_register_view_unknown_user_rolls_back(self, adverts, owner):
        """Utilisateur inconnu: ni compteur incremente, ni lien cree."""
        saved = adverts.save_and_flush(_advert(owner))

        with pytest.raises(ResourceNotFoundError):
            adverts.register_view(saved.id, 999)

        assert adverts.find_by_id(saved.id).viewing_quantity == 0

    def test_sqlalchemy_error_becomes_persistence_error(self, adverts, db):
        """Une erreur SQLAlchemy est traduite en PersistenceError."""
        with patch.object(db, "SessionLocal", side_effect=OperationalError("SELECT", {}, Exception("down"))):
            with pytest.raises(PersistenceError) as exc_info:
                adverts.find_all()

        assert exc_info.value.operation == "find_all"


class TestSqlAlchemyImageDataRepository:
    """Tests pour SqlAlchemyImageDataRepository."""

    def test_save_and_find(self, adverts, images, owner):
        advert = adverts.save_and_flush(_advert(owner))
        saved = images.save(ImageData(advert_id=advert.id, name="a.png", content_type="image/png", payload=b"abc"))

        found = images.find_by_id_and_advert_id(saved.id, advert.id)

        assert found.payload == b"abc"
        assert adverts.find_by_id(advert.id).image_ids == [saved.id]

    def test_composite_key_mismatch(self, adverts, images, owner):
        advert = adverts.save_and_flush(_advert(owner))
        saved = images.save(ImageData(advert_id=advert.id, name="a.png", content_type="image/png", payload=b"abc"))

        assert images.find_by_id_and_advert_id(saved.id, advert.id + 1) is None

    def test_find_all_and_delete(self, adverts, images, owner):
        advert = adverts.save_and_flush(_advert(owner))
        first = images.save(ImageData(advert_id=advert.id, name="a", content_type="image/png", payload=b"a"))
        images.save(ImageData(advert_id=advert.id, name="b", content_type="image/png", payload=b"b"))

        assert [i.payload for i in images.find_all_by_advert_id(advert.id)] == [b"a", b"b"]
        assert images.delete(first.id, advert.id) is True
        assert [i.name for i in images.find_all_by_advert_id(advert.id)] == ["b"]
        assert images.find_all_by_advert_id(999) == []


class TestConcurrentViews:
    """Consultations simultanees sur une base fichier (connexions distinctes)."""

    @pytest.fixture
    def file_db(self, tmp_path):
        manager = DatabaseManager(f"sqlite:///{tmp_path / 'views.db'}")
        manager.create_tables()
        yield manager
        manager.engine.dispose()

    def test_concurrent_views_are_all_counted(self, file_db, password_hash):
        users = SqlAlchemyUserRepository(file_db)
        adverts = SqlAlchemyAdvertRepository(file_db)
        owner = users.save(User(email="owner@example.com", password_hash=password_hash))
        visitors = [
            users.save(User(email=f"visitor{i}@example.com", password_hash=password_hash))
            for i in range(2)
        ]
        advert = adverts.save_and_flush(_advert(owner))
        barrier = threading.Barrier(len(visitors))

        def view(visitor):
            barrier.wait()
            return adverts.register_view(advert.id, visitor.id)

        with ThreadPoolExecutor(max_workers=len(visitors)) as pool:
            list(pool.map(view, visitors))

        assert adverts.find_by_id(advert.id).viewing_quantity == 2
        for visitor in visitors:
            assert [a.id for a in adverts.find_viewed_by_user(visitor.id)] == [advert.id]


class TestLoadedColumns:
    """Les lectures courantes ne chargent pas le contenu des images."""

    @pytest.fixture
    def statements(self, db):
        recorded = []

        def record(conn, cursor, statement, parameters, context, executemany):
            recorded.append(statement)

        event.listen(db.engine, "before_cursor_execute", record)
        yield recorded
        event.remove(db.engine, "before_cursor_execute", record)

    def test_advert_listing_skips_image_payloads(self, adverts, images, owner, statements):
        for title in ("A", "B", "C"):
            advert = adverts.save_and_flush(_advert(owner, title=title))
            images.save(ImageData(advert_id=advert.id, name="a.png", content_type="image/png", payload=b"x" * 1000))
        statements.clear()

        listed = adverts.find_all()

        assert all(len(a.image_ids) == 1 for a in listed)
        assert len(statements) == 2
        assert not any("payload" in s for s in statements)

    def test_user_lookup_is_a_single_query(self, users, adverts, owner, statements):
        adverts.save_and_flush(_advert(owner))
        statements.clear()

        users.get_by_id(owner.id)
        users.get_by_email(owner.email)

        assert len(statements) == 2
        assert not any("adverts" in s for s in statements)

    def test_image_lookup_loads_payload(self, adverts, images, owner):
        advert = adverts.save_and_flush(_advert(owner))
        saved = images.save(ImageData(advert_id=advert.id, name="a.png", content_type="image/png", payload=b"abc"))

        assert images.find_by_id_and_advert_id(saved.id, advert.id).payload == b"abc"
