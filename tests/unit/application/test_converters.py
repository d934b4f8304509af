"""
Tests unitaires pour les convertisseurs d'annonces.
"""

from decimal import Decimal

import pytest

from src.application.dto.advert_dto import (
    AdvertCreateDto,
    AdvertReadDto,
    AdvertReadWithoutAuthDto,
)
from src.domain.exceptions import AdvertRegistrationError
from src.domain.value_objects import AdvertStatus, Category, Currency


class TestAdvertCreateDtoConverter:
    """Tests pour AdvertCreateDtoConverter."""

    def test_convert_maps_strings_to_enums(self, create_converter, create_dto):
        """convert traduit les chaines en enums."""
        advert = create_converter.convert(create_dto)

        assert advert.title == create_dto.title
        assert advert.category is Category.SPORT
        assert advert.currency is Currency.EUR
        assert advert.status is AdvertStatus.PUBLISHED
        assert advert.id is None
        assert advert.user_id is None

    def test_convert_defaults(self, create_converter):
        advert = create_converter.convert(
            AdvertCreateDto(title="T", description="D", category="books")
        )

        assert advert.price == Decimal("0")
        assert advert.currency is Currency.EUR

    def test_convert_price_from_string(self, create_converter, create_dto):
        create_dto.price = " 120.50 "

        assert create_converter.convert(create_dto).price == Decimal("120.50")

    @pytest.mark.parametrize("field,value", [
        ("category", "bogus"),
        ("category", None),
        ("status", "sold"),
        ("currency", "BTC"),
        ("category", 42),
        ("currency", 5),
        ("price", Decimal("-1")),
        ("price", "abc"),
        ("price", "NaN"),
        ("price", Decimal("10000000000")),
        ("title", "   "),
        ("title", 12),
        ("title", "x" * 256),
        ("phone", "0" * 51),
        ("address", "a" * 256),
        ("description", ""),
    ])
    def test_convert_invalid_raises(self, create_converter, create_dto, field, value):
        """Toute valeur non convertible leve AdvertRegistrationError."""
        setattr(create_dto, field, value)

        with pytest.raises(AdvertRegistrationError) as exc_info:
            create_converter.convert(create_dto)

        assert exc_info.value.field == field

    def test_convert_none_raises(self, create_converter):
        with pytest.raises(AdvertRegistrationError):
            create_converter.convert(None)


class TestReadConverters:
    """Tests pour les convertisseurs de lecture."""

    def test_read_dto_contains_private_fields(self, read_converter, sample_advert):
        dto = read_converter.convert(sample_advert)

        assert isinstance(dto, AdvertReadDto)
        assert dto.phone == sample_advert.phone
        assert dto.user_id == sample_advert.user_id
        assert dto.category == "SPORT"

    def test_public_dto_omits_private_fields(self, public_converter, sample_advert):
        dto = public_converter.convert(sample_advert)

        assert isinstance(dto, AdvertReadWithoutAuthDto)
        assert not hasattr(dto, "phone")
        assert not hasattr(dto, "user_id")

    def test_read_dtos_compare_by_id(self, read_converter, sample_advert):
        """Les DTOs de lecture sont egaux a id egal."""
        first = read_converter.convert(sample_advert)
        sample_advert.title = "Autre titre"
        second = read_converter.convert(sample_advert)

        assert first == second
        assert len({first, second}) == 1
