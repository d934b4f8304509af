"""
Convertisseurs d'annonces.

Responsabilite unique:
----------------------
Traduire les DTOs d'annonces en entites et inversement.
Aucun acces aux repositories ici.

Conversions:
------------
- AdvertCreateDtoConverter: AdvertCreateDto -> Advert
  Leve AdvertRegistrationError pour toute valeur non convertible.
- AdvertReadDtoConverter: Advert -> AdvertReadDto
- AdvertReadWithoutAuthDtoConverter: Advert -> AdvertReadWithoutAuthDto
"""

from decimal import Decimal, InvalidOperation
from typing import Optional

from src.application.converters.base import TypeConverter
from src.application.dto.advert_dto import (
    AdvertCreateDto,
    AdvertReadDto,
    AdvertReadWithoutAuthDto,
)
from src.domain.entities.advert import Advert
from src.domain.exceptions import AdvertRegistrationError, InvalidCategoryError
from src.domain.value_objects.advert_status import AdvertStatus
from src.domain.value_objects.category import Category
from src.domain.value_objects.currency import Currency

# Longueurs des colonnes de la table adverts
TITLE_MAX_LENGTH = 255
PHONE_MAX_LENGTH = 50
ADDRESS_MAX_LENGTH = 255
# Numeric(12, 2)
PRICE_MAX = Decimal("9999999999.99")


class AdvertCreateDtoConverter(TypeConverter[AdvertCreateDto, Advert]):
    """
    Construit une entite Advert depuis un DTO de creation.

    Regles:
        - title et description non vides
        - category obligatoire et connue (insensible a la casse)
        - status optionnel (defaut PUBLISHED)
        - currency optionnelle (defaut EUR)
        - price >= 0 (defaut 0)
        - longueurs bornees par les colonnes (titre, telephone, adresse)
    """

    def convert(self, source: AdvertCreateDto) -> Advert:
        if source is None:
            raise AdvertRegistrationError("Annonce absente")

        title = self._text(source.title, "title", TITLE_MAX_LENGTH)
        if not title:
            raise AdvertRegistrationError("Le titre est obligatoire", field="title")

        description = self._text(source.description, "description")
        if not description:
            raise AdvertRegistrationError(
                "La description est obligatoire", field="description"
            )

        return Advert(
            title=title,
            description=description,
            category=self._category(source.category),
            status=self._status(source.status),
            phone=self._text(source.phone, "phone", PHONE_MAX_LENGTH) or None,
            price=self._price(source.price),
            first_price_displayed=bool(source.first_price_displayed),
            currency=self._currency(source.currency),
            address=self._text(source.address, "address", ADDRESS_MAX_LENGTH) or None,
            promoted=bool(source.promoted),
            discounted=bool(source.discounted),
        )

    @staticmethod
    def _text(value, field: str, max_length: Optional[int] = None) -> str:
        if value is None:
            return ""
        if not isinstance(value, str):
            raise AdvertRegistrationError(f"Valeur invalide pour {field}", field=field)
        value = value.strip()
        if max_length is not None and len(value) > max_length:
            raise AdvertRegistrationError(
                f"{field}: {max_length} caracteres maximum", field=field
            )
        return value

    @staticmethod
    def _category(value) -> Category:
        try:
            return Category.from_string(value)
        except InvalidCategoryError as e:
            raise AdvertRegistrationError(e.message, field="category") from e

    @staticmethod
    def _status(value) -> AdvertStatus:
        if not value:
            return AdvertStatus.PUBLISHED
        try:
            return AdvertStatus.from_string(value)
        except ValueError as e:
            raise AdvertRegistrationError(str(e), field="status") from e

    @staticmethod
    def _currency(value) -> Currency:
        if not value:
            return Currency.EUR
        try:
            return Currency.from_string(value)
        except ValueError as e:
            raise AdvertRegistrationError(str(e), field="currency") from e

    @staticmethod
    def _price(value) -> Decimal:
        if value is None:
            return Decimal("0")
        try:
            price = Decimal(str(value))
        except InvalidOperation as e:
            raise AdvertRegistrationError(f"Prix invalide: {value}", field="price") from e
        if not price.is_finite():
            raise AdvertRegistrationError(f"Prix invalide: {value}", field="price")
        if price < 0:
            raise AdvertRegistrationError(f"Prix negatif: {value}", field="price")
        if price > PRICE_MAX:
            raise AdvertRegistrationError(f"Prix trop eleve: {value}", field="price")
        return price


class AdvertReadWithoutAuthDtoConverter(TypeConverter[Advert, AdvertReadWithoutAuthDto]):
    """Projette une annonce vers sa vue publique."""

    def convert(self, source: Advert) -> AdvertReadWithoutAuthDto:
        return AdvertReadWithoutAuthDto(
            id=source.id,
            title=source.title,
            description=source.description,
            category=str(source.category),
            status=str(source.status),
            price=source.price,
            first_price_displayed=source.first_price_displayed,
            currency=str(source.currency),
            address=source.address,
            created_date=source.created_date,
            viewing_quantity=source.viewing_quantity,
            promoted=source.promoted,
            discounted=source.discounted,
            image_ids=list(source.image_ids),
        )


class AdvertReadDtoConverter(TypeConverter[Advert, AdvertReadDto]):
    """Projette une annonce vers sa vue complete."""

    def convert(self, source: Advert) -> AdvertReadDto:
        return AdvertReadDto(
            id=source.id,
            title=source.title,
            description=source.description,
            category=str(source.category),
            status=str(source.status),
            price=source.price,
            first_price_displayed=source.first_price_displayed,
            currency=str(source.currency),
            address=source.address,
            created_date=source.created_date,
            viewing_quantity=source.viewing_quantity,
            promoted=source.promoted,
            discounted=source.discounted,
            image_ids=list(source.image_ids),
            phone=source.phone,
            user_id=source.user_id,
        )
