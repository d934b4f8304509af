"""
Conversion modeles SQLAlchemy -> entites du domaine.

Les conversions sont faites dans la session ouverte. Les images
d'une annonce sont chargees sans leur contenu (colonne differee).
"""

from decimal import Decimal

from src.domain.entities.advert import Advert
from src.domain.entities.image_data import ImageData
from src.domain.entities.user import User
from src.domain.value_objects.advert_status import AdvertStatus
from src.domain.value_objects.auth_provider import AuthProvider
from src.domain.value_objects.category import Category
from src.domain.value_objects.currency import Currency
from src.domain.value_objects.role import Role
from src.infrastructure.persistence.models import AdvertModel, ImageDataModel, UserModel


def advert_to_entity(model: AdvertModel) -> Advert:
    """Convertit un AdvertModel en Advert."""
    return Advert(
        id=model.id,
        title=model.title,
        description=model.description,
        category=Category[model.category],
        status=AdvertStatus(model.status),
        phone=model.phone,
        price=Decimal(model.price) if model.price is not None else Decimal("0"),
        first_price_displayed=model.first_price_displayed,
        currency=Currency(model.currency),
        address=model.address,
        created_date=model.created_date,
        user_id=model.user_id,
        viewing_quantity=model.viewing_quantity or 0,
        promoted=model.promoted,
        discounted=model.discounted,
        image_ids=[image.id for image in model.images],
    )


def apply_advert(model: AdvertModel, advert: Advert) -> AdvertModel:
    """Copie les champs modifiables d'une entite vers son modele."""
    model.title = advert.title
    model.description = advert.description
    model.category = advert.category.name
    model.status = advert.status.value
    model.phone = advert.phone
    model.price = advert.price
    model.first_price_displayed = advert.first_price_displayed
    model.currency = advert.currency.value
    model.address = advert.address
    model.user_id = advert.user_id
    model.viewing_quantity = advert.viewing_quantity
    model.promoted = advert.promoted
    model.discounted = advert.discounted
    return model


def user_to_entity(model: UserModel) -> User:
    """Convertit un UserModel en User (sans ses annonces)."""
    return User(
        id=model.id,
        email=model.email,
        password_hash=model.password_hash or "",
        first_name=model.first_name,
        last_name=model.last_name,
        image_url=model.image_url,
        email_verified=model.email_verified,
        provider=AuthProvider(model.provider),
        provider_id=model.provider_id,
        role=Role.from_string(model.role),
        created_date=model.created_date,
    )


def image_to_entity(model: ImageDataModel) -> ImageData:
    """Convertit un ImageDataModel en ImageData."""
    return ImageData(
        id=model.id,
        advert_id=model.advert_id,
        name=model.name,
        content_type=model.content_type,
        payload=bytes(model.payload),
    )
