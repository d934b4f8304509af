"""
Advert Schemas - Modeles Pydantic pour les annonces.

Responsabilite unique:
----------------------
Definir les schemas de requete/reponse des endpoints annonces.
Les enums circulent en chaines; leur validation est faite par
le convertisseur de creation.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict

from src.application.dto.advert_dto import AdvertCreateDto


class AdvertCreateRequest(BaseModel):
    """
    Requete de creation d'annonce.

    Aucune contrainte de valeur au niveau du schema: l'absence de titre
    ou de description est traitee par le controleur ("Please fill all
    fields"), les valeurs invalides (prix, longueurs) par le
    convertisseur, soit une reponse 400 et non 422.

    Example:
        {"title": "Velo", "description": "Bon etat", "category": "sport",
         "price": "120.00", "currency": "EUR"}
    """

    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    status: Optional[str] = None
    phone: Optional[str] = None
    price: Union[Decimal, str, None] = None
    first_price_displayed: bool = False
    currency: Optional[str] = None
    address: Optional[str] = None
    promoted: bool = False
    discounted: bool = False

    def to_dto(self) -> AdvertCreateDto:
        return AdvertCreateDto(**self.model_dump())


class AdvertPublicResponse(BaseModel):
    """Vue publique d'une annonce (sans telephone ni proprietaire)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
    category: str
    status: str
    price: Decimal
    first_price_displayed: bool
    currency: str
    address: Optional[str] = None
    created_date: datetime
    viewing_quantity: int = 0
    promoted: bool = False
    discounted: bool = False
    image_ids: List[int] = []


class AdvertResponse(AdvertPublicResponse):
    """Vue complete d'une annonce."""

    phone: Optional[str] = None
    user_id: Optional[int] = None


class MessageResponse(BaseModel):
    """Reponse texte simple."""

    message: str
