"""
DTOs d'annonces - Objets de transport entre presentation et services.

- AdvertCreateDto: donnees brutes d'entree (chaines, non validees)
- AdvertReadDto: vue complete (proprietaire, pages privees)
- AdvertReadWithoutAuthDto: vue publique, sans telephone ni proprietaire

Les DTOs de lecture sont compares et hashes par id d'annonce.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Union


@dataclass
class AdvertCreateDto:
    """
    Donnees de creation d'une annonce.

    Les enums sont transportees en chaines; la conversion
    est faite par AdvertCreateDtoConverter.
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


@dataclass(eq=False)
class AdvertReadWithoutAuthDto:
    """Vue publique d'une annonce."""

    id: int
    title: str
    description: str
    category: str
    status: str
    price: Decimal
    first_price_displayed: bool
    currency: str
    address: Optional[str]
    created_date: datetime
    viewing_quantity: int = 0
    promoted: bool = False
    discounted: bool = False
    image_ids: List[int] = field(default_factory=list)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AdvertReadWithoutAuthDto):
            return self.id == other.id
        return False

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass(eq=False)
class AdvertReadDto(AdvertReadWithoutAuthDto):
    """Vue complete d'une annonce (telephone et proprietaire inclus)."""

    phone: Optional[str] = None
    user_id: Optional[int] = None

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AdvertReadDto):
            return self.id == other.id
        return False

    def __hash__(self) -> int:
        return hash(self.id)
