"""
Entite Advert - Annonce publiee sur la place de marche.

Une annonce appartient toujours a un utilisateur (proprietaire) et
peut porter plusieurs images.

Attributes:
-----------
- id: Identifiant (attribue par la base)
- title / description: Contenu obligatoire
- category: Rubrique (Category)
- status: Etat de publication (AdvertStatus)
- price / currency: Prix et devise
- viewing_quantity: Nombre de consultations
- promoted / discounted: Mises en avant
- user_id: Proprietaire
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import List, Optional

from src.domain.value_objects.advert_status import AdvertStatus
from src.domain.value_objects.category import Category
from src.domain.value_objects.currency import Currency


@dataclass
class Advert:
    """
    Annonce de la place de marche.

    L'identite d'une annonce est son id: deux annonces avec le meme
    id sont egales, quels que soient leurs autres attributs.

    Example:
        >>> advert = Advert(title="Velo", description="Bon etat")
        >>> advert.is_owned_by(1)
        False
    """

    title: str
    description: str
    id: Optional[int] = None
    category: Category = Category.OTHER
    status: AdvertStatus = AdvertStatus.PUBLISHED
    phone: Optional[str] = None
    price: Decimal = Decimal("0")
    first_price_displayed: bool = False
    currency: Currency = Currency.EUR
    address: Optional[str] = None
    created_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: Optional[int] = None
    viewing_quantity: int = 0
    promoted: bool = False
    discounted: bool = False
    image_ids: List[int] = field(default_factory=list)

    def assign_owner(self, user) -> None:
        """Rattache l'annonce a son proprietaire."""
        self.user_id = user.id

    def is_owned_by(self, user_id: int) -> bool:
        """True si l'annonce appartient a l'utilisateur."""
        return self.user_id is not None and self.user_id == user_id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Advert):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id) if self.id is not None else id(self)
