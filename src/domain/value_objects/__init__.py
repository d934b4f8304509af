"""
Value Objects du domaine.

Les Value Objects sont des objets immuables qui encapsulent
des valeurs avec leur logique de validation.

Caracteristiques:
    - Immuables (enums, frozen dataclasses)
    - Valides par construction
    - Comparaison par valeur
    - Aucun identifiant propre
"""

from src.domain.value_objects.advert_status import AdvertStatus
from src.domain.value_objects.auth_provider import AuthProvider
from src.domain.value_objects.category import Category
from src.domain.value_objects.currency import Currency
from src.domain.value_objects.role import Role, RoleLevel

__all__ = [
    "AdvertStatus",
    "AuthProvider",
    "Category",
    "Currency",
    "Role",
    "RoleLevel",
]
