"""
Domain Layer - Coeur metier de l'application.

Ce module contient:
    - entities/: Entites du domaine (Advert, User, ImageData)
    - value_objects/: Objets valeur immuables (Category, Currency, Role)
    - ports/: Contrats des repositories
    - exceptions: Exceptions metier

Principes:
    - AUCUNE dependance vers les couches externes
    - Logique metier pure
    - Testable sans infrastructure
"""

from src.domain.exceptions import (
    AdvertRegistrationError,
    AuthenticationError,
    AuthorizationError,
    DomainException,
    InvalidArgumentError,
    InvalidCategoryError,
    PersistenceError,
    ResourceNotFoundError,
)

__all__ = [
    "DomainException",
    "ResourceNotFoundError",
    "AuthorizationError",
    "InvalidArgumentError",
    "InvalidCategoryError",
    "AdvertRegistrationError",
    "PersistenceError",
    "AuthenticationError",
]
