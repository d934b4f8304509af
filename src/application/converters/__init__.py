"""
Convertisseurs DTO <-> entites.
"""

from src.application.converters.advert_converters import (
    AdvertCreateDtoConverter,
    AdvertReadDtoConverter,
    AdvertReadWithoutAuthDtoConverter,
)
from src.application.converters.base import TypeConverter

__all__ = [
    "TypeConverter",
    "AdvertCreateDtoConverter",
    "AdvertReadDtoConverter",
    "AdvertReadWithoutAuthDtoConverter",
]
