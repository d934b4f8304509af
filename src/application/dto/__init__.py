"""
DTOs de la couche application.
"""

from src.application.dto.advert_dto import (
    AdvertCreateDto,
    AdvertReadDto,
    AdvertReadWithoutAuthDto,
)

__all__ = [
    "AdvertCreateDto",
    "AdvertReadDto",
    "AdvertReadWithoutAuthDto",
]
