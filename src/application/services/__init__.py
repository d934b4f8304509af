"""
Services applicatifs (orchestration domaine <-> ports).
"""

from src.application.services.advert_registration_service import AdvertRegistrationService
from src.application.services.advert_search_service import AdvertSearchService
from src.application.services.advert_view_service import AdvertViewService
from src.application.services.image_data_service import ImageDataService

__all__ = [
    "AdvertRegistrationService",
    "AdvertSearchService",
    "AdvertViewService",
    "ImageDataService",
]
