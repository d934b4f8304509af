"""
Image Schemas - Modeles Pydantic pour les images d'annonces.
"""

from pydantic import BaseModel


class ImageResponse(BaseModel):
    """
    Metadonnees d'une image televersee.

    Example:
        {"id": 3, "advert_id": 12, "name": "velo.png",
         "content_type": "image/png", "size": 20480}
    """

    id: int
    advert_id: int
    name: str
    content_type: str
    size: int


class ImageListResponse(BaseModel):
    """Contenus des images d'une annonce, encodes en base64."""

    advert_id: int
    images: list[str]
