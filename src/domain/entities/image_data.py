"""
Entite ImageData - Image rattachee a une annonce.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class ImageData:
    """
    Image stockee en base.

    Attributes:
        advert_id: Annonce proprietaire (obligatoire).
        name: Nom du fichier d'origine.
        content_type: Type MIME (image/png, image/jpeg...).
        payload: Contenu binaire.
        id: Identifiant attribue par la base.
    """

    advert_id: int
    name: str
    content_type: str
    payload: bytes
    id: Optional[int] = None

    @property
    def size(self) -> int:
        """Taille du contenu en octets."""
        return len(self.payload)
