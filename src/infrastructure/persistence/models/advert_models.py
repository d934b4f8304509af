"""
Modeles SQLAlchemy pour les annonces et leurs images.

Tables:
-------
- adverts: Annonces
- image_data: Images (contenu binaire) rattachees a une annonce
"""
from sqlalchemy import (
    Boolean, Column, DateTime, ForeignKey, Index, Integer, LargeBinary,
    Numeric, String, Text,
)
from sqlalchemy.orm import deferred, relationship

from src.infrastructure.persistence.models.base import Base, utc_now


class AdvertModel(Base):
    """
    Table adverts - Annonces publiees.

    Colonnes:
        id: Identifiant auto-incremente
        title / description: Contenu (obligatoires)
        category: Nom de la Category
        status: DRAFT, PUBLISHED, ARCHIVED
        price / currency: Prix et devise ISO
        viewing_quantity: Compteur de consultations
        promoted / discounted: Mises en avant
        user_id: Proprietaire (obligatoire)
    """
    __tablename__ = "adverts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String(50), nullable=False, index=True)
    status = Column(String(20), nullable=False, default="PUBLISHED")
    phone = Column(String(50), nullable=True)
    price = Column(Numeric(12, 2), nullable=False, default=0)
    first_price_displayed = Column(Boolean, default=False, nullable=False)
    currency = Column(String(3), nullable=False, default="EUR")
    address = Column(String(255), nullable=True)
    created_date = Column(DateTime(timezone=True), default=utc_now, nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    viewing_quantity = Column(Integer, default=0, nullable=False)
    promoted = Column(Boolean, default=False, nullable=False)
    discounted = Column(Boolean, default=False, nullable=False)

    user = relationship("UserModel", back_populates="adverts")
    images = relationship(
        "ImageDataModel",
        back_populates="advert",
        cascade="all, delete-orphan",
        order_by="ImageDataModel.id",
        lazy="selectin",
    )

    __table_args__ = (
        Index('idx_adverts_created', 'created_date'),
        Index('idx_adverts_viewing', 'viewing_quantity'),
    )


class ImageDataModel(Base):
    """
    Table image_data - Images d'annonces.

    Colonnes:
        id: Identifiant auto-incremente
        advert_id: Annonce proprietaire
        name: Nom du fichier d'origine
        content_type: Type MIME
        payload: Contenu binaire (differe)
    """
    __tablename__ = "image_data"

    id = Column(Integer, primary_key=True, autoincrement=True)
    advert_id = Column(
        Integer, ForeignKey("adverts.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(String(255), nullable=False)
    content_type = Column(String(100), nullable=False)
    # Contenu charge uniquement a la demande (undefer)
    payload = deferred(Column(LargeBinary, nullable=False))

    advert = relationship("AdvertModel", back_populates="images")
