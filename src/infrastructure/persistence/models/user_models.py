"""
Modeles SQLAlchemy pour les utilisateurs.

Tables:
-------
- users: Utilisateurs (locaux ou OAuth2)
- user_viewed_adverts: Annonces consultees (many-to-many)

Securite:
---------
- Mots de passe hashes avec bcrypt
- password_hash vide pour les comptes OAuth2
"""
from sqlalchemy import (
    Boolean, Column, DateTime, ForeignKey, Index, Integer, String, Table,
)
from sqlalchemy.orm import relationship

from src.infrastructure.persistence.models.base import Base, utc_now


user_viewed_adverts = Table(
    "user_viewed_adverts",
    Base.metadata,
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("advert_id", Integer, ForeignKey("adverts.id", ondelete="CASCADE"), primary_key=True),
)


class UserModel(Base):
    """
    Table users - Utilisateurs de la place de marche.

    Colonnes:
        id: Identifiant auto-incremente
        email: Adresse email (unique, minuscules)
        password_hash: Hash bcrypt (vide si OAuth2)
        first_name / last_name: Identite
        image_url: Avatar
        email_verified: Email confirme (toujours vrai en OAuth2)
        provider: local ou google
        provider_id: Identifiant chez le fournisseur
        role: user ou admin
        created_date: Date d'inscription
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False, default="")
    first_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=True)
    image_url = Column(String(500), nullable=True)
    email_verified = Column(Boolean, default=False, nullable=False)
    provider = Column(String(20), nullable=False, default="local")
    provider_id = Column(String(255), nullable=True)
    role = Column(String(20), nullable=False, default="user")
    created_date = Column(DateTime(timezone=True), default=utc_now)

    adverts = relationship("AdvertModel", back_populates="user")

    __table_args__ = (
        Index('idx_users_provider', 'provider', 'provider_id'),
    )
