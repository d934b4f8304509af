"""
SqlAlchemyUserRepository - Adapter SQLAlchemy pour les utilisateurs.

Implemente le port UserRepository avec SQLAlchemy.
Responsabilite unique: lecture/ecriture des utilisateurs.

La verification des mots de passe est geree par UserLoginService,
pas ici.
"""

from typing import Optional

from src.domain.entities.user import User
from src.domain.ports.user_repository import UserRepository
from src.infrastructure.persistence.database import DatabaseManager
from src.infrastructure.persistence.errors import translate_errors
from src.infrastructure.persistence.mappers import user_to_entity
from src.infrastructure.persistence.models import UserModel


class SqlAlchemyUserRepository(UserRepository):
    """
    Repository SQLAlchemy pour les utilisateurs.

    Attributes:
        db: DatabaseManager pour les sessions.
    """

    def __init__(self, db: DatabaseManager):
        """
        Initialise le repository.

        Args:
            db: Instance DatabaseManager.
        """
        self._db = db

    @translate_errors("save_user")
    def save(self, user: User) -> User:
        """
        Persiste un utilisateur.

        Cree ou met a jour selon l'existence.
        """
        with self._db.get_session() as session:
            existing = None
            if user.id is not None:
                existing = session.get(UserModel, user.id)

            if existing:
                # Update
                existing.email = user.email.lower()
                existing.password_hash = user.password_hash
                existing.first_name = user.first_name
                existing.last_name = user.last_name
                existing.image_url = user.image_url
                existing.email_verified = user.email_verified
                existing.provider = user.provider.value
                existing.provider_id = user.provider_id
                existing.role = user.role.name
                model = existing
            else:
                # Create
                model = UserModel(
                    email=user.email.lower(),
                    password_hash=user.password_hash,
                    first_name=user.first_name,
                    last_name=user.last_name,
                    image_url=user.image_url,
                    email_verified=user.email_verified,
                    provider=user.provider.value,
                    provider_id=user.provider_id,
                    role=user.role.name,
                    created_date=user.created_date,
                )
                session.add(model)

            session.flush()
            session.refresh(model)
            return user_to_entity(model)

    @translate_errors("get_user_by_id")
    def get_by_id(self, user_id: int) -> Optional[User]:
        """Recupere par ID."""
        with self._db.get_session() as session:
            model = session.get(UserModel, user_id)
            return user_to_entity(model) if model else None

    @translate_errors("get_user_by_email")
    def get_by_email(self, email: str) -> Optional[User]:
        """Recupere par email."""
        if not email:
            return None
        with self._db.get_session() as session:
            model = session.query(UserModel).filter(
                UserModel.email == email.strip().lower()
            ).first()
            return user_to_entity(model) if model else None

    @translate_errors("exists_by_email")
    def exists_by_email(self, email: str) -> bool:
        """Verifie l'existence d'un email."""
        with self._db.get_session() as session:
            return session.query(UserModel.id).filter(
                UserModel.email == email.strip().lower()
            ).first() is not None
