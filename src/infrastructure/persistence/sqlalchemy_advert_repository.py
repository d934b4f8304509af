"""
SqlAlchemyAdvertRepository - Adapter SQLAlchemy pour les annonces.

Implemente le port AdvertRepository avec SQLAlchemy.
Les tris et limites sont delegues a la base.
"""

from typing import List, Optional

from sqlalchemy import desc, exists, select

from src.domain.entities.advert import Advert
from src.domain.exceptions import PersistenceError, ResourceNotFoundError
from src.domain.ports.advert_repository import AdvertRepository
from src.domain.value_objects.category import Category
from src.infrastructure.persistence.database import DatabaseManager
from src.infrastructure.persistence.errors import translate_errors
from src.infrastructure.persistence.mappers import advert_to_entity, apply_advert
from src.infrastructure.persistence.models import AdvertModel, UserModel, user_viewed_adverts

MAX_VIEWED_LIMIT = 10


class SqlAlchemyAdvertRepository(AdvertRepository):
    """
    Repository SQLAlchemy pour les annonces.

    Attributes:
        db: DatabaseManager pour les sessions.
    """

    def __init__(self, db: DatabaseManager):
        self._db = db

    @translate_errors("find_by_id")
    def find_by_id(self, advert_id: int) -> Optional[Advert]:
        with self._db.get_session() as session:
            model = session.get(AdvertModel, advert_id)
            return advert_to_entity(model) if model else None

    @translate_errors("find_all")
    def find_all(self) -> List[Advert]:
        with self._db.get_session() as session:
            models = session.query(AdvertModel).order_by(AdvertModel.id).all()
            return [advert_to_entity(m) for m in models]

    @translate_errors("save_and_flush")
    def save_and_flush(self, advert: Advert) -> Advert:
        """
        Cree ou met a jour une annonce, puis flush immediat.

        Raises:
            PersistenceError: Annonce a mettre a jour introuvable,
                ou erreur SQLAlchemy.
        """
        with self._db.get_session() as session:
            if advert.id is None:
                model = apply_advert(AdvertModel(created_date=advert.created_date), advert)
                session.add(model)
            else:
                model = session.get(AdvertModel, advert.id)
                if model is None:
                    raise PersistenceError(
                        f"Annonce {advert.id} introuvable", operation="save_and_flush"
                    )
                apply_advert(model, advert)

            session.flush()
            session.refresh(model)
            return advert_to_entity(model)

    @translate_errors("find_all_by_order_by_created_date_desc")
    def find_all_by_order_by_created_date_desc(self) -> List[Advert]:
        with self._db.get_session() as session:
            models = session.query(AdvertModel).order_by(
                desc(AdvertModel.created_date), desc(AdvertModel.id)
            ).all()
            return [advert_to_entity(m) for m in models]

    @translate_errors("find_all_by_user_order_by_created_date_desc")
    def find_all_by_user_order_by_created_date_desc(self, user_id: int) -> List[Advert]:
        with self._db.get_session() as session:
            models = session.query(AdvertModel).filter(
                AdvertModel.user_id == user_id
            ).order_by(
                desc(AdvertModel.created_date), desc(AdvertModel.id)
            ).all()
            return [advert_to_entity(m) for m in models]

    @translate_errors("find_by_category")
    def find_by_category(self, category: Category) -> List[Advert]:
        with self._db.get_session() as session:
            models = session.query(AdvertModel).filter(
                AdvertModel.category == category.name
            ).order_by(AdvertModel.id).all()
            return [advert_to_entity(m) for m in models]

    @translate_errors("find_discounted")
    def find_discounted(self) -> List[Advert]:
        with self._db.get_session() as session:
            models = session.query(AdvertModel).filter(
                AdvertModel.discounted.is_(True)
            ).order_by(AdvertModel.id).all()
            return [advert_to_entity(m) for m in models]

    @translate_errors("find_promoted")
    def find_promoted(self) -> List[Advert]:
        with self._db.get_session() as session:
            models = session.query(AdvertModel).filter(
                AdvertModel.promoted.is_(True)
            ).order_by(AdvertModel.id).all()
            return [advert_to_entity(m) for m in models]

    @translate_errors("find_10_max_viewed")
    def find_10_max_viewed(self) -> List[Advert]:
        with self._db.get_session() as session:
            models = session.query(AdvertModel).order_by(
                desc(AdvertModel.viewing_quantity), AdvertModel.id
            ).limit(MAX_VIEWED_LIMIT).all()
            return [advert_to_entity(m) for m in models]

    @translate_errors("register_view")
    def register_view(self, advert_id: int, user_id: int) -> Optional[Advert]:
        """
        Enregistre une consultation dans une seule transaction.

        Le compteur est incremente par la base (UPDATE ... + 1), le lien
        utilisateur-annonce n'est insere qu'une fois.

        Returns:
            Annonce a jour, ou None si l'annonce est inconnue.

        Raises:
            ResourceNotFoundError: Utilisateur inconnu.
        """
        with self._db.get_session() as session:
            updated = session.query(AdvertModel).filter(
                AdvertModel.id == advert_id
            ).update(
                {AdvertModel.viewing_quantity: AdvertModel.viewing_quantity + 1},
                synchronize_session=False,
            )
            if not updated:
                return None

            if session.get(UserModel, user_id) is None:
                raise ResourceNotFoundError("User", "id", user_id)

            already_viewed = session.scalar(
                select(exists().where(
                    user_viewed_adverts.c.user_id == user_id,
                    user_viewed_adverts.c.advert_id == advert_id,
                ))
            )
            if not already_viewed:
                session.execute(
                    user_viewed_adverts.insert().values(user_id=user_id, advert_id=advert_id)
                )

            return advert_to_entity(session.get(AdvertModel, advert_id))

    @translate_errors("find_viewed_by_user")
    def find_viewed_by_user(self, user_id: int) -> List[Advert]:
        with self._db.get_session() as session:
            models = session.query(AdvertModel).join(
                user_viewed_adverts, user_viewed_adverts.c.advert_id == AdvertModel.id
            ).filter(
                user_viewed_adverts.c.user_id == user_id
            ).order_by(AdvertModel.id).all()
            return [advert_to_entity(m) for m in models]

    @translate_errors("delete")
    def delete(self, advert_id: int) -> bool:
        with self._db.get_session() as session:
            model = session.get(AdvertModel, advert_id)
            if model is None:
                return False
            session.delete(model)
            return True
