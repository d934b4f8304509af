"""
Base declarative SQLAlchemy partagee par tous les modeles.
"""
from datetime import datetime, timezone

from sqlalchemy.orm import declarative_base

Base = declarative_base()


def utc_now() -> datetime:
    """Horodatage UTC (defaut des colonnes created_date)."""
    return datetime.now(timezone.utc)
