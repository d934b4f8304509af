"""
Quick Click Adverts - Architecture Hexagonale

Structure:
    - domain/: Coeur metier (entites, value objects, ports)
    - application/: Services, DTOs, convertisseurs, securite
    - infrastructure/: Adapters (SQLAlchemy, structlog, container)
    - presentation/: API HTTP (FastAPI)
"""

__version__ = "1.0.0"
