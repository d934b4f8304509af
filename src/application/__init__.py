"""
Application Layer - Orchestration des services.

Cette couche contient:
    - dto/: Data Transfer Objects
    - converters/: Conversion DTO <-> entites
    - services/: Services annonces et images
    - security/: Login, inscription, OAuth2, principaux

Principes:
    - Depend du domaine et de ses ports
    - Repositories injectes par constructeur
    - Logger injectable (structlog par defaut)
"""

__all__ = []
