"""
Auth API - Authentification JWT.

Endpoints (voir router):
------------------------
- POST /auth/signup: Creer un compte local
- POST /auth/login: Obtenir un access token
- POST /auth/refresh: Rafraichir le token
- GET /auth/me: Profil utilisateur courant

Le router est importe depuis src.presentation.api.auth.router;
dependencies importe jwt_service depuis ce paquet.
"""

from src.presentation.api.auth.jwt_service import JWTService, TokenPayload

__all__ = ["JWTService", "TokenPayload"]
