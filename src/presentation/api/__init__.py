"""
API REST - FastAPI.

Presentation layer de la place de marche d'annonces.
Utilise JWT pour l'authentification.

Routers disponibles:
--------------------
- adverts: Recherche, publication et consultation d'annonces
- images: Images d'une annonce
- auth: Inscription, login, refresh token
- oauth: Login OAuth2 (Google)

Usage:
------
    uvicorn src.presentation.api.main:app --reload
"""
