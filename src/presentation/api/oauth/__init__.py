"""
OAuth API - Authentification OAuth2.

Endpoints (voir router):
------------------------
- GET /oauth2/authorize/{provider}: Redirect vers le fournisseur
- GET /oauth2/callback/{provider}: Callback, retourne les tokens
"""
