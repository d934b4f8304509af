"""
Presentation Layer - API HTTP.

Cette couche expose les services applicatifs via FastAPI
(voir src.presentation.api).
"""
