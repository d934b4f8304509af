"""
Auth Schemas - Modeles Pydantic pour l'authentification.

Responsabilite unique:
----------------------
Definir les schemas de requete/reponse pour les endpoints auth.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime


class SignUpRequest(BaseModel):
    """
    Requete d'inscription locale.

    Example:
        {"email": "john@example.com", "password": "secret123",
         "first_name": "John", "last_name": "Doe"}
    """

    email: str = Field(..., min_length=5, max_length=255)
    password: str = Field(..., min_length=8)
    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)


class LoginRequest(BaseModel):
    """
    Requete de login.

    Example:
        {"email": "john@example.com", "password": "secret123"}
    """

    email: str = Field(..., min_length=5, max_length=255)
    password: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    """
    Reponse avec tokens JWT.

    Example:
        {
            "access_token": "eyJ...",
            "refresh_token": "eyJ...",
            "token_type": "bearer",
            "expires_in": 1800
        }
    """

    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    expires_in: int


class RefreshRequest(BaseModel):
    """Requete de refresh token."""

    refresh_token: str


class UserResponse(BaseModel):
    """
    Profil utilisateur.

    Retourne par GET /auth/me.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    image_url: Optional[str] = None
    provider: str
    role: str
    created_date: Optional[datetime] = None


class ErrorResponse(BaseModel):
    """Reponse d'erreur standardisee."""

    error: str
    detail: Optional[str] = None
