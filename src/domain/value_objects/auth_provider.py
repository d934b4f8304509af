"""
Value Object AuthProvider - Origine d'un compte utilisateur.

- LOCAL: email + mot de passe
- GOOGLE: compte cree via OAuth2 Google
"""

from enum import Enum


class AuthProvider(Enum):
    """Fournisseurs d'identite connus."""

    LOCAL = "local"
    GOOGLE = "google"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def find(cls, registration_id: str) -> "AuthProvider | None":
        """
        Retrouve un fournisseur depuis son identifiant d'enregistrement.

        La comparaison est insensible a la casse.

        Returns:
            AuthProvider ou None si inconnu.
        """
        if not registration_id:
            return None
        wanted = registration_id.strip().lower()
        for provider in cls:
            if provider.value == wanted:
                return provider
        return None
