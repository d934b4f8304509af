"""
Exceptions metier du domaine.

Ces exceptions representent des violations des regles metier
et sont independantes de l'infrastructure.

Taxonomie:
----------
- ResourceNotFoundError: ressource introuvable (404)
- AuthorizationError: acces refuse / principal non resolu (403)
- InvalidArgumentError: argument invalide (400)
    - InvalidCategoryError, InvalidImageError, EmailAlreadyUsedError
- AdvertRegistrationError: donnees d'annonce non convertibles (400)
- PersistenceError: echec du stockage
- AuthenticationError: echec d'authentification (401)
    - OAuth2AuthenticationProcessingError, UsernameNotFoundError,
      BadCredentialsError
"""

from typing import Any


class DomainException(Exception):
    """Exception de base pour toutes les erreurs du domaine."""

    def __init__(self, message: str, code: str | None = None) -> None:
        """
        Initialise une exception du domaine.

        Args:
            message: Message d'erreur descriptif.
            code: Code d'erreur optionnel pour identification programmatique.
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ResourceNotFoundError(DomainException):
    """Leve quand une ressource n'est pas trouvee."""

    def __init__(self, resource_name: str, field_name: str, field_value: Any) -> None:
        super().__init__(
            f"{resource_name} non trouve avec {field_name}: '{field_value}'",
            code="RESOURCE_NOT_FOUND"
        )
        self.resource_name = resource_name
        self.field_name = field_name
        self.field_value = field_value


class AuthorizationError(DomainException):
    """Leve quand l'appelant n'a pas le droit d'agir sur la ressource."""

    def __init__(self, message: str = "Unauthorized access") -> None:
        super().__init__(message, code="UNAUTHORIZED")


class InvalidArgumentError(DomainException):
    """Leve quand un argument fourni par l'appelant est invalide."""

    def __init__(self, message: str, code: str = "INVALID_ARGUMENT") -> None:
        super().__init__(message, code=code)


class InvalidCategoryError(InvalidArgumentError):
    """Leve quand une categorie ne correspond a aucune valeur connue."""

    def __init__(self, value: Any) -> None:
        super().__init__(
            f"Categorie inexistante: {value}",
            code="INVALID_CATEGORY"
        )
        self.invalid_value = value


class InvalidImageError(InvalidArgumentError):
    """Leve quand un fichier image est refuse (type ou taille)."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Image refusee: {reason}", code="INVALID_IMAGE")
        self.reason = reason


class EmailAlreadyUsedError(InvalidArgumentError):
    """Leve quand un email est deja associe a un compte."""

    def __init__(self, email: str) -> None:
        super().__init__(
            f"Email deja utilise: '{email}'",
            code="EMAIL_ALREADY_USED"
        )
        self.email = email


class AdvertRegistrationError(DomainException):
    """Leve quand les donnees d'une annonce ne peuvent pas etre enregistrees."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="ADVERT_REGISTRATION_ERROR")
        self.field = field


class PersistenceError(DomainException):
    """Leve quand le stockage echoue (connexion, contrainte, etc.)."""

    def __init__(self, message: str, operation: str | None = None) -> None:
        full_message = message
        if operation:
            full_message = f"Operation '{operation}': {message}"
        super().__init__(full_message, code="PERSISTENCE_ERROR")
        self.operation = operation


class AuthenticationError(DomainException):
    """Exception de base pour les echecs d'authentification."""


class OAuth2AuthenticationProcessingError(AuthenticationError):
    """Leve quand le flux OAuth2 ne peut pas aboutir."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="OAUTH2_PROCESSING_ERROR")


class UsernameNotFoundError(AuthenticationError):
    """Leve quand aucun utilisateur ne correspond a l'email de connexion."""

    def __init__(self, email: str) -> None:
        super().__init__(
            f"Username not found with email: {email}",
            code="USERNAME_NOT_FOUND"
        )
        self.email = email


class BadCredentialsError(AuthenticationError):
    """Leve quand le mot de passe ne correspond pas."""

    def __init__(self) -> None:
        super().__init__("Identifiants incorrects", code="BAD_CREDENTIALS")
