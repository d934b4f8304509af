"""
Securite applicative: principaux, login local, inscription et OAuth2.
"""

from src.application.security.oauth2_user_info import (
    GoogleOAuth2UserInfo,
    OAuth2UserInfo,
    OAuth2UserInfoFactory,
)
from src.application.security.oauth2_user_service import OAuth2UserService
from src.application.security.principal import AuthenticatedUser, UserPrincipal
from src.application.security.user_login_service import UserLoginService
from src.application.security.user_registration_service import UserRegistrationService

__all__ = [
    "AuthenticatedUser",
    "UserPrincipal",
    "OAuth2UserInfo",
    "GoogleOAuth2UserInfo",
    "OAuth2UserInfoFactory",
    "OAuth2UserService",
    "UserLoginService",
    "UserRegistrationService",
]
