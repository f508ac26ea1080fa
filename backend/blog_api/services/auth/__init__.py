from blog_api.services.auth.dto import LoginIn, TokenPairOut
from blog_api.services.auth.service import AuthService

__all__ = ["AuthService", "LoginIn", "TokenPairOut"]
