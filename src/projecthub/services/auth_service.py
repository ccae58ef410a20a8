"""Service for handling authentication-related operations."""

from __future__ import annotations

from projecthub.models import SignupResponse, User
from projecthub.services.api.auth import AuthAPI
from projecthub.services.api.errors import AuthenticationRequired
from projecthub.services.token_manager import TokenManager, get_token_manager
from projecthub.utils.logger import get_logger

logger = get_logger("auth")


class AuthService:
    """Login, signup and logout on top of the token store."""

    def __init__(self, auth_api: AuthAPI, token_manager: TokenManager | None = None):
        self.auth_api = auth_api
        self.token_manager = token_manager or get_token_manager()

    async def login(self, email: str, password: str) -> User:
        """Log in and persist the returned token and user."""
        result = await self.auth_api.login(email, password)
        self.token_manager.set_token(result.access_token)
        self.token_manager.set_user(result.user)
        logger.info("logged in as %s (profile %s)", result.user.email, self.token_manager.profile)
        return result.user

    async def signup(self, name: str, email: str, password: str) -> SignupResponse:
        return await self.auth_api.register(name, email, password)

    def logout(self) -> None:
        """Clear both the stored token and the stored user."""
        self.token_manager.logout()
        logger.info("logged out (profile %s)", self.token_manager.profile)

    async def current_user(self, refresh: bool = False) -> User:
        """Return the cached user, or fetch ``/users/me`` when asked or missing."""
        if not self.token_manager.is_authenticated():
            raise AuthenticationRequired()
        user = None if refresh else self.token_manager.get_user()
        if user is None:
            user = await self.auth_api.get_current_user()
            self.token_manager.set_user(user)
        return user
