"""Authentication API endpoints."""

from projecthub.models import (
    AuthResponse,
    LoginRequest,
    SignupRequest,
    SignupResponse,
    User,
)
from projecthub.services.api.client import APIClient


class AuthAPI:
    """Authentication API client."""

    def __init__(self, client: APIClient):
        self.client = client

    async def login(self, email: str, password: str) -> AuthResponse:
        """Login with email and password."""
        payload = LoginRequest(email=email, password=password)
        data = await self.client.post("/api/auth/login", json=payload.to_wire(), skip_auth=True)
        return AuthResponse.model_validate(data)

    async def register(self, name: str, email: str, password: str) -> SignupResponse:
        """Create an account."""
        payload = SignupRequest(name=name, email=email, password=password)
        data = await self.client.post("/api/auth/signup", json=payload.to_wire(), skip_auth=True)
        return SignupResponse.model_validate(data)

    async def get_current_user(self) -> User:
        """Get current user profile."""
        data = await self.client.get("/api/users/me")
        return User.model_validate(data)
