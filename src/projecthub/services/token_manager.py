"""Persisted auth token and cached user profile.

Two entries per profile, stored in one JSON document under the platform data
dir: ``auth_token`` (an opaque string handed out by the backend) and
``auth_user`` (the serialized user returned alongside it).
"""

from __future__ import annotations

import base64
import json
from datetime import UTC, datetime
from functools import lru_cache
from json import JSONDecodeError
from pathlib import Path

from platformdirs import user_data_dir
from pydantic import BaseModel, ValidationError

from projecthub.models import User
from projecthub.utils.logger import get_logger

TOKEN_KEY = "auth_token"
USER_KEY = "auth_user"

logger = get_logger("auth")


class Session(BaseModel):
    """Explicit session handed to API clients instead of ambient lookups."""

    token: str | None = None
    user: User | None = None

    @property
    def authorization(self) -> str | None:
        """Value for the ``Authorization`` header, if a token is present."""
        return f"Bearer {self.token}" if self.token else None


def token_expiry(token: str) -> datetime | None:
    """Return the ``exp`` claim of a JWT, or None for opaque tokens.

    The signature is not checked; only the backend can do that.
    """
    parts = token.split(".")
    if len(parts) != 3:
        return None
    payload = parts[1] + "=" * (-len(parts[1]) % 4)
    try:
        claims = json.loads(base64.urlsafe_b64decode(payload))
        exp = claims["exp"]
        return datetime.fromtimestamp(float(exp), tz=UTC)
    except (ValueError, TypeError, KeyError, OverflowError, JSONDecodeError):
        return None


class TokenManager:
    """Key/value token store for one profile."""

    def __init__(self, profile: str = "default", storage_dir: Path | None = None):
        self.profile = profile
        self.storage_dir = storage_dir or Path(user_data_dir("projecthub")) / "storage"
        self.storage_path = self.storage_dir / f"{profile}.json"

    def _read(self) -> dict:
        if not self.storage_path.exists():
            return {}
        try:
            with open(self.storage_path, encoding="utf-8") as f:
                data = json.load(f)
        except JSONDecodeError:
            logger.warning("token store %s is corrupt; treating as empty", self.storage_path)
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict) -> None:
        self.storage_dir.mkdir(parents=True, exist_ok=True)
        with open(self.storage_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        self.storage_path.chmod(0o600)

    def set_token(self, token: str) -> None:
        data = self._read()
        data[TOKEN_KEY] = token
        self._write(data)

    def get_token(self) -> str | None:
        token = self._read().get(TOKEN_KEY)
        return token if isinstance(token, str) and token else None

    def remove_token(self) -> None:
        """Remove the token and the cached user."""
        data = self._read()
        data.pop(TOKEN_KEY, None)
        data.pop(USER_KEY, None)
        if data:
            self._write(data)
        elif self.storage_path.exists():
            self.storage_path.unlink()

    def set_user(self, user: User) -> None:
        data = self._read()
        data[USER_KEY] = user.model_dump_json(by_alias=True, exclude_none=True)
        self._write(data)

    def get_user(self) -> User | None:
        raw = self._read().get(USER_KEY)
        if not raw:
            return None
        try:
            return User.model_validate_json(raw)
        except ValidationError:
            return None

    def is_authenticated(self) -> bool:
        """True while a token is stored and, if it is a JWT, not yet expired."""
        token = self.get_token()
        if not token:
            return False
        expires_at = token_expiry(token)
        if expires_at is not None and expires_at <= datetime.now(tz=UTC):
            logger.info("stored token for profile %s expired at %s", self.profile, expires_at)
            return False
        return True

    def logout(self) -> None:
        self.remove_token()

    def session(self) -> Session:
        return Session(token=self.get_token(), user=self.get_user())


@lru_cache(maxsize=4)
def get_token_manager(profile: str | None = None) -> TokenManager:
    """Get a cached TokenManager for *profile* (the configured one by default)."""
    if profile is None:
        from projecthub.services.config_service import get_config_service

        profile = get_config_service().config.profile
    return TokenManager(profile)
