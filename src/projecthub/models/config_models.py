"""Configuration models for the ProjectHub CLI and proxy server."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

DEFAULT_API_ENDPOINT = "http://localhost:8000"
DEFAULT_BACKEND_URL = "http://localhost:3000"


class APIConfig(BaseModel):
    """Where the CLI sends its requests (the proxy origin)."""

    endpoint: str = Field(default=DEFAULT_API_ENDPOINT)
    timeout: int = Field(default=30)

    @field_validator("endpoint")
    @classmethod
    def strip_endpoint(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("endpoint cannot be empty")
        return v.strip().rstrip("/")


class ProxyConfig(BaseModel):
    """Proxy server configuration."""

    backend_url: str = Field(default=DEFAULT_BACKEND_URL)
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8000, ge=1, le=65535)

    @field_validator("backend_url")
    @classmethod
    def strip_backend_url(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("backend_url cannot be empty")
        return v.strip().rstrip("/")


class OutputConfig(BaseModel):
    """Output configuration."""

    format: str = Field(default="pretty")
    compact: bool = Field(default=False)


class AppConfig(BaseModel):
    """Main ProjectHub configuration"""

    profile: str = Field(default="default", description="Active token-store profile")

    api: APIConfig = Field(default_factory=APIConfig)
    proxy: ProxyConfig = Field(default_factory=ProxyConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
