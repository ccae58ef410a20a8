"""Request payloads sent to the backend.

These carry the basic schema checks the forms perform before submitting;
everything else is validated by the backend.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import EmailStr, Field, StringConstraints, field_validator

from .core import Role, TaskStatus, WireModel

ProjectName = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=3, max_length=100),
]
ProjectDescription = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=10, max_length=500),
]


class LoginRequest(WireModel):
    """Credentials for ``/auth/login``."""

    email: EmailStr
    password: str = Field(min_length=1)


class SignupRequest(WireModel):
    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
    email: EmailStr
    password: str = Field(min_length=1)


class ProjectCreate(WireModel):
    """Model for creating a new project.

    Attributes:
        name: 3-100 characters, surrounding whitespace trimmed
        description: 10-500 characters, surrounding whitespace trimmed
    """

    name: ProjectName
    description: ProjectDescription


class ProjectUpdate(WireModel):
    """Model for updating a project; only provided fields are sent."""

    name: ProjectName | None = None
    description: ProjectDescription | None = None


class InviteRequest(WireModel):
    email: EmailStr
    role: Role = Role.VIEWER

    @field_validator("email", mode="before")
    @classmethod
    def strip_email(cls, v):
        return v.strip() if isinstance(v, str) else v


class TagCreate(WireModel):
    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
    color: str | None = None
    description: str | None = None


class TagUpdate(WireModel):
    name: str | None = None
    color: str | None = None
    description: str | None = None


class AddTagsRequest(WireModel):
    tag_ids: list[str] = Field(min_length=1)


class TaskCreate(WireModel):
    title: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
    description: str = ""
    status: TaskStatus | None = None
    assigned_to_id: str | None = None


class TaskUpdate(WireModel):
    title: str | None = None
    description: str | None = None
    status: TaskStatus | None = None
    assigned_to_id: str | None = None


class SuggestTagsRequest(WireModel):
    content: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
    project_id: str | None = None


class PaginationQuery(WireModel):
    """Query parameters for ``/projects/paginated``."""

    page: int | None = Field(default=None, ge=1)
    limit: int | None = Field(default=None, ge=1)
    sort: Literal["name", "createdAt", "memberCount"] | None = None
    order: Literal["asc", "desc"] | None = None
    search: str | None = None
    tags: str | None = None

    def to_params(self) -> dict[str, str]:
        """Query string parameters, skipping unset values."""
        return {key: str(value) for key, value in self.to_wire().items()}
