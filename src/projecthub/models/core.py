"""Domain models mirroring the backend's JSON records.

The backend speaks camelCase; attributes are snake_case and map onto the
wire names through a camelCase alias generator. Both spellings are accepted
on input.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class WireModel(BaseModel):
    """Base model for backend records (camelCase aliases, unknown keys ignored)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_wire(self) -> dict:
        """Dump using the backend's field names, dropping unset optionals."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Role(str, Enum):
    """Project-scoped permission level, enforced by the backend."""

    OWNER = "OWNER"
    CONTRIBUTOR = "CONTRIBUTOR"
    VIEWER = "VIEWER"

    @classmethod
    def can_write(cls, role: Role | str | None) -> bool:
        """OWNER and CONTRIBUTOR may manage tags and tasks."""
        return role in (cls.OWNER, cls.CONTRIBUTOR)

    @classmethod
    def is_owner(cls, role: Role | str | None) -> bool:
        return role == cls.OWNER


class TaskStatus(str, Enum):
    """Task workflow status."""

    TODO = "TODO"
    DOING = "DOING"
    DONE = "DONE"


class User(WireModel):
    """User model.

    Attributes:
        id: Unique identifier
        name: Display name
        email: Login email
        created_at: Account creation timestamp, when the backend sends one
    """

    id: str
    name: str
    email: str
    created_at: datetime | None = None


class UserRef(WireModel):
    """Compact user reference embedded in tags and tasks."""

    id: str
    name: str
    email: str


class Tag(WireModel):
    """Global tag, associated with zero or more projects.

    Attributes:
        id: Unique identifier
        name: Tag name
        color: Hex color code for display
        description: Optional free text
        created_at: Creation timestamp
        created_by: Creator reference
    """

    id: str
    name: str
    color: str = "#6366f1"
    description: str | None = None
    created_at: datetime | None = None
    created_by: UserRef | None = None


class Project(WireModel):
    """Project as seen by the current caller.

    Attributes:
        id: Unique identifier
        name: Project name
        description: Project description
        created_at: Creation timestamp
        updated_at: Last update timestamp
        user_role: The caller's role in this project
        member_count: Number of members
        tags: Tags associated with the project
    """

    id: str
    name: str
    description: str = ""
    created_at: datetime
    updated_at: datetime
    user_role: Role = Role.VIEWER
    member_count: int = 0
    tags: list[Tag] = Field(default_factory=list)


class ProjectMember(WireModel):
    """Join record between a user and a project."""

    id: str
    name: str
    email: str
    role: Role
    joined_at: datetime | None = None


class Task(WireModel):
    """Task belonging to a project.

    Attributes:
        id: Unique identifier
        title: Short title
        description: Longer description
        status: TODO, DOING or DONE
        project_id: Owning project
        assigned_to_id: Optional assignee id
        assigned_to: Optional assignee reference
        created_at: Creation timestamp
        updated_at: Last update timestamp
    """

    id: str
    title: str
    description: str = ""
    status: TaskStatus = TaskStatus.TODO
    project_id: str
    assigned_to_id: str | None = None
    assigned_to: UserRef | None = None
    created_at: datetime
    updated_at: datetime


class PaginationMeta(WireModel):
    """Pagination metadata for list endpoints."""

    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int
    has_next_page: bool
    has_previous_page: bool


class PaginatedResponse(WireModel, Generic[T]):
    """Generic envelope returned by paginated list endpoints."""

    data: list[T]
    meta: PaginationMeta


class AuthResponse(BaseModel):
    """Login response; the token key is snake_case on the wire."""

    access_token: str
    user: User


class SignupResponse(WireModel):
    message: str = ""
    user: User


class InviteResponse(WireModel):
    message: str = ""
    member: ProjectMember


class TagSuggestionResponse(WireModel):
    suggestions: list[str] = Field(default_factory=list)
    confidence: float = 0.0


class ProjectAnalysisResponse(WireModel):
    health_score: float
    risk_factors: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    predicted_completion_date: str | None = None
    bottlenecks: list[str] = Field(default_factory=list)


class ProjectSummaryResponse(WireModel):
    summary: str
    key_insights: list[str] = Field(default_factory=list)
