"""ProjectHub domain models.

Pydantic models for the records the backend owns and for the payloads the
CLI sends to it. The front end only mirrors their shape.
"""

from .config_models import AppConfig, APIConfig, OutputConfig, ProxyConfig
from .core import (
    AuthResponse,
    InviteResponse,
    PaginatedResponse,
    PaginationMeta,
    Project,
    ProjectAnalysisResponse,
    ProjectMember,
    ProjectSummaryResponse,
    Role,
    SignupResponse,
    Tag,
    TagSuggestionResponse,
    Task,
    TaskStatus,
    User,
    UserRef,
)
from .requests import (
    AddTagsRequest,
    InviteRequest,
    LoginRequest,
    PaginationQuery,
    ProjectCreate,
    ProjectUpdate,
    SignupRequest,
    SuggestTagsRequest,
    TagCreate,
    TagUpdate,
    TaskCreate,
    TaskUpdate,
)

__all__ = [
    # Config
    "AppConfig",
    "APIConfig",
    "OutputConfig",
    "ProxyConfig",
    # Records
    "User",
    "UserRef",
    "Role",
    "Project",
    "ProjectMember",
    "Tag",
    "Task",
    "TaskStatus",
    "PaginatedResponse",
    "PaginationMeta",
    # Responses
    "AuthResponse",
    "SignupResponse",
    "InviteResponse",
    "TagSuggestionResponse",
    "ProjectAnalysisResponse",
    "ProjectSummaryResponse",
    # Requests
    "LoginRequest",
    "SignupRequest",
    "ProjectCreate",
    "ProjectUpdate",
    "InviteRequest",
    "TagCreate",
    "TagUpdate",
    "AddTagsRequest",
    "TaskCreate",
    "TaskUpdate",
    "SuggestTagsRequest",
    "PaginationQuery",
]
