"""Data models and constants for gl-share."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

DEFAULT_GITLAB_URL = "https://gitlab.com"
API_V4 = "/api/v4"
PER_PAGE = 20

DEFAULT_ACCESS_LEVEL = "reporter"

# Width of the group_access column in the project table
GROUP_ACCESS_WIDTH = 40


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class AccessLevel(Enum):
    """GitLab access levels, in order. Numeric value is 10 x position."""

    NO_ACCESS = 0
    GUEST = 10
    REPORTER = 20
    DEVELOPER = 30
    MAINTAINER = 40
    OWNER = 50

    @classmethod
    def names(cls) -> list[str]:
        return [level.name for level in cls]

    @classmethod
    def from_name(cls, name: str | None) -> AccessLevel | None:
        """Case-insensitive lookup. Returns None for unknown names."""
        if not name:
            return None
        return cls.__members__.get(name.upper())

    @property
    def requires_confirmation(self) -> bool:
        return self.value >= CONFIRMATION_THRESHOLD.value


CONFIRMATION_THRESHOLD = AccessLevel.DEVELOPER


# ---------------------------------------------------------------------------
# Data Classes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Project:
    """Project as returned by a project search."""

    id: int
    name: str
    namespace: str
    shared_with_groups: tuple[str, ...] = ()

    @property
    def group_access(self) -> str:
        return ", ".join(self.shared_with_groups)

    @classmethod
    def from_api(cls, data: dict) -> Project:
        namespace = data.get("namespace") or {}
        shared = data.get("shared_with_groups") or []
        return cls(
            id=data["id"],
            name=data["name"],
            namespace=namespace.get("name", ""),
            shared_with_groups=tuple(g.get("group_name", "") for g in shared),
        )


@dataclass(frozen=True)
class Group:
    """Group as returned by a group search."""

    id: int
    name: str

    @classmethod
    def from_api(cls, data: dict) -> Group:
        return cls(id=data["id"], name=data["name"])


@dataclass
class ShareResult:
    """Outcome of sharing a single project with a group."""

    project: Project
    group_id: int
    access_level: AccessLevel
    action: str  # "shared", "error"
    reason: str = ""  # "forbidden", "not_found", "already_shared", "http_error", "network"
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.action == "shared"


@dataclass
class Options:
    """Parsed invocation options."""

    search_mode: bool = False
    project_name: str | None = None
    group_name: str | None = None
    access_level: str = DEFAULT_ACCESS_LEVEL
    silent_failures: bool = False
