"""Data types for the build dashboard task listing."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class BuildStatus(IntEnum):
    """Status of a build task."""

    NEW = 0
    FAILED = 1
    BUILDING = 2
    PUBLISHING = 3
    COMPLETED = 4
    BLOCKED = 5

    @classmethod
    def from_code(cls, value: int) -> "BuildStatus":
        """Map a numeric status, treating unknown values as failed."""
        try:
            return cls(int(value))
        except ValueError:
            return cls.FAILED


@dataclass
class Task:
    """A single build task."""

    id: int
    project_id: int
    repo_id: int
    profile_id: int
    slug: str
    pkg_id: str
    architecture: str
    build_id: str
    description: str
    commit_ref: str
    source_path: str
    status: BuildStatus
    ts_started: int
    ts_updated: int
    ts_ended: int
    allocated_builder: str
    log_path: str
    blocked_by: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "Task":
        return cls(
            id=data["id"],
            project_id=data["projectID"],
            repo_id=data["repoID"],
            profile_id=data["profileID"],
            slug=data["slug"],
            pkg_id=data["pkgID"],
            architecture=data["architecture"],
            build_id=data["buildID"],
            description=data["description"],
            commit_ref=data["commitRef"],
            source_path=data["sourcePath"],
            status=BuildStatus.from_code(data["status"]),
            ts_started=data["tsStarted"],
            ts_updated=data["tsUpdated"],
            ts_ended=data["tsEnded"],
            allocated_builder=data["allocatedBuilder"],
            log_path=data["logPath"],
            blocked_by=list(data.get("blockedBy") or []),
        )


@dataclass
class TaskEnumerateResponse:
    """One page of the task listing."""

    items: list[Task]
    num_pages: int
    page: int
    has_previous: bool
    has_next: bool

    @classmethod
    def from_dict(cls, data: dict) -> "TaskEnumerateResponse":
        return cls(
            items=[Task.from_dict(item) for item in data["items"]],
            num_pages=data["numPages"],
            page=data["page"],
            has_previous=bool(data["hasPrevious"]),
            has_next=bool(data["hasNext"]),
        )