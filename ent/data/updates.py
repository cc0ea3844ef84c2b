"""Upstream version lookups against release-monitoring.org."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import httpx

VERSIONS_URL = "https://release-monitoring.org/api/v2/versions/"


def _string_list(data: dict, key: str) -> list[str]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"{key!r} must be a list of strings")
    return list(value)


@dataclass
class VersionResponse:
    """Versions known upstream for one project."""

    latest_version: Optional[str] = None
    stable_versions: list[str] = field(default_factory=list)
    versions: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "VersionResponse":
        latest = data.get("latest_version")
        if latest is not None and not isinstance(latest, str):
            raise ValueError("'latest_version' must be a string")
        return cls(
            latest_version=latest,
            stable_versions=_string_list(data, "stable_versions"),
            versions=_string_list(data, "versions"),
        )

    def preferred_version(self) -> Optional[str]:
        """The first stable version, else the latest, else the first listed."""
        if self.stable_versions:
            return self.stable_versions[0]
        if self.latest_version is not None:
            return self.latest_version
        return self.versions[0] if self.versions else None


async def get_latest_version(
    project_id: int, client: Optional[httpx.AsyncClient] = None
) -> VersionResponse:
    """Fetch the upstream versions of a project by its id."""
    if client is None:
        async with httpx.AsyncClient() as own_client:
            return await get_latest_version(project_id, own_client)
    response = await client.get(VERSIONS_URL, params={"project_id": project_id})
    return VersionResponse.from_dict(response.json())