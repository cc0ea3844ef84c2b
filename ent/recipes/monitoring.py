"""Parsing of monitoring.yaml files attached to recipes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import yaml

_PARSE_MESSAGE = "Error parsing monitoring YAML"


class MonitoringError(ValueError):
    """Raised when monitoring YAML cannot be parsed."""

    def __init__(self, message: str = _PARSE_MESSAGE) -> None:
        super().__init__(message)


@dataclass(frozen=True)
class CpeID:
    """A CPE vendor/product pair."""

    vendor: str
    product: str


def _section(value: Any, name: str) -> dict:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise MonitoringError(f"{_PARSE_MESSAGE}: '{name}' must be a mapping")
    return value


def _cpe(entry: Any) -> CpeID:
    entry = _section(entry, "cpe")
    vendor, product = entry.get("vendor"), entry.get("product")
    if not isinstance(vendor, str) or not isinstance(product, str):
        raise MonitoringError(f"{_PARSE_MESSAGE}: cpe entries need vendor and product")
    return CpeID(vendor=vendor, product=product)


@dataclass
class Monitoring:
    """Release and security monitoring data for a recipe."""

    project_id: int = 0
    cpes: list[CpeID] = field(default_factory=list)

    @classmethod
    def from_str(cls, text: str) -> "Monitoring":
        """Parse a monitoring YAML document."""
        try:
            document = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise MonitoringError() from exc

        document = _section(document, "document")
        releases = _section(document.get("releases"), "releases")
        security = _section(document.get("security"), "security")

        project_id = releases.get("id")
        if project_id is None:
            project_id = 0
        elif isinstance(project_id, bool) or not isinstance(project_id, int):
            raise MonitoringError(f"{_PARSE_MESSAGE}: 'releases.id' must be an integer")

        cpe_entries = security.get("cpe")
        if cpe_entries is None:
            cpe_entries = []
        elif not isinstance(cpe_entries, list):
            raise MonitoringError(f"{_PARSE_MESSAGE}: 'security.cpe' must be a list")

        return cls(project_id=project_id, cpes=[_cpe(e) for e in cpe_entries])