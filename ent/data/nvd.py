"""Data types for NVD CVE JSON feeds."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


def _optional(data: dict, key: str, build):
    value = data.get(key)
    return None if value is None else build(value)


def _dump(value):
    return None if value is None else value.to_dict()


@dataclass
class CveDataMeta:
    """CVE metadata holding the unique identifier."""

    id: str

    @classmethod
    def from_dict(cls, data: dict) -> "CveDataMeta":
        return cls(id=data["ID"])

    def to_dict(self) -> dict:
        return {"ID": self.id}


@dataclass
class DescriptionData:
    """A description text with its language tag."""

    lang: str
    value: str

    @classmethod
    def from_dict(cls, data: dict) -> "DescriptionData":
        return cls(lang=data["lang"], value=data["value"])

    def to_dict(self) -> dict:
        return {"lang": self.lang, "value": self.value}


@dataclass
class Description:
    """Description of the vulnerability."""

    data: list[DescriptionData] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "Description":
        return cls(data=[DescriptionData.from_dict(d) for d in data["description_data"]])

    def to_dict(self) -> dict:
        return {"description_data": [d.to_dict() for d in self.data]}


@dataclass
class ReferenceData:
    """A reference to an external source."""

    url: str
    name: Optional[str] = None
    ref_source: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "ReferenceData":
        return cls(url=data["url"], name=data.get("name"), ref_source=data.get("refsource"))

    def to_dict(self) -> dict:
        return {"url": self.url, "name": self.name, "refsource": self.ref_source}


@dataclass
class References:
    """References to external sources about the vulnerability."""

    data: list[ReferenceData] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "References":
        return cls(data=[ReferenceData.from_dict(d) for d in data["reference_data"]])

    def to_dict(self) -> dict:
        return {"reference_data": [d.to_dict() for d in self.data]}


@dataclass
class Cve:
    """Core CVE data: identifier, description and references."""

    data_meta: CveDataMeta
    description: Description
    references: References

    @classmethod
    def from_dict(cls, data: dict) -> "Cve":
        return cls(
            data_meta=CveDataMeta.from_dict(data["CVE_data_meta"]),
            description=Description.from_dict(data["description"]),
            references=References.from_dict(data["references"]),
        )

    def to_dict(self) -> dict:
        return {
            "CVE_data_meta": self.data_meta.to_dict(),
            "description": self.description.to_dict(),
            "references": self.references.to_dict(),
        }


@dataclass
class CpeMatch:
    """CPE match rule describing affected versions."""

    vulnerable: bool
    cpe23_uri: str
    version_start_including: Optional[str] = None
    version_end_including: Optional[str] = None
    version_start_excluding: Optional[str] = None
    version_end_excluding: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "CpeMatch":
        return cls(
            vulnerable=bool(data["vulnerable"]),
            cpe23_uri=data["cpe23Uri"],
            version_start_including=data.get("versionStartIncluding"),
            version_end_including=data.get("versionEndIncluding"),
            version_start_excluding=data.get("versionStartExcluding"),
            version_end_excluding=data.get("versionEndExcluding"),
        )

    def to_dict(self) -> dict:
        return {
            "vulnerable": self.vulnerable,
            "cpe23Uri": self.cpe23_uri,
            "versionStartIncluding": self.version_start_including,
            "versionEndIncluding": self.version_end_including,
            "versionStartExcluding": self.version_start_excluding,
            "versionEndExcluding": self.version_end_excluding,
        }


@dataclass
class Node:
    """A node in the configuration tree."""

    operator: str
    children: Optional[list["Node"]] = None
    cpe_match: Optional[list[CpeMatch]] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Node":
        return cls(
            operator=data["operator"],
            children=_optional(data, "children", lambda v: [Node.from_dict(n) for n in v]),
            cpe_match=_optional(data, "cpe_match", lambda v: [CpeMatch.from_dict(m) for m in v]),
        )

    def to_dict(self) -> dict:
        return {
            "operator": self.operator,
            "children": None if self.children is None else [n.to_dict() for n in self.children],
            "cpe_match": None if self.cpe_match is None else [m.to_dict() for m in self.cpe_match],
        }


@dataclass
class Configurations:
    """Configuration information describing affected products."""

    data_version: str
    nodes: list[Node] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "Configurations":
        return cls(
            data_version=data["CVE_data_version"],
            nodes=[Node.from_dict(n) for n in data["nodes"]],
        )

    def to_dict(self) -> dict:
        return {
            "CVE_data_version": self.data_version,
            "nodes": [n.to_dict() for n in self.nodes],
        }


@dataclass
class CvssV3:
    """CVSS v3 scoring vector details."""

    vector_string: str
    attack_vector: str
    attack_complexity: str
    privileges_required: str
    user_interaction: str
    scope: str
    confidentiality_impact: str
    integrity_impact: str
    availability_impact: str
    base_score: float
    base_severity: str

    @classmethod
    def from_dict(cls, data: dict) -> "CvssV3":
        return cls(
            vector_string=data["vectorString"],
            attack_vector=data["attackVector"],
            attack_complexity=data["attackComplexity"],
            privileges_required=data["privilegesRequired"],
            user_interaction=data["userInteraction"],
            scope=data["scope"],
            confidentiality_impact=data["confidentialityImpact"],
            integrity_impact=data["integrityImpact"],
            availability_impact=data["availabilityImpact"],
            base_score=float(data["baseScore"]),
            base_severity=data["baseSeverity"],
        )

    def to_dict(self) -> dict:
        return {
            "vectorString": self.vector_string,
            "attackVector": self.attack_vector,
            "attackComplexity": self.attack_complexity,
            "privilegesRequired": self.privileges_required,
            "userInteraction": self.user_interaction,
            "scope": self.scope,
            "confidentialityImpact": self.confidentiality_impact,
            "integrityImpact": self.integrity_impact,
            "availabilityImpact": self.availability_impact,
            "baseScore": self.base_score,
            "baseSeverity": self.base_severity,
        }


@dataclass
class BaseMetricV3:
    """CVSS v3 base metrics."""

    cvss_v3: CvssV3
    exploitability_score: float
    impact_score: float

    @classmethod
    def from_dict(cls, data: dict) -> "BaseMetricV3":
        return cls(
            cvss_v3=CvssV3.from_dict(data["cvssV3"]),
            exploitability_score=float(data["exploitabilityScore"]),
            impact_score=float(data["impactScore"]),
        )

    def to_dict(self) -> dict:
        return {
            "cvssV3": self.cvss_v3.to_dict(),
            "exploitabilityScore": self.exploitability_score,
            "impactScore": self.impact_score,
        }


@dataclass
class CvssV2:
    """CVSS v2 scoring details."""

    version: str
    vector_string: str
    base_score: float

    @classmethod
    def from_dict(cls, data: dict) -> "CvssV2":
        return cls(
            version=data["version"],
            vector_string=data["vectorString"],
            base_score=float(data["baseScore"]),
        )

    def to_dict(self) -> dict:
        return {
            "version": self.version,
            "vectorString": self.vector_string,
            "baseScore": self.base_score,
        }


@dataclass
class BaseMetricV2:
    """CVSS v2 base metrics."""

    cvss_v2: CvssV2
    exploitability_score: float
    impact_score: float

    @classmethod
    def from_dict(cls, data: dict) -> "BaseMetricV2":
        return cls(
            cvss_v2=CvssV2.from_dict(data["cvssV2"]),
            exploitability_score=float(data["exploitabilityScore"]),
            impact_score=float(data["impactScore"]),
        )

    def to_dict(self) -> dict:
        return {
            "cvssV2": self.cvss_v2.to_dict(),
            "exploitabilityScore": self.exploitability_score,
            "impactScore": self.impact_score,
        }


@dataclass
class Impact:
    """Impact scores and metrics for the vulnerability."""

    base_metric_v3: Optional[BaseMetricV3] = None
    base_metric_v2: Optional[BaseMetricV2] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Impact":
        return cls(
            base_metric_v3=_optional(data, "baseMetricV3", BaseMetricV3.from_dict),
            base_metric_v2=_optional(data, "baseMetricV2", BaseMetricV2.from_dict),
        )

    def to_dict(self) -> dict:
        return {
            "baseMetricV3": _dump(self.base_metric_v3),
            "baseMetricV2": _dump(self.base_metric_v2),
        }


@dataclass
class CveItem:
    """A single vulnerability entry."""

    cve: Cve
    configurations: Configurations
    impact: Impact
    last_modified_date: str
    published_date: str

    @classmethod
    def from_dict(cls, data: dict) -> "CveItem":
        return cls(
            cve=Cve.from_dict(data["cve"]),
            configurations=Configurations.from_dict(data["configurations"]),
            impact=Impact.from_dict(data["impact"]),
            last_modified_date=data["lastModifiedDate"],
            published_date=data["publishedDate"],
        )

    def to_dict(self) -> dict:
        return {
            "cve": self.cve.to_dict(),
            "configurations": self.configurations.to_dict(),
            "impact": self.impact.to_dict(),
            "lastModifiedDate": self.last_modified_date,
            "publishedDate": self.published_date,
        }


@dataclass
class CveData:
    """A CVE feed: a list of vulnerability entries."""

    cve_items: list[CveItem] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CveData":
        return cls(cve_items=[CveItem.from_dict(item) for item in data["CVE_Items"]])

    def to_dict(self) -> dict:
        return {"CVE_Items": [item.to_dict() for item in self.cve_items]}