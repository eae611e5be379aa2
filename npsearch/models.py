# npsearch/models.py

from dataclasses import dataclass, field
from typing import Any, NamedTuple


@dataclass(frozen=True)
class PackageLinks:
    npm: str | None = None
    repository: str | None = None
    homepage: str | None = None

    @classmethod
    def from_dict(cls, data: dict | None) -> "PackageLinks":
        data = data or {}
        return cls(
            npm=data.get("npm"),
            repository=data.get("repository"),
            homepage=data.get("homepage"),
        )


@dataclass(frozen=True)
class PackageRecord:
    name: str
    version: str = ""
    description: str = ""
    links: PackageLinks = field(default_factory=PackageLinks)

    @classmethod
    def from_dict(cls, data: dict) -> "PackageRecord":
        return cls(
            name=data["name"],
            version=data.get("version") or "",
            description=data.get("description") or "",
            links=PackageLinks.from_dict(data.get("links")),
        )


@dataclass(frozen=True)
class ScoreSet:
    """Registry scores, nominally in [0, 1]. Out-of-range values are kept as-is; null reads as 0."""

    quality: float = 0.0
    popularity: float = 0.0
    maintenance: float = 0.0
    final: float = 0.0

    @classmethod
    def from_dict(cls, data: dict) -> "ScoreSet":
        detail = data.get("detail") or {}
        return cls(
            quality=float(detail.get("quality") or 0),
            popularity=float(detail.get("popularity") or 0),
            maintenance=float(detail.get("maintenance") or 0),
            final=float(data.get("final") or 0),
        )


class SearchHit(NamedTuple):
    package: PackageRecord
    score: ScoreSet

    @classmethod
    def from_dict(cls, data: dict) -> "SearchHit":
        return cls(
            PackageRecord.from_dict(data["package"]),
            ScoreSet.from_dict(data.get("score") or {}),
        )


@dataclass(frozen=True)
class Choice:
    """One line of a selection list: what is shown, and what picking it returns."""

    label: Any
    value: Any
