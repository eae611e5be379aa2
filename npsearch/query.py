# npsearch/query.py

import enum
from dataclasses import dataclass
from typing import Sequence

from npsearch.utils.errors import EmptyQueryError

DELIMITER = "+"
ATTRIBUTES = ("deprecated", "unstable", "insecure")


class Presence(enum.Flag):
    """Tri-state attribute filter. PRESENT | ABSENT asks for both, contradictory as it is."""

    UNSET = 0
    PRESENT = enum.auto()
    ABSENT = enum.auto()


@dataclass(frozen=True)
class SearchFilters:
    author: str | None = None
    scope: str | None = None
    keywords: Sequence[str] = ()
    deprecated: Presence = Presence.UNSET
    unstable: Presence = Presence.UNSET
    insecure: Presence = Presence.UNSET
    boost_exact: bool = True
    score_effect: float | None = None
    quality_weight: float | None = None
    popularity_weight: float | None = None
    maintenance_weight: float | None = None

    def marked(self, presence: Presence) -> list[str]:
        """Attributes carrying `presence`, in fixed order."""
        return [a for a in ATTRIBUTES if presence in getattr(self, a)]

    def contradictions(self) -> list[str]:
        both = Presence.PRESENT | Presence.ABSENT
        return [a for a in ATTRIBUTES if getattr(self, a) == both]


def _number(value) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def filter_tokens(filters: SearchFilters) -> list[str]:
    tokens = []
    if filters.author:
        tokens.append(f"author:{filters.author}")
    if filters.scope:
        tokens.append(f"scope:{filters.scope}")
    if filters.keywords:
        tokens.append(f"keywords:{','.join(filters.keywords)}")

    excluded = filters.marked(Presence.ABSENT)
    if excluded:
        tokens.append(f"not:{','.join(excluded)}")
    included = filters.marked(Presence.PRESENT)
    if included:
        tokens.append(f"is:{','.join(included)}")

    if not filters.boost_exact:
        tokens.append("boost-exact:false")

    for key, value in (
        ("score-effect", filters.score_effect),
        ("quality-weight", filters.quality_weight),
        ("popularity-weight", filters.popularity_weight),
        ("maintenance-weight", filters.maintenance_weight),
    ):
        if value is not None:
            tokens.append(f"{key}:{_number(value)}")
    return tokens


def build_query(
    terms: Sequence[str],
    filters: SearchFilters | None = None,
    delimiter: str = DELIMITER,
) -> str:
    """
    Join the search terms and one key:value token per active filter
    into a single registry query string.
    """
    words = [w for term in terms for w in term.split()]
    if not words:
        raise EmptyQueryError()

    return delimiter.join(words + filter_tokens(filters or SearchFilters()))
