# npsearch/formatter.py

import math
from typing import Sequence

from rich.text import Text

from npsearch.models import Choice, SearchHit
from npsearch.utils.errors import EmptyResultsError

SCORE_STYLES = {
    "quality": "dim green",
    "popularity": "dim yellow",
    "maintenance": "dim blue",
    "final": "on red",
}
NAME_STYLE = "bold"
VERSION_STYLE = "dim bright_black"
DESCRIPTION_STYLE = "dim"


def longest(values: Sequence[str]) -> int:
    return max((len(v) for v in values), default=0)


def format_score(score: float) -> str:
    """Floored percentage, at least 3 wide: ' 5%', '50%', '100%'."""
    if math.isnan(score):
        score = 0.0
    clamped = min(max(score, 0.0), 1.0)
    return f"{math.floor(clamped * 100)}%".rjust(3)


def legend() -> Text:
    return Text(" ").join(
        Text(f"<{label}>", style=SCORE_STYLES[key])
        for key, label in (
            ("quality", "Quality"),
            ("popularity", "Popularity"),
            ("maintenance", "Maintenance"),
            ("final", "Overall"),
        )
    )


def format_hit(hit: SearchHit, longest_name: int, longest_version: int) -> Choice:
    pkg, score = hit
    label = Text.assemble(
        (pkg.name.ljust(longest_name), NAME_STYLE),
        " ",
        (pkg.version.ljust(longest_version), VERSION_STYLE),
        " ",
        (format_score(score.quality), SCORE_STYLES["quality"]),
        " ",
        (format_score(score.popularity), SCORE_STYLES["popularity"]),
        " ",
        (format_score(score.maintenance), SCORE_STYLES["maintenance"]),
        " ",
        (format_score(score.final), SCORE_STYLES["final"]),
        " ",
        (pkg.description, DESCRIPTION_STYLE),
    )
    return Choice(label=label, value=pkg)


def format_results(hits: Sequence[SearchHit]) -> list[Choice]:
    """
    Render ranked hits as aligned selection lines, keeping the registry's order.
    Raises EmptyResultsError when there is nothing to show.
    """
    if not hits:
        raise EmptyResultsError()

    longest_name = longest([h.package.name for h in hits])
    longest_version = longest([h.package.version for h in hits])
    return [format_hit(h, longest_name, longest_version) for h in hits]
