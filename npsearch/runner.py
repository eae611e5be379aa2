# npsearch/runner.py

import logging
from typing import Sequence

from rich.console import Console
from rich.markup import escape

from npsearch import registry
from npsearch.actions import dispatch, perform
from npsearch.formatter import format_results
from npsearch.models import PackageRecord
from npsearch.query import SearchFilters, build_query
from npsearch.selection import Action, available_actions, pick_action, pick_package
from npsearch.utils.config import load_config
from npsearch.utils.errors import handle_errors

logger = logging.getLogger(__name__)
console = Console()


def preset_action(pkg: PackageRecord, preset: Sequence[Action]) -> Action | None:
    """First requested action, in menu order, that `pkg` offers."""
    for action in available_actions(pkg):
        if action in preset:
            return action
    if preset:
        logger.warning(
            "None of the requested actions apply to %s, asking instead", pkg.name
        )
    return None


@handle_errors
def search(
    terms: Sequence[str],
    filters: SearchFilters | None = None,
    preset: Sequence[Action] = (),
    config: dict | None = None,
):
    config = config or load_config()
    query = build_query(terms, filters, delimiter=config["delimiter"])

    console.print(f"[bold cyan]🔍 Searching for [green]{escape(query)}[/green]…[/]\n")
    hits = registry.search(query, config["api_url"], timeout=config["timeout"])
    choices = format_results(hits)

    pkg = pick_package(choices)
    action = preset_action(pkg, preset) or pick_action(pkg)
    effect = dispatch(
        pkg,
        action,
        sandbox_url=config["sandbox_url"],
        registry_url=config["registry_url"],
    )
    perform(effect, npm=config["npm"])
