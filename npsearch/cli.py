#!/usr/bin/env python3
import argparse
import logging
import math
import sys

from rich.console import Console

from npsearch import __version__
from npsearch.query import Presence, SearchFilters
from npsearch.runner import search
from npsearch.selection import Action
from npsearch.utils.config import load_config

logger = logging.getLogger("npsearch")
console = Console()


class RichParser(argparse.ArgumentParser):
    def error(self, message):
        console.print(f"[bold red]Error:[/] {message}\n")
        self.print_help()
        sys.exit(2)


def finite_float(value):
    number = float(value)
    if not math.isfinite(number):
        raise argparse.ArgumentTypeError(f"expected a finite number, got {value!r}")
    return number


def parse_args(argv=None):
    parser = RichParser(
        prog="npsearch",
        usage="%(prog)s [options] [search terms]",
        description="Search npm from the terminal, then open or install a result",
        allow_abbrev=False,
    )
    parser.add_argument("terms", nargs="*", help="Search terms")
    parser.add_argument(
        "-V", "--version", action="version", version=f"%(prog)s {__version__}"
    )

    filters = parser.add_argument_group("search filters")
    filters.add_argument("-a", "--author", metavar="NAME", help="Search for a specific author")
    filters.add_argument("-s", "--scope", help="Restrict search to a specific scope")
    filters.add_argument(
        "-k",
        "--keywords",
        help="Filter results to packages with the specific keywords, comma separated",
    )
    filters.add_argument(
        "-d", "--not-deprecated", action="store_true", help="Restrict to non-deprecated results"
    )
    filters.add_argument(
        "-D", "--deprecated", action="store_true", help="Restrict to deprecated results"
    )
    filters.add_argument(
        "-u", "--not-unstable", action="store_true", help="Restrict to results above v1.0.0"
    )
    filters.add_argument(
        "-U", "--unstable", action="store_true", help="Restrict to results beneath v1.0.0"
    )
    filters.add_argument(
        "-i", "--not-insecure", action="store_true", help="Restrict to secure results"
    )
    filters.add_argument(
        "-I", "--insecure", action="store_true", help="Restrict to insecure/vulnerable results"
    )
    filters.add_argument(
        "-b",
        "--no-boost-exact",
        dest="boost_exact",
        action="store_false",
        help="Do not boost exact search matches",
    )
    filters.add_argument(
        "-e", "--score-effect", type=finite_float, metavar="N", help="Set the score effect value. Default: 15.3"
    )
    filters.add_argument(
        "-q", "--quality-weight", type=finite_float, metavar="N", help="Specify a quality weight. Default: 1.95"
    )
    filters.add_argument(
        "-p", "--popularity-weight", type=finite_float, metavar="N", help="Specify a popularity weight. Default: 3.3"
    )
    filters.add_argument(
        "-m", "--maintenance-weight", type=finite_float, metavar="N", help="Specify a maintenance weight. Default: 2.05"
    )

    actions = parser.add_argument_group("actions (skip the action prompt)")
    actions.add_argument(
        "-n", "--npm", dest="actions", action="append_const",
        const=Action.OPEN_REGISTRY, help="Open result in browser on npm",
    )
    actions.add_argument(
        "-r", "--repo", dest="actions", action="append_const",
        const=Action.OPEN_REPOSITORY, help="Open repository in browser, if available",
    )
    actions.add_argument(
        "--runkit", dest="actions", action="append_const",
        const=Action.OPEN_SANDBOX, help="Open result with RunKit",
    )
    actions.add_argument(
        "--home", dest="actions", action="append_const",
        const=Action.OPEN_HOMEPAGE, help="Open the package homepage, if available",
    )
    actions.add_argument(
        "-o", "--no-save", dest="actions", action="append_const",
        const=Action.INSTALL, help="Install result to local project without saving",
    )
    actions.add_argument(
        "--save", dest="actions", action="append_const",
        const=Action.INSTALL_SAVE, help="Install result and save to dependencies",
    )
    actions.add_argument(
        "--save-dev", dest="actions", action="append_const",
        const=Action.INSTALL_SAVE_DEV, help="Install result and save to devDependencies",
    )

    parser.add_argument("--config", metavar="PATH", help="Path to a JSON config file")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")

    return parser.parse_args(argv)


def _presence(present: bool, absent: bool) -> Presence:
    value = Presence.UNSET
    if present:
        value |= Presence.PRESENT
    if absent:
        value |= Presence.ABSENT
    return value


def build_filters(args) -> SearchFilters:
    keywords = tuple(k.strip() for k in (args.keywords or "").split(",") if k.strip())
    filters = SearchFilters(
        author=args.author,
        scope=args.scope,
        keywords=keywords,
        deprecated=_presence(args.deprecated, args.not_deprecated),
        unstable=_presence(args.unstable, args.not_unstable),
        insecure=_presence(args.insecure, args.not_insecure),
        boost_exact=args.boost_exact,
        score_effect=args.score_effect,
        quality_weight=args.quality_weight,
        popularity_weight=args.popularity_weight,
        maintenance_weight=args.maintenance_weight,
    )
    for attr in filters.contradictions():
        logger.warning(f"Both --{attr} and --not-{attr} given; the registry gets both")
    return filters


def main(argv=None):
    args = parse_args(argv)
    if args.debug:
        logger.setLevel(logging.DEBUG)

    try:
        search(
            args.terms,
            build_filters(args),
            preset=args.actions or (),
            config=load_config(args.config),
        )
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled[/yellow]")
        sys.exit(130)


if __name__ == "__main__":
    main()
