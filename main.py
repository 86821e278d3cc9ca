# main.py

import argparse
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from voterlookup.config import get_config
from voterlookup.exceptions import VoterLookupError
from voterlookup.logger import get_logger
from voterlookup.persistence import open_source
from voterlookup.reports import VoterStats
from voterlookup.search import EmptyQuery, VoterListSearch, transliterate

console = Console()
logger = get_logger("voterlookup")


def resolve_source(source):
    if source:
        return Path(source)
    path = get_config().default_source_path
    if path is None:
        raise VoterLookupError("No voter source given and DEFAULT_SOURCE is not set")
    return path


def load_voters(args):
    repo = open_source(resolve_source(args.source))
    if args.booth:
        return repo.fetch_voters(args.booth)
    return repo.all_voters()


def cmd_transliterate(args):
    for text in args.text:
        console.print(f"{text} → [bold]{transliterate(text)}[/bold]")
    return 0


def cmd_search(args):
    voters = load_voters(args)

    search = VoterListSearch(
        empty_query=EmptyQuery.ALL if args.all_on_empty else EmptyQuery.NONE,
        status_filter=args.status,
        limit=args.limit,
        config=get_config().search,
    )
    search.load(voters)
    results = search.search_with_scores(args.term)

    if not results:
        console.print(f"[yellow]No voters found for \"{args.term}\"[/yellow]")
        return 1

    table = Table(title=f"{len(results)} of {len(search)} voter(s)")
    table.add_column("Sl No", justify="right")
    table.add_column("Name")
    table.add_column("Manglish")
    table.add_column("House")
    table.add_column("ID Card")
    table.add_column("Status")
    show_score = search.config.include_score
    if show_score:
        table.add_column("Score", justify="right")

    for result in results:
        voter = result.voter
        row = [
            voter.sl_no_str or "-",
            voter.name,
            result.record.manglish_name,
            voter.house_name or "-",
            voter.id_card_no or "-",
            voter.status,
        ]
        if show_score:
            row.append(f"{result.score:.4f}")
        table.add_row(*row)

    console.print(table)
    return 0


def cmd_stats(args):
    stats = VoterStats.from_voters(load_voters(args))

    table = Table(title="Voter statistics")
    table.add_column("Metric")
    table.add_column("Count", justify="right")
    for key, value in stats.to_dict().items():
        table.add_row(key.replace("_", " ").title(), str(value))

    console.print(table)
    return 0


def build_parser():
    parser = argparse.ArgumentParser(description="Voter roll lookup")
    sub = parser.add_subparsers(dest="command", required=True)

    p_tr = sub.add_parser("transliterate", help="Show the Manglish form of Malayalam text")
    p_tr.add_argument("text", nargs="+")
    p_tr.set_defaults(func=cmd_transliterate)

    p_search = sub.add_parser("search", help="Fuzzy search a voter list")
    p_search.add_argument("term", nargs="?", default="")
    p_search.add_argument("--source", help="JSON or CSV voter export (default: DEFAULT_SOURCE)")
    p_search.add_argument("--booth", help="Only search voters of this booth id")
    p_search.add_argument("--status", help="Only show voters with this status")
    p_search.add_argument("--limit", type=int, default=None)
    p_search.add_argument(
        "--all-on-empty",
        action="store_true",
        help="List every voter when the term is empty",
    )
    p_search.set_defaults(func=cmd_search)

    p_stats = sub.add_parser("stats", help="Gender and status counts")
    p_stats.add_argument("--source", help="JSON or CSV voter export (default: DEFAULT_SOURCE)")
    p_stats.add_argument("--booth", help="Only count voters of this booth id")
    p_stats.set_defaults(func=cmd_stats)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except VoterLookupError as e:
        logger.error(str(e))
        return 2


if __name__ == "__main__":
    sys.exit(main())
