import argparse
import sys
from pathlib import Path

from . import __version__
from . import env
from .calories import calories_per_elf, rank_totals, top_total
from .logger import get_logger
from .puzzle_input import input_cache_path, load_input, read_input
from .rock_paper_scissors import total_score, total_score_for_outcomes
from .scoring import (
    DEFAULT_GROUP_SIZE,
    DEFAULT_PARTITION_COUNT,
    total_badge_weight,
    total_shared_item_weight,
)

logger = get_logger()

DAY_CALORIES = 1
DAY_RPS = 2
DAY_RUCKSACK = 3

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {n}")
    return n


def resolve_input(args: argparse.Namespace, day: int) -> str:
    """Read --input, or load the day's input from cache/adventofcode.com with --fetch."""
    try:
        if args.input:
            text = read_input(Path(args.input))
        elif args.fetch:
            text = load_input(
                day,
                year=args.year,
                session=args.session or env.session_token(),
                input_dir=Path(args.input_dir),
                refresh=args.refresh,
            )
        else:
            raise SystemExit("Provide --input PATH or --fetch.")
    except ValueError as e:
        raise SystemExit(str(e))

    if not text.strip():
        print("Input is empty.", file=sys.stderr)
        raise SystemExit(2)
    return text


def cmd_calories(args: argparse.Namespace) -> None:
    text = resolve_input(args, DAY_CALORIES)
    totals = calories_per_elf(text)
    if not totals:
        print("No numeric blocks found.", file=sys.stderr)
        raise SystemExit(2)
    logger.debug("Parsed calorie blocks", blocks=len(totals))

    if args.list:
        for index, calories in enumerate(rank_totals(totals), start=1):
            print(f"{index:>3}. {calories}")
        print()
    top = min(args.top, len(totals))
    print(f"Top {top} total: {top_total(totals, top)}")


def cmd_rps(args: argparse.Namespace) -> None:
    text = resolve_input(args, DAY_RPS)
    if args.strategy == "outcomes":
        score = total_score_for_outcomes(text)
    else:
        score = total_score(text)
    print(f"Total score ({args.strategy}): {score}")


def cmd_rucksack(args: argparse.Namespace) -> None:
    text = resolve_input(args, DAY_RUCKSACK)
    shared = total_shared_item_weight(text, partition_count=args.partitions)
    badges = total_badge_weight(text, group_size=args.group_size, partition_count=args.partitions)
    print(f"Shared item priority: {shared}")
    print(f"Badge priority: {badges}")


def cmd_fetch(args: argparse.Namespace) -> None:
    args.fetch = True
    args.input = None
    text = resolve_input(args, args.day)
    path = input_cache_path(Path(args.input_dir), args.year, args.day)
    print(f"Day {args.day}: {len(text.splitlines())} lines at {path}")


def add_input_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument("--input", help="Path to puzzle input file")
    p.add_argument("--fetch", action="store_true", help="Load input from cache or adventofcode.com")
    add_fetch_arguments(p)


def add_fetch_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument("--year", type=int, default=None, help="Event year (or set AOC_YEAR; default 2022)")
    p.add_argument("--input-dir", default=None, help="Input cache directory (or set AOC_INPUT_DIR; default data/inputs)")
    p.add_argument("--session", help="adventofcode.com session cookie (or set AOC_SESSION)")
    p.add_argument("--refresh", action="store_true", help="Ignore cached input and download again")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="aoc2022", description="Advent of Code 2022 puzzle solver")
    parser.add_argument("--version", action="store_true", help="Show version")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING, ERROR (or set AOC_LOG_LEVEL)")
    parser.add_argument("--log-dir", help="Also write logs to this directory (or set AOC_LOG_DIR)")

    subparsers = parser.add_subparsers(dest="command")

    cal = subparsers.add_parser("calories", help="Day 1: sum calorie blocks and report the top totals")
    add_input_arguments(cal)
    cal.add_argument("--top", type=positive_int, default=1, help="Number of largest totals to sum (default 1)")
    cal.add_argument("--list", action="store_true", help="Print every total, largest first")
    cal.set_defaults(func=cmd_calories)

    rps = subparsers.add_parser("rps", help="Day 2: score a rock/paper/scissors strategy guide")
    add_input_arguments(rps)
    rps.add_argument(
        "--strategy",
        choices=["hands", "outcomes"],
        default="hands",
        help="Read the second column as our hand (hands) or the required outcome (outcomes)",
    )
    rps.set_defaults(func=cmd_rps)

    ruck = subparsers.add_parser("rucksack", help="Day 3: shared item and badge priorities")
    add_input_arguments(ruck)
    ruck.add_argument("--partitions", type=positive_int, default=DEFAULT_PARTITION_COUNT, help="Compartments per rucksack (default 2)")
    ruck.add_argument("--group-size", type=positive_int, default=DEFAULT_GROUP_SIZE, help="Rucksacks per badge group (default 3)")
    ruck.set_defaults(func=cmd_rucksack)

    fetch = subparsers.add_parser("fetch", help="Download and cache one day's input")
    fetch.add_argument("--day", type=int, required=True, help="Puzzle day (1-25)")
    add_fetch_arguments(fetch)
    fetch.set_defaults(func=cmd_fetch)

    return parser


def main(argv=None):
    # Load .env if present (AOC_SESSION, AOC_LOG_LEVEL, etc.)
    env.load_env()
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(__version__)
        return

    level = (args.log_level or env.log_level()).upper()
    if level not in LOG_LEVELS:
        raise SystemExit(f"Unknown log level: {level}. Use one of {', '.join(LOG_LEVELS)}")
    log_dir = Path(args.log_dir) if args.log_dir else env.log_dir()
    logger.configure(level=level, log_dir=log_dir)

    if not hasattr(args, "func"):
        parser.print_help()
        return

    if hasattr(args, "year"):
        try:
            args.year = args.year or env.puzzle_year()
        except ValueError as e:
            raise SystemExit(str(e))
        args.input_dir = args.input_dir or str(env.input_dir())

    args.func(args)
    logger.log_metrics_summary()


if __name__ == "__main__":
    main()
