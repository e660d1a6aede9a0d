"""
Scoring pipeline for rucksack puzzles.

Invariant:
Given identical text, every function here returns the same total.
Lines that do not parse are skipped; they never raise.
"""

from itertools import islice
from typing import Iterable, Iterator, Tuple, TypeVar

from .logger import get_logger
from .rucksack import Group, Record

logger = get_logger()

T = TypeVar("T")

DEFAULT_PARTITION_COUNT = 2
DEFAULT_GROUP_SIZE = 3


def parse_records(text: str, partition_count: int = DEFAULT_PARTITION_COUNT) -> Iterator[Record]:
    """Yield a Record for each line that parses, in input order."""
    for lineno, line in enumerate(text.splitlines(), start=1):
        record = Record.parse(line, partition_count)
        if record is None:
            if line.strip():
                logger.debug("Skipping malformed line", line_number=lineno)
            continue
        yield record


def batched(iterable: Iterable[T], size: int) -> Iterator[Tuple[T, ...]]:
    """
    Split into consecutive, non-overlapping batches of exactly `size`.

    A trailing batch with fewer than `size` elements is dropped.
    """
    if size < 1:
        raise ValueError(f"size must be at least 1, got {size}")

    iterator = iter(iterable)
    while True:
        batch = tuple(islice(iterator, size))
        if len(batch) < size:
            if batch:
                logger.debug("Dropping incomplete trailing batch", size=len(batch), expected=size)
            return
        yield batch


def total_shared_item_weight(text: str, partition_count: int = DEFAULT_PARTITION_COUNT) -> int:
    """
    Sum, over all records, the weight of each distinct shared item.

    Duplicate occurrences of a shared item score once per record.
    """
    return sum(
        item.weight
        for record in parse_records(text, partition_count)
        for item in record.shared_item_multiplicities()
    )


def total_badge_weight(
    text: str,
    group_size: int = DEFAULT_GROUP_SIZE,
    partition_count: int = DEFAULT_PARTITION_COUNT,
) -> int:
    """Sum the badge weight of each complete group of `group_size` records."""
    total = 0
    for batch in batched(parse_records(text, partition_count), group_size):
        badge = Group(batch).badge()
        if badge is None:
            logger.debug("Group has no badge", size=len(batch))
            continue
        total += badge.weight
    return total
