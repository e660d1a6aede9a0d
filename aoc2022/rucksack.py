"""
Rucksack model: records split into equal-sized partitions (compartments),
and fixed-size groups of records.

Responsibilities:
- Decode a line into a Record of equal, contiguous partitions.
- Find items shared by all partitions of a record.
- Find the badge item shared by all records of a group.

Non-Responsibilities:
- No I/O.
- No batching policy (see scoring.py).
"""

from collections import Counter
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .items import DecodeError, Item, decode_item
from .logger import get_logger

logger = get_logger()


@dataclass(frozen=True)
class Partition:
    """One compartment: a contiguous slice of a record's text, decoded."""

    text: str
    items: Tuple[Item, ...]

    @classmethod
    def decode(cls, text_slice: str) -> "Partition":
        """
        Decode every character of the slice.

        Raises:
            DecodeError: If the slice is empty or any character is invalid
        """
        if not text_slice:
            raise DecodeError("Partition must not be empty")
        return cls(text_slice, tuple(decode_item(c) for c in text_slice))

    def contains(self, item: Item) -> bool:
        return any(other == item for other in self.items)

    def item_multiplicities(self) -> Counter:
        return Counter(self.items)


@dataclass(frozen=True)
class Record:
    """A rucksack: exactly `len(partitions)` equal-length compartments."""

    partitions: Tuple[Partition, ...]

    @classmethod
    def parse(cls, line: str, partition_count: int) -> Optional["Record"]:
        """
        Parse one input line into a Record.

        Args:
            line: Raw input line (surrounding whitespace is trimmed)
            partition_count: Number of equal partitions to split into

        Returns:
            The Record, or None if the line is empty, its length is not a
            multiple of partition_count, or any character fails to decode

        Raises:
            ValueError: If partition_count is less than 1
        """
        if partition_count < 1:
            raise ValueError(f"partition_count must be at least 1, got {partition_count}")

        text = line.strip()
        if not text or len(text) % partition_count != 0:
            return None

        size = len(text) // partition_count
        try:
            partitions = tuple(
                Partition.decode(text[i:i + size])
                for i in range(0, len(text), size)
            )
        except DecodeError as e:
            logger.debug("Record rejected", line=text, error=str(e))
            return None

        return cls(partitions)

    def shared_item_multiplicities(self) -> Counter:
        """
        Items of the first partition that every other partition contains.

        Counts reflect occurrences in the first partition only, not a
        multiset intersection. With a single partition every item qualifies.
        """
        first, others = self.partitions[0], self.partitions[1:]
        return Counter(
            item for item in first.items
            if all(p.contains(item) for p in others)
        )

    def item_multiplicities(self) -> Counter:
        """Per-partition counts summed per item."""
        total: Counter = Counter()
        for partition in self.partitions:
            total.update(partition.item_multiplicities())
        return total


class Group:
    """A batch of records sharing one badge item."""

    def __init__(self, records: Sequence[Record]):
        # Count is the caller's responsibility
        self.records = tuple(records)

    def __len__(self) -> int:
        return len(self.records)

    def __repr__(self) -> str:
        return f"Group(records={len(self.records)})"

    def badge(self) -> Optional[Item]:
        """
        Return the item present in every record of the group.

        Candidates are checked in order of first appearance across the
        records, so the result is deterministic if more than one qualifies.
        """
        presence: Counter = Counter()
        for record in self.records:
            presence.update(record.item_multiplicities().keys())

        for item, count in presence.items():
            if count == len(self.records):
                return item
        return None
