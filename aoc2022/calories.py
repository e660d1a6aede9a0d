"""
Running totals over blank-line separated blocks of numbers.
"""

from typing import List, Optional


def parse_amount(line: str) -> Optional[int]:
    text = line.strip()
    if not text.isdecimal():
        return None
    return int(text)


def calories_per_elf(text: str) -> List[int]:
    """
    Sum each block of consecutive numeric lines.

    Blank or non-numeric lines end the current block. Repeated separators
    never produce empty blocks.

    Example:
        >>> calories_per_elf("1000\\n2000\\n\\n4000")
        [3000, 4000]
    """
    totals: List[int] = []
    previous: Optional[int] = None

    for line in text.splitlines():
        amount = parse_amount(line)
        if amount is not None:
            if previous is None:
                totals.append(amount)
            else:
                totals[-1] += amount
        previous = amount

    return totals


def rank_totals(totals: List[int]) -> List[int]:
    return sorted(totals, reverse=True)


def top_total(totals: List[int], k: int = 1) -> int:
    """Sum of the k largest totals."""
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    return sum(rank_totals(totals)[:k])
