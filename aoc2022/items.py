"""
Item decoding for rucksack contents.

Each item is a single ASCII letter. Its weight (priority) is 1-26 for
a-z and 27-52 for A-Z.
"""

import string
from dataclasses import dataclass

LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase


class DecodeError(ValueError):
    """Raised when a symbol cannot be decoded into an item."""
    pass


@dataclass(frozen=True, eq=False)
class Item:
    """A decoded item. Two items are equal iff their symbols are equal."""

    symbol: str

    def __post_init__(self):
        if not isinstance(self.symbol, str) or len(self.symbol) != 1 or self.symbol not in string.ascii_letters:
            raise DecodeError(f"Invalid item symbol: {self.symbol!r}")

    def __eq__(self, other):
        if not isinstance(other, Item):
            return NotImplemented
        return self.symbol == other.symbol

    def __hash__(self):
        return hash(self.symbol)

    @property
    def weight(self) -> int:
        if self.symbol in LOWERCASE:
            return ord(self.symbol) - ord("a") + 1
        return ord(self.symbol) - ord("A") + 27


def decode_item(symbol: str) -> Item:
    """
    Decode one character into an Item.

    Args:
        symbol: A single character

    Returns:
        The decoded Item

    Raises:
        DecodeError: If symbol is not exactly one ASCII letter
    """
    return Item(symbol)


def item_weight(symbol: str) -> int:
    return decode_item(symbol).weight
