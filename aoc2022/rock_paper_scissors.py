"""
Rock/paper/scissors strategy guide scoring.

Each line holds two tokens: the opponent's hand (A/B/C) and either our
hand (X/Y/Z) or the outcome we need (X=loss, Y=draw, Z=win).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .logger import get_logger

logger = get_logger()


class Hand(Enum):
    """A hand shape. The value is the shape score."""

    ROCK = 1
    PAPER = 2
    SCISSORS = 3

    @classmethod
    def parse(cls, token: str) -> Optional["Hand"]:
        return _HAND_TOKENS.get(token)

    @property
    def score(self) -> int:
        return self.value

    def defeats(self) -> "Hand":
        """The hand this one beats."""
        return _DEFEATS[self]

    def defeated_by(self) -> "Hand":
        """The hand that beats this one."""
        return _DEFEATED_BY[self]


_HAND_TOKENS = {
    "A": Hand.ROCK,
    "B": Hand.PAPER,
    "C": Hand.SCISSORS,
    "X": Hand.ROCK,
    "Y": Hand.PAPER,
    "Z": Hand.SCISSORS,
}

_DEFEATS = {
    Hand.ROCK: Hand.SCISSORS,
    Hand.SCISSORS: Hand.PAPER,
    Hand.PAPER: Hand.ROCK,
}

_DEFEATED_BY = {loser: winner for winner, loser in _DEFEATS.items()}


class Outcome(Enum):
    """Round outcome from our side. The value is the outcome score."""

    WIN = 6
    DRAW = 3
    LOSS = 0

    @classmethod
    def parse(cls, token: str) -> Optional["Outcome"]:
        return _OUTCOME_TOKENS.get(token)

    @property
    def score(self) -> int:
        return self.value


_OUTCOME_TOKENS = {
    "X": Outcome.LOSS,
    "Y": Outcome.DRAW,
    "Z": Outcome.WIN,
}


def response_for(opponent: Hand, outcome: Outcome) -> Hand:
    """Return the hand to play against `opponent` to reach `outcome`."""
    if outcome is Outcome.WIN:
        return opponent.defeated_by()
    if outcome is Outcome.LOSS:
        return opponent.defeats()
    return opponent


@dataclass(frozen=True)
class Round:
    opponent: Hand
    response: Hand

    @classmethod
    def parse(cls, line: str) -> Optional["Round"]:
        """Parse "<opponent> <response>"; None unless both tokens are hands."""
        tokens = line.split()
        if len(tokens) != 2:
            return None
        opponent, response = Hand.parse(tokens[0]), Hand.parse(tokens[1])
        if opponent is None or response is None:
            return None
        return cls(opponent, response)

    @classmethod
    def parse_with_outcome(cls, line: str) -> Optional["Round"]:
        """Parse "<opponent> <outcome>" and derive the response to play."""
        tokens = line.split()
        if len(tokens) != 2:
            return None
        opponent, outcome = Hand.parse(tokens[0]), Outcome.parse(tokens[1])
        if opponent is None or outcome is None:
            return None
        return cls(opponent, response_for(opponent, outcome))

    def outcome(self) -> Outcome:
        if self.opponent is self.response:
            return Outcome.DRAW
        if self.response.defeats() is self.opponent:
            return Outcome.WIN
        return Outcome.LOSS

    def score(self) -> int:
        return self.outcome().score + self.response.score


def _total(text: str, parse) -> int:
    total = 0
    for lineno, line in enumerate(text.splitlines(), start=1):
        round_ = parse(line)
        if round_ is None:
            if line.strip():
                logger.debug("Skipping malformed round", line_number=lineno)
            continue
        total += round_.score()
    return total


def total_score(text: str) -> int:
    """Total score when the second column is the hand we play."""
    return _total(text, Round.parse)


def total_score_for_outcomes(text: str) -> int:
    """Total score when the second column is the outcome we need."""
    return _total(text, Round.parse_with_outcome)
