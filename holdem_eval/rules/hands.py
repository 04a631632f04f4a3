"""Hand category detection and classification.

Categories (weakest to strongest):
- NoMatch: nothing below applies
- OnePair: exactly one rank appears twice
- TwoPair: two ranks appear twice
- ThreeOfAKind: exactly one rank appears three times
- Straight: five consecutive ranks (A-2-3-4-5 counts, Ace plays low)
- Flush: five cards of one suit
- FullHouse: three of one rank plus two of another
- FourOfAKind: exactly one rank appears four times
- StraightFlush: a straight inside a single suit
- RoyalFlush: T-J-Q-K-A of a single suit

Detectors are not mutually exclusive (a royal flush is also a flush and a
straight). classify_hand checks them strongest first and stops at the first
match, so that order is part of the contract.
"""

from enum import IntEnum
from typing import Callable, List, Optional, Sequence, Tuple

from .ranks import (
    Card,
    InvalidHandSize,
    Rank,
    Suit,
    ROYAL_RANKS,
    WHEEL_RANKS,
    distinct_ranks,
    get_rank_counts,
    get_suit_counts,
    group_ranks_by_suit,
    parse_hand,
)

# Cards in a complete poker hand
HAND_SIZE = 5

# Consecutive ranks needed for a straight
STRAIGHT_LENGTH = 5

# Cards of one suit needed for a flush
FLUSH_SIZE = 5


class Category(IntEnum):
    """Hand categories ordered by strength (higher value = stronger)."""

    NO_MATCH = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9

    @property
    def display_name(self) -> str:
        return CATEGORY_NAMES[self]

    @classmethod
    def from_name(cls, name: str) -> "Category":
        """Look up a category by display name ('FullHouse') or member name."""
        for category, display in CATEGORY_NAMES.items():
            if name == display:
                return category
        try:
            return cls[name]
        except KeyError:
            raise ValueError(f"Unknown hand category: {name}") from None


CATEGORY_NAMES = {
    Category.NO_MATCH: "NoMatch",
    Category.ONE_PAIR: "OnePair",
    Category.TWO_PAIR: "TwoPair",
    Category.THREE_OF_A_KIND: "ThreeOfAKind",
    Category.STRAIGHT: "Straight",
    Category.FLUSH: "Flush",
    Category.FULL_HOUSE: "FullHouse",
    Category.FOUR_OF_A_KIND: "FourOfAKind",
    Category.STRAIGHT_FLUSH: "StraightFlush",
    Category.ROYAL_FLUSH: "RoyalFlush",
}


def _count_ranks_with(cards: Sequence[Card], count: int) -> int:
    """Number of distinct ranks appearing exactly ``count`` times."""
    return sum(1 for c in get_rank_counts(cards).values() if c == count)


def has_straight_run(ranks: Sequence[Rank]) -> bool:
    """Check whether a set of ranks contains five in a row.

    Duplicates are ignored. The wheel (A-2-3-4-5) qualifies; no other
    wrap-around does.

    Args:
        ranks: Ranks in any order

    Returns:
        True if a straight can be formed
    """
    unique = distinct_ranks(ranks)
    if len(unique) < STRAIGHT_LENGTH:
        return False

    for i in range(len(unique) - STRAIGHT_LENGTH + 1):
        if unique[i + STRAIGHT_LENGTH - 1] - unique[i] == STRAIGHT_LENGTH - 1:
            return True

    return WHEEL_RANKS.issubset(unique)


def is_one_pair(cards: Sequence[Card]) -> bool:
    return _count_ranks_with(cards, 2) == 1


def is_two_pair(cards: Sequence[Card]) -> bool:
    return _count_ranks_with(cards, 2) >= 2


def is_three_of_a_kind(cards: Sequence[Card]) -> bool:
    return _count_ranks_with(cards, 3) == 1


def is_four_of_a_kind(cards: Sequence[Card]) -> bool:
    return _count_ranks_with(cards, 4) == 1


def is_full_house(cards: Sequence[Card]) -> bool:
    """Three of one rank and at least two of a different rank.

    The triple's own rank is never counted as the pair, so four of a kind
    alone does not qualify.
    """
    rank_counts = get_rank_counts(cards)
    for triple_rank, count in rank_counts.items():
        if count < 3:
            continue
        if any(rank != triple_rank and c >= 2 for rank, c in rank_counts.items()):
            return True
    return False


def is_straight(cards: Sequence[Card]) -> bool:
    return has_straight_run([card.rank for card in cards])


def is_flush(cards: Sequence[Card]) -> bool:
    return any(count >= FLUSH_SIZE for count in get_suit_counts(cards).values())


def is_straight_flush(cards: Sequence[Card]) -> bool:
    """A straight (wheel included) made entirely of one suit's cards."""
    for ranks in group_ranks_by_suit(cards).values():
        if len(ranks) >= FLUSH_SIZE and has_straight_run(ranks):
            return True
    return False


def is_royal_flush(cards: Sequence[Card]) -> bool:
    """T, J, Q, K and A all present in one suit."""
    for ranks in group_ranks_by_suit(cards).values():
        if ROYAL_RANKS.issubset(ranks):
            return True
    return False


# Strongest first. classify_hand returns the first category whose detector matches.
HAND_DETECTORS: Tuple[Tuple[Category, Callable[[Sequence[Card]], bool]], ...] = (
    (Category.ROYAL_FLUSH, is_royal_flush),
    (Category.STRAIGHT_FLUSH, is_straight_flush),
    (Category.FOUR_OF_A_KIND, is_four_of_a_kind),
    (Category.FULL_HOUSE, is_full_house),
    (Category.FLUSH, is_flush),
    (Category.STRAIGHT, is_straight),
    (Category.THREE_OF_A_KIND, is_three_of_a_kind),
    (Category.TWO_PAIR, is_two_pair),
    (Category.ONE_PAIR, is_one_pair),
)


def classify_hand(cards: Sequence[Card]) -> Category:
    """Classify a five-card hand.

    Args:
        cards: Exactly five Card objects

    Returns:
        The strongest Category the hand satisfies

    Raises:
        InvalidHandSize: If the hand does not hold exactly five cards
    """
    if len(cards) != HAND_SIZE:
        raise InvalidHandSize(HAND_SIZE, len(cards))

    for category, detector in HAND_DETECTORS:
        if detector(cards):
            return category
    return Category.NO_MATCH


def get_categories() -> List[Category]:
    """All categories, weakest first."""
    return list(Category)


def describe_categories() -> dict:
    """Get a description of requirements for each category.

    Returns:
        Dict mapping Category to description string
    """
    return {
        Category.NO_MATCH: "No other category applies",
        Category.ONE_PAIR: "Two cards of the same rank",
        Category.TWO_PAIR: "Two different pairs",
        Category.THREE_OF_A_KIND: "Three cards of the same rank",
        Category.STRAIGHT: "Five consecutive ranks (A-2-3-4-5 allowed)",
        Category.FLUSH: "Five cards of the same suit",
        Category.FULL_HOUSE: "Three of a kind plus a pair of another rank",
        Category.FOUR_OF_A_KIND: "Four cards of the same rank",
        Category.STRAIGHT_FLUSH: "A straight within a single suit",
        Category.ROYAL_FLUSH: "T-J-Q-K-A of a single suit",
    }


# Helper functions for creating hands for testing


def make_cards_from_ranks(ranks: List[Rank], suits: Optional[List[Suit]] = None) -> List[Card]:
    """Create cards from a list of ranks and optional suits.

    If suits not provided, cycles through suits for variety.

    Args:
        ranks: List of Rank values
        suits: Optional list of Suit values (must match length of ranks if provided)

    Returns:
        List of Card objects
    """
    if suits is None:
        suits = [Suit(i % 4) for i in range(len(ranks))]

    if len(ranks) != len(suits):
        raise ValueError("ranks and suits must have same length")

    return [Card(rank=r, suit=s) for r, s in zip(ranks, suits)]


def make_cards_from_string(s: str) -> List[Card]:
    """Parse cards from a string like "TC JC QC KC AC".

    Args:
        s: Space-separated card tokens

    Returns:
        List of Card objects
    """
    return parse_hand(s.split())
