"""Card rank definitions, token parsing and counting utilities.

Rank order (high to low): A > K > Q > J > T > 9 > 8 > 7 > 6 > 5 > 4 > 3 > 2
The Ace may also play low in the wheel straight (A-2-3-4-5).

This module provides:
- Rank and suit constants
- Card representation and strict token parsing
- The input validation error taxonomy
- Rank and suit counting helpers
"""

from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Sequence, Tuple


class Rank(IntEnum):
    """Card ranks, valued by their pip count (Ace = 14)."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


class Suit(IntEnum):
    """Card suits. No suit outranks another."""

    CLUB = 0
    SPADE = 1
    DIAMOND = 2
    HEART = 3


# Token characters
RANK_SYMBOLS = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "T",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

SUIT_SYMBOLS = {
    Suit.CLUB: "C",
    Suit.SPADE: "S",
    Suit.DIAMOND: "D",
    Suit.HEART: "H",
}

# Suit glyphs for display
SUIT_GLYPHS = {
    Suit.CLUB: "♣",
    Suit.SPADE: "♠",
    Suit.DIAMOND: "♦",
    Suit.HEART: "♥",
}

SYMBOL_TO_RANK = {v: k for k, v in RANK_SYMBOLS.items()}
SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}

# A-2-3-4-5, the only straight where the Ace plays low
WHEEL_RANKS = frozenset([Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE, Rank.ACE])

# T-J-Q-K-A
ROYAL_RANKS = frozenset([Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING, Rank.ACE])

TOKEN_LENGTH = 2


class CardError(ValueError):
    """Base class for rejected card input."""

    pass


class InvalidCardFormat(CardError):
    """Raised when a card token is not exactly two characters."""

    pass


class InvalidRank(CardError):
    """Raised when a card token has an unknown rank character."""

    pass


class InvalidSuit(CardError):
    """Raised when a card token has an unknown suit character."""

    pass


class DuplicateCard(CardError):
    """Raised when the same card appears twice in one evaluation set."""

    def __init__(self, token: str):
        super().__init__(f"Duplicate card found: {token}")
        self.token = token


class InvalidHandSize(CardError):
    """Raised when an operation receives the wrong number of cards."""

    def __init__(self, expected: int, actual: int):
        super().__init__(f"Expected {expected} cards, got {actual}")
        self.expected = expected
        self.actual = actual


@dataclass(frozen=True, order=True)
class Card:
    """A playing card with rank and suit.

    Cards are ordered by rank first (for sorting hands), then by suit.
    Immutable and hashable for use in sets.
    """

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{RANK_SYMBOLS[self.rank]}{SUIT_SYMBOLS[self.suit]}"

    def __repr__(self) -> str:
        return f"Card({self})"

    @property
    def pretty(self) -> str:
        """Rank symbol followed by the suit glyph, e.g. 'A♠'."""
        return f"{RANK_SYMBOLS[self.rank]}{SUIT_GLYPHS[self.suit]}"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse a card from a token like 'AC' or 'TD'. See parse_card."""
        return parse_card(s)


def parse_card(token: str) -> Card:
    """Parse a two-character card token.

    Args:
        token: Rank character followed by suit character, e.g. "9H"

    Returns:
        Card object

    Raises:
        InvalidCardFormat: If the token is not a 2-character string
        InvalidRank: If the rank character is not one of 23456789TJQKA
        InvalidSuit: If the suit character is not one of CSDH
    """
    if not isinstance(token, str) or len(token) != TOKEN_LENGTH:
        raise InvalidCardFormat(f"wrong card format: {token!r}")

    rank_char, suit_char = token
    if rank_char not in SYMBOL_TO_RANK:
        raise InvalidRank(f"Invalid rank character: {rank_char!r} in {token!r}")
    if suit_char not in SYMBOL_TO_SUIT:
        raise InvalidSuit(f"Invalid suit character: {suit_char!r} in {token!r}")

    return Card(rank=SYMBOL_TO_RANK[rank_char], suit=SYMBOL_TO_SUIT[suit_char])


def parse_hand(tokens: Iterable[str], existing: Iterable[Card] = ()) -> List[Card]:
    """Parse card tokens in order, rejecting duplicates.

    Duplicates are checked across the union of ``existing`` and the new
    tokens, so hole and community cards can be validated as one set.

    Args:
        tokens: Card tokens
        existing: Cards already in the evaluation set

    Returns:
        List of newly parsed Card objects, in token order

    Raises:
        DuplicateCard: If a card identity appears twice
    """
    seen = set(existing)
    cards = []
    for token in tokens:
        card = parse_card(token)
        if card in seen:
            raise DuplicateCard(token)
        seen.add(card)
        cards.append(card)
    return cards


def make_complete_hand(hole: Iterable[str], community: Iterable[str]) -> List[Card]:
    """Combine community and hole tokens into one validated card list.

    Community cards come first, followed by the hole cards.
    """
    cards = parse_hand(community)
    cards.extend(parse_hand(hole, existing=cards))
    return cards


def get_rank_counts(cards: Iterable[Card]) -> Mapping[Rank, int]:
    """Count occurrences of each rank.

    Returns:
        Read-only mapping of Rank to count
    """
    return MappingProxyType(dict(Counter(card.rank for card in cards)))


def get_suit_counts(cards: Iterable[Card]) -> Mapping[Suit, int]:
    """Count occurrences of each suit.

    Returns:
        Read-only mapping of Suit to count
    """
    return MappingProxyType(dict(Counter(card.suit for card in cards)))


def group_ranks_by_suit(cards: Iterable[Card]) -> Mapping[Suit, Tuple[Rank, ...]]:
    """Group card ranks by suit.

    Returns:
        Read-only mapping of Suit to its ranks sorted ascending
    """
    groups: Dict[Suit, List[Rank]] = {}
    for card in cards:
        groups.setdefault(card.suit, []).append(card.rank)
    return MappingProxyType({suit: tuple(sorted(ranks)) for suit, ranks in groups.items()})


def distinct_ranks(ranks: Iterable[Rank]) -> List[Rank]:
    """Sorted ascending list of unique ranks."""
    return sorted(set(ranks))


def create_standard_deck() -> List[Card]:
    """Create a standard 52-card deck.

    Returns:
        List of 52 Card objects (13 ranks × 4 suits)
    """
    return [Card(rank=rank, suit=suit) for suit in Suit for rank in Rank]


def sort_cards(cards: Iterable[Card], descending: bool = False) -> List[Card]:
    """Sort cards by rank, then by suit."""
    return sorted(cards, reverse=descending)


def format_cards(cards: Sequence[Card]) -> str:
    """Space-separated tokens, e.g. 'AC KD 7H'."""
    return " ".join(str(card) for card in cards)
