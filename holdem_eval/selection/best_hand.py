"""Best five-card hand selection from seven cards.

This module provides:
- The fixed table of the 21 five-of-seven index combinations
- Candidate enumeration over a seven-card set
- Selection of the strongest candidate under (category, tie-break)

Selection rules:
- A candidate replaces the running best if its category is higher, or if the
  categories match and the comparator ranks it strictly better
- The first candidate seeds the search; ties keep the earlier candidate, so a
  fixed input order always produces the same result
"""

import logging
from dataclasses import dataclass
from itertools import combinations
from typing import Iterable, Iterator, Optional, Sequence, Tuple

from holdem_eval.rules import (
    Card,
    Category,
    DuplicateCard,
    HandComparator,
    InvalidHandSize,
    HAND_SIZE,
    classify_hand,
    compare_same_category,
    format_cards,
    make_complete_hand,
)

logger = logging.getLogger(__name__)

# Two hole cards plus five community cards
HOLE_SIZE = 2
COMMUNITY_SIZE = 5
FULL_SET_SIZE = HOLE_SIZE + COMMUNITY_SIZE

# All C(7,5) = 21 index combinations, in lexicographic order
FIVE_OF_SEVEN: Tuple[Tuple[int, ...], ...] = tuple(combinations(range(FULL_SET_SIZE), HAND_SIZE))


@dataclass(frozen=True)
class BestHand:
    """The strongest five-card hand found in a seven-card set.

    Attributes:
        cards: The five chosen cards, in input order
        category: Category of the chosen cards
    """

    cards: Tuple[Card, ...]
    category: Category

    def __str__(self) -> str:
        return f"{self.category.display_name}({format_cards(self.cards)})"

    @property
    def tokens(self) -> Tuple[str, ...]:
        """The chosen cards as card tokens."""
        return tuple(str(card) for card in self.cards)


def _check_full_set(cards: Sequence[Card]) -> None:
    if len(cards) != FULL_SET_SIZE:
        raise InvalidHandSize(FULL_SET_SIZE, len(cards))

    seen = set()
    for card in cards:
        if card in seen:
            raise DuplicateCard(str(card))
        seen.add(card)


def iter_candidate_hands(cards: Sequence[Card]) -> Iterator[Tuple[Card, ...]]:
    """Yield every five-card subset of a seven-card set.

    Args:
        cards: Exactly seven distinct Card objects

    Yields:
        Tuples of five cards, one per entry of FIVE_OF_SEVEN

    Raises:
        InvalidHandSize: If cards does not hold exactly seven cards
        DuplicateCard: If a card appears twice
    """
    _check_full_set(cards)
    for indices in FIVE_OF_SEVEN:
        yield tuple(cards[i] for i in indices)


def select_best_hand(
    cards: Sequence[Card],
    compare: Optional[HandComparator] = None,
) -> BestHand:
    """Pick the strongest five-card hand out of seven cards.

    Args:
        cards: Exactly seven distinct Card objects
        compare: Same-category comparator; defaults to compare_same_category

    Returns:
        BestHand with the chosen cards and their category

    Raises:
        InvalidHandSize: If cards does not hold exactly seven cards
        DuplicateCard: If a card appears twice
    """
    if compare is None:
        compare = compare_same_category

    best_cards: Optional[Tuple[Card, ...]] = None
    best_category = Category.NO_MATCH

    for candidate in iter_candidate_hands(cards):
        category = classify_hand(candidate)
        if best_cards is None:
            best_cards, best_category = candidate, category
            continue
        if category > best_category or (
            category == best_category and compare(candidate, best_cards) > 0
        ):
            best_cards, best_category = candidate, category

    best = BestHand(cards=best_cards, category=best_category)
    logger.debug("Best hand from %s: %s", format_cards(cards), best)
    return best


def evaluate_player(
    hole: Iterable[str],
    community: Iterable[str],
    compare: Optional[HandComparator] = None,
) -> BestHand:
    """Parse one player's hole and community tokens and select the best hand.

    Args:
        hole: The player's two hole card tokens
        community: The five community card tokens
        compare: Same-category comparator; defaults to compare_same_category

    Returns:
        BestHand for the combined seven cards

    Raises:
        CardError: If any token is malformed, a card is repeated, or the
            combined set is not seven cards
    """
    return select_best_hand(make_complete_hand(hole, community), compare=compare)
