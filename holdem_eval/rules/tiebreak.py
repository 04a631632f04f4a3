"""Same-category hand comparison.

The best-hand selector only needs an ordering between two five-card hands
that already share a category. Any callable matching HandComparator can be
plugged in; compare_same_category is the default.

Comparison rules:
- Ranks are compared group by group, larger groups first (the trips of a
  full house before its pair, a pair before its kickers)
- Within groups of equal size, higher ranks first
- In the wheel straight (A-2-3-4-5) the Ace counts as 1
- Suits never break ties
"""

from typing import Callable, Sequence, Tuple

from .ranks import Card, WHEEL_RANKS, get_rank_counts

# Positive if the first hand is better, negative if the second is, zero if equal.
HandComparator = Callable[[Sequence[Card], Sequence[Card]], int]

# Wheel straight keyed as five-high
WHEEL_KEY = (5, 4, 3, 2, 1)


def strength_key(cards: Sequence[Card]) -> Tuple[int, ...]:
    """Build a comparable key for a five-card hand.

    Keys are only meaningful between hands of the same category.

    Args:
        cards: Five Card objects

    Returns:
        Tuple of rank values, most significant first
    """
    rank_counts = get_rank_counts(cards)
    if len(rank_counts) == 5 and set(rank_counts) == WHEEL_RANKS:
        return WHEEL_KEY

    ordered = sorted(rank_counts, key=lambda r: (rank_counts[r], r), reverse=True)
    return tuple(int(rank) for rank in ordered)


def compare_same_category(hand1: Sequence[Card], hand2: Sequence[Card]) -> int:
    """Compare two hands of the same category.

    Returns:
        1 if hand1 is better, -1 if hand2 is better, 0 if they tie
    """
    key1 = strength_key(hand1)
    key2 = strength_key(hand2)
    if key1 > key2:
        return 1
    if key1 < key2:
        return -1
    return 0
