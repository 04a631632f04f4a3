"""Poker rules implementations.

This module provides:
- Card and rank definitions, token parsing and input errors (ranks.py)
- Hand category detection and classification (hands.py)
- Same-category tie-breaking (tiebreak.py)
"""

from .ranks import (
    Rank,
    Suit,
    Card,
    RANK_SYMBOLS,
    SUIT_SYMBOLS,
    SUIT_GLYPHS,
    WHEEL_RANKS,
    ROYAL_RANKS,
    CardError,
    InvalidCardFormat,
    InvalidRank,
    InvalidSuit,
    DuplicateCard,
    InvalidHandSize,
    parse_card,
    parse_hand,
    make_complete_hand,
    get_rank_counts,
    get_suit_counts,
    group_ranks_by_suit,
    distinct_ranks,
    create_standard_deck,
    sort_cards,
    format_cards,
)

from .hands import (
    Category,
    CATEGORY_NAMES,
    HAND_SIZE,
    HAND_DETECTORS,
    has_straight_run,
    is_one_pair,
    is_two_pair,
    is_three_of_a_kind,
    is_straight,
    is_flush,
    is_full_house,
    is_four_of_a_kind,
    is_straight_flush,
    is_royal_flush,
    classify_hand,
    get_categories,
    describe_categories,
    make_cards_from_ranks,
    make_cards_from_string,
)

from .tiebreak import (
    HandComparator,
    strength_key,
    compare_same_category,
)

__all__ = [
    # Ranks
    "Rank",
    "Suit",
    "Card",
    "RANK_SYMBOLS",
    "SUIT_SYMBOLS",
    "SUIT_GLYPHS",
    "WHEEL_RANKS",
    "ROYAL_RANKS",
    "CardError",
    "InvalidCardFormat",
    "InvalidRank",
    "InvalidSuit",
    "DuplicateCard",
    "InvalidHandSize",
    "parse_card",
    "parse_hand",
    "make_complete_hand",
    "get_rank_counts",
    "get_suit_counts",
    "group_ranks_by_suit",
    "distinct_ranks",
    "create_standard_deck",
    "sort_cards",
    "format_cards",
    # Hands
    "Category",
    "CATEGORY_NAMES",
    "HAND_SIZE",
    "HAND_DETECTORS",
    "has_straight_run",
    "is_one_pair",
    "is_two_pair",
    "is_three_of_a_kind",
    "is_straight",
    "is_flush",
    "is_full_house",
    "is_four_of_a_kind",
    "is_straight_flush",
    "is_royal_flush",
    "classify_hand",
    "get_categories",
    "describe_categories",
    "make_cards_from_ranks",
    "make_cards_from_string",
    # Tie-breaking
    "HandComparator",
    "strength_key",
    "compare_same_category",
]
