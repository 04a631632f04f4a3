"""Dealing a single player's seven-card evaluation set.

Deal flow:
1. Shuffle a standard 52-card deck
2. Deal 2 hole cards
3. Deal 5 community cards

Only one player's cards are dealt; showdowns between players are left to the
surrounding game.
"""

import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from holdem_eval.rules import Card, create_standard_deck, format_cards
from holdem_eval.selection.best_hand import COMMUNITY_SIZE, HOLE_SIZE


@dataclass(frozen=True)
class Deal:
    """One player's hole cards and the community cards.

    Attributes:
        hole: The player's private cards
        community: The shared board cards
    """

    hole: Tuple[Card, ...]
    community: Tuple[Card, ...]

    @property
    def cards(self) -> List[Card]:
        """Community then hole cards, the order make_complete_hand produces."""
        return list(self.community) + list(self.hole)

    def __str__(self) -> str:
        return f"hole=[{format_cards(self.hole)}] board=[{format_cards(self.community)}]"


def deal_hand(seed: Optional[int] = None, rng: Optional[random.Random] = None) -> Deal:
    """Shuffle a fresh deck and deal hole and community cards.

    Args:
        seed: Random seed for reproducibility (ignored when rng is given)
        rng: Random number generator to shuffle with

    Returns:
        Deal with 2 hole cards and 5 community cards
    """
    if rng is None:
        rng = random.Random(seed)

    deck = create_standard_deck()
    rng.shuffle(deck)

    hole = tuple(deck[:HOLE_SIZE])
    community = tuple(deck[HOLE_SIZE : HOLE_SIZE + COMMUNITY_SIZE])
    return Deal(hole=hole, community=community)
