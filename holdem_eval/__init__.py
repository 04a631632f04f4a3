"""holdem-eval - Texas Hold'em hand evaluation.

Classifies five-card poker hands into the ten standard categories and picks
the best five-card hand out of a player's seven cards.
"""

__version__ = "0.1.0"
__author__ = "holdem-eval contributors"

from holdem_eval.rules import Card, Category, CardError, classify_hand, parse_card, parse_hand
from holdem_eval.selection import BestHand, evaluate_player, select_best_hand
from holdem_eval.utils.seeding import set_seed

__all__ = [
    "__version__",
    "Card",
    "Category",
    "CardError",
    "BestHand",
    "classify_hand",
    "parse_card",
    "parse_hand",
    "select_best_hand",
    "evaluate_player",
    "set_seed",
]
