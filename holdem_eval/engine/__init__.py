"""Card dealing.

This module provides:
- Deal: One player's hole and community cards
- deal_hand: Deal a seeded seven-card set
"""

from .dealing import Deal, deal_hand

__all__ = [
    "Deal",
    "deal_hand",
]
