"""Best-hand selection.

This module provides:
- Five-of-seven best hand selection (best_hand.py)
- Batched classification on torch devices (gpu_classifier.py)
"""

from .best_hand import (
    HOLE_SIZE,
    COMMUNITY_SIZE,
    FULL_SET_SIZE,
    FIVE_OF_SEVEN,
    BestHand,
    iter_candidate_hands,
    select_best_hand,
    evaluate_player,
)

from .gpu_classifier import (
    GPUHandClassifier,
    encode_hands,
)

__all__ = [
    "HOLE_SIZE",
    "COMMUNITY_SIZE",
    "FULL_SET_SIZE",
    "FIVE_OF_SEVEN",
    "BestHand",
    "iter_candidate_hands",
    "select_best_hand",
    "evaluate_player",
    "GPUHandClassifier",
    "encode_hands",
]
