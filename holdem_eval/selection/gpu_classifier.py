"""GPU-accelerated batched hand classification.

This module provides:
- Encoding of card lists into rank/suit tensors
- Batched five-card classification using PyTorch
- Batched best category over the 21 five-of-seven subsets

Key insight: every category test reduces to per-rank counts, a flush flag and
a few rank-presence masks, so a whole batch can be classified with a handful
of tensor ops instead of running the detectors card by card.

Rows are classified exactly like classify_hand. best_category_batched only
reports the best category and the first subset reaching it; kicker
tie-breaks stay on the CPU selector.
"""

import logging
from typing import Sequence, Tuple

import numpy as np
import torch
import torch.nn.functional as F

from holdem_eval.rules.hands import HAND_SIZE, Category
from holdem_eval.rules.ranks import ROYAL_RANKS, WHEEL_RANKS, Card, InvalidHandSize
from holdem_eval.selection.best_hand import FIVE_OF_SEVEN, FULL_SET_SIZE

logger = logging.getLogger(__name__)

# One-hot width covering rank values 0..14 (only 2..14 are used)
NUM_RANK_SLOTS = 15


def encode_hands(
    hands: Sequence[Sequence[Card]], device: torch.device
) -> Tuple[torch.Tensor, torch.Tensor]:
    """Convert equally sized card lists into rank and suit tensors.

    Args:
        hands: B hands of N cards each
        device: Target device

    Returns:
        (ranks, suits), both [B, N] long tensors; [0, 0] for an empty batch

    Raises:
        InvalidHandSize: If a hand's size differs from the first hand's
    """
    if len(hands) == 0:
        empty = torch.zeros((0, 0), dtype=torch.long, device=device)
        return empty, empty.clone()

    width = len(hands[0])
    for hand in hands:
        if len(hand) != width:
            raise InvalidHandSize(width, len(hand))

    ranks = np.array([[int(card.rank) for card in hand] for hand in hands], dtype=np.int64)
    suits = np.array([[int(card.suit) for card in hand] for hand in hands], dtype=np.int64)
    return torch.from_numpy(ranks).to(device), torch.from_numpy(suits).to(device)


class GPUHandClassifier:
    """Batched hand classifier.

    Keeps constant tensors on the device to avoid CPU-GPU transfer overhead.
    """

    device: torch.device

    wheel_ranks: torch.Tensor  # [5] - A,2,3,4,5 rank values
    royal_ranks: torch.Tensor  # [5] - T,J,Q,K,A rank values
    combos: torch.Tensor  # [21, 5] - five-of-seven index table

    def __init__(self, device: torch.device):
        self.device = device
        self.wheel_ranks = torch.tensor(
            [int(r) for r in sorted(WHEEL_RANKS)], device=device, dtype=torch.long
        )
        self.royal_ranks = torch.tensor(
            [int(r) for r in sorted(ROYAL_RANKS)], device=device, dtype=torch.long
        )
        self.combos = torch.tensor(FIVE_OF_SEVEN, device=device, dtype=torch.long)

    def classify_batched(self, ranks: torch.Tensor, suits: torch.Tensor) -> torch.Tensor:
        """Classify a batch of five-card hands.

        Args:
            ranks: [B, 5] rank values (2..14)
            suits: [B, 5] suit values

        Returns:
            [B] long tensor of Category values
        """
        if ranks.dim() != 2 or ranks.shape[1] != HAND_SIZE:
            raise InvalidHandSize(HAND_SIZE, ranks.shape[-1] if ranks.dim() else 0)

        rank_counts = F.one_hot(ranks, NUM_RANK_SLOTS).sum(dim=1)  # [B, 15]
        present = rank_counts > 0
        num_pairs = (rank_counts == 2).sum(dim=1)
        num_trips = (rank_counts == 3).sum(dim=1)
        num_quads = (rank_counts == 4).sum(dim=1)
        num_distinct = present.sum(dim=1)

        flush = (suits == suits[:, :1]).all(dim=1)
        span = ranks.max(dim=1).values - ranks.min(dim=1).values
        wheel = present[:, self.wheel_ranks].all(dim=1)
        straight = (num_distinct == HAND_SIZE) & ((span == HAND_SIZE - 1) | wheel)
        royal = flush & present[:, self.royal_ranks].all(dim=1)

        # Weakest first; each later match overwrites the earlier one.
        categories = torch.zeros(ranks.shape[0], dtype=torch.long, device=ranks.device)
        ladder = (
            (Category.ONE_PAIR, num_pairs == 1),
            (Category.TWO_PAIR, num_pairs >= 2),
            (Category.THREE_OF_A_KIND, num_trips == 1),
            (Category.STRAIGHT, straight),
            (Category.FLUSH, flush),
            (Category.FULL_HOUSE, (num_trips >= 1) & (num_pairs >= 1)),
            (Category.FOUR_OF_A_KIND, num_quads == 1),
            (Category.STRAIGHT_FLUSH, straight & flush),
            (Category.ROYAL_FLUSH, royal),
        )
        for category, mask in ladder:
            categories = categories.masked_fill(mask, int(category))
        return categories

    def best_category_batched(
        self, ranks: torch.Tensor, suits: torch.Tensor
    ) -> Tuple[torch.Tensor, torch.Tensor]:
        """Best category over all five-card subsets of seven-card hands.

        Args:
            ranks: [B, 7] rank values
            suits: [B, 7] suit values

        Returns:
            (categories, combo_idx): [B] best Category values and [B] index
            into FIVE_OF_SEVEN of the first subset reaching that category
        """
        if ranks.dim() != 2 or ranks.shape[1] != FULL_SET_SIZE:
            raise InvalidHandSize(FULL_SET_SIZE, ranks.shape[-1] if ranks.dim() else 0)

        batch_size = ranks.shape[0]
        num_combos = self.combos.shape[0]
        sub_ranks = ranks[:, self.combos].reshape(-1, HAND_SIZE)  # [B*21, 5]
        sub_suits = suits[:, self.combos].reshape(-1, HAND_SIZE)

        per_combo = self.classify_batched(sub_ranks, sub_suits).view(batch_size, num_combos)
        combo_idx = per_combo.argmax(dim=1)
        categories = per_combo.gather(1, combo_idx.unsqueeze(1)).squeeze(1)

        logger.debug("Classified %d hands (%d subsets)", batch_size, batch_size * num_combos)
        return categories, combo_idx

    def classify_cards(self, hands: Sequence[Sequence[Card]]) -> torch.Tensor:
        """Classify five-card Card lists. Convenience wrapper over classify_batched."""
        if len(hands) == 0:
            return self._empty()
        return self.classify_batched(*encode_hands(hands, self.device))

    def best_category_cards(self, hands: Sequence[Sequence[Card]]) -> Tuple[torch.Tensor, torch.Tensor]:
        """Best category for seven-card Card lists."""
        if len(hands) == 0:
            return self._empty(), self._empty()
        return self.best_category_batched(*encode_hands(hands, self.device))

    def _empty(self) -> torch.Tensor:
        return torch.zeros(0, dtype=torch.long, device=self.device)
