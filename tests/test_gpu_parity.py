"""Parity checks for the batched classifier against the CPU rules.

Every row classified on a torch device must match classify_hand, and the
batched best-of-seven category must match select_best_hand.
"""

from typing import List
import random

import numpy as np
import pytest
import torch

from holdem_eval.rules import (
    Card,
    Category,
    InvalidHandSize,
    classify_hand,
    create_standard_deck,
    make_cards_from_string,
)
from holdem_eval.selection import (
    FIVE_OF_SEVEN,
    GPUHandClassifier,
    encode_hands,
    select_best_hand,
)

KNOWN_HANDS = [
    "TC JC QC KC AC",
    "9C TC JC QC KC",
    "AH 2H 3H 4H 5H",
    "7C 7D 7H 7S 9C",
    "2C 2S 2D 5H 5C",
    "2H 7H 9H JH KH",
    "AC 2D 3H 4S 5C",
    "TC JD QH KS AC",
    "QC KD AH 2S 3C",
    "7C 7D 7H 2S 9C",
    "2C 2D 5H 5S 9C",
    "2C 2D 5H 7S 9C",
    "2C 4D 6H 8S TC",
]


def _random_hands(rng: random.Random, count: int, size: int) -> List[List[Card]]:
    deck = create_standard_deck()
    return [rng.sample(deck, size) for _ in range(count)]


@pytest.fixture
def classifier() -> GPUHandClassifier:
    return GPUHandClassifier(torch.device("cpu"))


def test_encode_hands_shapes():
    hands = [make_cards_from_string("AC 2D 3H 4S 5C"), make_cards_from_string("TC JC QC KC AC")]
    ranks, suits = encode_hands(hands, torch.device("cpu"))
    assert ranks.shape == (2, 5)
    assert suits.shape == (2, 5)
    assert ranks.dtype == torch.long
    np.testing.assert_array_equal(ranks[0].numpy(), np.array([14, 2, 3, 4, 5]))


def test_known_hands_match_cpu(classifier):
    hands = [make_cards_from_string(h) for h in KNOWN_HANDS]
    got = classifier.classify_cards(hands).tolist()
    expected = [int(classify_hand(h)) for h in hands]
    assert got == expected
    assert set(got) == {int(c) for c in Category}


def test_random_five_card_hands_match_cpu(classifier):
    hands = _random_hands(random.Random(123), 2000, 5)
    got = classifier.classify_cards(hands).tolist()
    for hand, category in zip(hands, got):
        assert category == int(classify_hand(hand)), hand


def test_random_seven_card_best_category_matches_cpu(classifier):
    hands = _random_hands(random.Random(321), 300, 7)
    categories, combo_idx = classifier.best_category_cards(hands)
    for hand, category, idx in zip(hands, categories.tolist(), combo_idx.tolist()):
        assert category == int(select_best_hand(hand).category), hand
        subset = [hand[i] for i in FIVE_OF_SEVEN[idx]]
        assert int(classify_hand(subset)) == category


def test_best_combo_is_first_reaching_category(classifier):
    hand = make_cards_from_string("4C 4D 4S 4H 3D 3H 2C")
    categories, combo_idx = classifier.best_category_cards([hand])
    assert categories.tolist() == [int(Category.FOUR_OF_A_KIND)]
    assert combo_idx.tolist() == [0]


def test_wrong_width_rejected(classifier):
    ranks, suits = encode_hands([make_cards_from_string("2C 4D 6H 8S TC QD AH")], classifier.device)
    with pytest.raises(InvalidHandSize):
        classifier.classify_batched(ranks, suits)

    ranks, suits = encode_hands([make_cards_from_string("2C 4D 6H 8S TC")], classifier.device)
    with pytest.raises(InvalidHandSize):
        classifier.best_category_batched(ranks, suits)


def test_empty_batch_returns_empty_tensors(classifier):
    got = classifier.classify_cards([])
    assert got.shape == (0,)
    assert got.dtype == torch.long

    categories, combo_idx = classifier.best_category_cards([])
    assert categories.shape == (0,)
    assert combo_idx.shape == (0,)
    assert categories.dtype == torch.long


def test_mixed_hand_sizes_rejected(classifier):
    hands = [make_cards_from_string("2C 4D 6H 8S TC"), make_cards_from_string("AC KD")]
    with pytest.raises(InvalidHandSize) as excinfo:
        encode_hands(hands, classifier.device)
    assert excinfo.value.expected == 5
    assert excinfo.value.actual == 2

    with pytest.raises(InvalidHandSize):
        classifier.classify_cards(hands)
