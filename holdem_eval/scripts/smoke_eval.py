#!/usr/bin/env python3
"""Smoke test for the hand evaluator.

This script deals N random seven-card sets and verifies:
- The CPU selector returns five distinct cards taken from the deal
- The returned category matches a re-classification of those five cards
- The batched classifier agrees with the CPU selector on every category

It then prints the category frequencies.

Usage:
    python -m holdem_eval.scripts.smoke_eval --hands 1000
    python -m holdem_eval.scripts.smoke_eval --hands 5000 --seed 42 --device cuda
"""

import argparse
import logging
import random
import sys
import time
from collections import Counter
from dataclasses import dataclass
from typing import List, Optional

import torch
from rich.console import Console
from rich.table import Table
from rich import box

from holdem_eval.engine import deal_hand
from holdem_eval.rules import Category, classify_hand
from holdem_eval.selection import GPUHandClassifier, select_best_hand
from holdem_eval.utils.seeding import set_seed

console = Console()
logger = logging.getLogger(__name__)


@dataclass
class SmokeConfig:
    """Smoke run configuration."""

    hands: int = 1000
    seed: Optional[int] = None
    device: str = "cpu"
    verbose: bool = False  # print every deal and its best hand


def run_smoke(config: SmokeConfig) -> dict:
    """Deal and evaluate hands, checking CPU and batched results agree.

    Args:
        config: Run configuration

    Returns:
        Dict with run statistics
    """
    seed = set_seed(config.seed)
    rng = random.Random(seed)
    device = torch.device(config.device)

    stats = {
        "seed": seed,
        "hands": 0,
        "selection_errors": 0,
        "parity_errors": 0,
        "categories": Counter(),
    }

    deals = [deal_hand(rng=rng) for _ in range(config.hands)]
    cpu_categories: List[Category] = []

    for deal in deals:
        cards = deal.cards
        best = select_best_hand(cards)
        stats["hands"] += 1
        stats["categories"][best.category] += 1
        cpu_categories.append(best.category)

        if config.verbose:
            console.print(f"  {deal} -> {best}", markup=False)

        if len(set(best.cards)) != 5 or not set(best.cards).issubset(cards):
            stats["selection_errors"] += 1
            logger.warning("Selected cards not drawn from deal: %s -> %s", deal, best)
        elif classify_hand(best.cards) != best.category:
            stats["selection_errors"] += 1
            logger.warning("Category mismatch on re-classification: %s -> %s", deal, best)

    if deals:
        classifier = GPUHandClassifier(device)
        batched, _ = classifier.best_category_cards([deal.cards for deal in deals])
        for deal, expected, got in zip(deals, cpu_categories, batched.tolist()):
            if int(expected) != got:
                stats["parity_errors"] += 1
                logger.warning(
                    "Batched category %s != CPU %s for %s", Category(got).name, expected.name, deal
                )

    return stats


def render_frequencies(stats: dict) -> Table:
    """Category frequency table."""
    table = Table(title="Category Frequencies", box=box.SIMPLE)
    table.add_column("Category")
    table.add_column("Count", justify="right")
    table.add_column("Share", justify="right")

    total = max(stats["hands"], 1)
    for category in reversed(list(Category)):
        count = stats["categories"].get(category, 0)
        table.add_row(category.display_name, str(count), f"{100.0 * count / total:.2f}%")
    return table


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Smoke test for the hand evaluator")
    parser.add_argument(
        "--hands",
        type=int,
        default=1000,
        help="Number of seven-card sets to deal (default: 1000)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed (default: None for random)",
    )
    parser.add_argument(
        "--device",
        type=str,
        default="cpu",
        help="Torch device for the batched classifier (default: cpu)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    config = SmokeConfig(hands=args.hands, seed=args.seed, device=args.device, verbose=args.verbose)
    if config.hands < 0:
        console.print("[red]--hands must be >= 0[/red]")
        return 2

    console.print(f"Evaluating {config.hands} hand(s) on {config.device}...")
    start_time = time.time()
    stats = run_smoke(config)
    elapsed = time.time() - start_time

    console.print(render_frequencies(stats))
    console.print(f"  Seed: {stats['seed']}")
    console.print(f"  Time: {elapsed:.2f}s")
    console.print(f"  Selection errors: {stats['selection_errors']}")
    console.print(f"  Parity errors: {stats['parity_errors']}")

    errors = stats["selection_errors"] + stats["parity_errors"]
    if errors > 0:
        console.print(f"\n[red]FAILED: {errors} error(s) detected[/red]")
        return 1

    console.print("\n[green]PASSED: All hands evaluated consistently[/green]")
    return 0


if __name__ == "__main__":
    sys.exit(main())
