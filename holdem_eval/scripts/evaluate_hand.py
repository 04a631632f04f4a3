#!/usr/bin/env python3
"""Evaluate one player's Texas Hold'em hand from the command line.

Prints the category and the best five cards out of the player's two hole
cards and the five community cards.

Usage:
    python -m holdem_eval.scripts.evaluate_hand --hole AC KC --board QC JC TC 2D 3S
    python -m holdem_eval.scripts.evaluate_hand --hole 4C 4D --board 4S 4H 3D 3H 2C --verbose
"""

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from rich.console import Console
from rich.table import Table
from rich import box
from rich.markup import escape

from holdem_eval.rules import Card, CardError, RANK_SYMBOLS, SUIT_GLYPHS, Suit, parse_hand
from holdem_eval.selection import BestHand, evaluate_player

console = Console()
logger = logging.getLogger(__name__)

SUIT_STYLES = {
    Suit.CLUB: "bold green1",
    Suit.SPADE: "bold cyan1",
    Suit.DIAMOND: "bold red1",
    Suit.HEART: "bold red1",
}

# Exit status for rejected input
EXIT_BAD_INPUT = 2


def card_markup(card: Card) -> str:
    """Rich markup for a card, colored by suit."""
    style = SUIT_STYLES[card.suit]
    return f"[{style}]{RANK_SYMBOLS[card.rank]}{SUIT_GLYPHS[card.suit]}[/{style}]"


def render_result(hole: Sequence[Card], board: Sequence[Card], best: BestHand) -> Table:
    """Build the result table."""
    table = Table(title="Hand Evaluation", box=box.SIMPLE, show_header=False)
    table.add_column("Field", style="dim")
    table.add_column("Value")
    table.add_row("Hole", " ".join(card_markup(card) for card in hole))
    table.add_row("Board", " ".join(card_markup(card) for card in board))
    table.add_row("Category", f"[bold yellow]{best.category.display_name}[/bold yellow]")
    table.add_row("Best five", " ".join(card_markup(card) for card in best.cards))
    return table


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Evaluate a Texas Hold'em hand")
    parser.add_argument(
        "--hole",
        nargs=2,
        required=True,
        metavar="CARD",
        help="The player's two hole cards, e.g. AC KD",
    )
    parser.add_argument(
        "--board",
        nargs=5,
        required=True,
        metavar="CARD",
        help="The five community cards",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        best = evaluate_player(args.hole, args.board)
        hole, board = parse_hand(args.hole), parse_hand(args.board)
    except CardError as exc:
        logger.debug("Rejected input", exc_info=True)
        console.print(f"[red]Invalid hand: {escape(str(exc))}[/red]")
        return EXIT_BAD_INPUT

    console.print(render_result(hole, board, best))
    return 0


if __name__ == "__main__":
    sys.exit(main())
