import logging
import random

import click
from rich.console import Console

from pokerhand.cards import Deck, parse_cards
from pokerhand.config import LOG_LEVEL, LOG_LEVELS, setup_logging
from pokerhand.display import render_hand, render_round
from pokerhand.game import DeckExhausted, play_round
from pokerhand.hand_evaluator import evaluate

logger = logging.getLogger(__name__)


@click.group()
@click.option("--log-level", type=click.Choice(LOG_LEVELS, case_sensitive=False),
              default=LOG_LEVEL, envvar="POKERHAND_LOG_LEVEL", show_default=True)
def main(log_level):
    """Deal ten cards and classify the hand."""
    setup_logging(log_level)


@main.command()
@click.option("--seed", type=int, default=None, help="Seed the shuffle for a repeatable deal.")
def deal(seed):
    """Shuffle a fresh deck, deal a hand and report what it holds."""
    try:
        result = play_round(seed=seed)
    except DeckExhausted as e:
        raise click.ClickException(str(e))
    render_round(Console(), result.hand, result.analysis)


@main.command("evaluate")
@click.argument("cards", nargs=-1, required=True)
def evaluate_cmd(cards):
    """Evaluate the given cards, e.g. 2h 2d 2c 5s 5h 9d 9c 9s 9h Ks."""
    try:
        parsed = parse_cards(" ".join(cards))
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="CARDS")
    if len(set(parsed)) != len(parsed):
        raise click.BadParameter("duplicate cards", param_hint="CARDS")
    parsed.sort()
    logger.debug("evaluating %d cards", len(parsed))
    render_round(Console(), parsed, evaluate(parsed))


@main.command("deck")
@click.option("--shuffle", "shuffled", is_flag=True, help="Shuffle before listing.")
@click.option("--seed", type=int, default=None)
def deck_cmd(shuffled, seed):
    """List the cards in a fresh deck, top card last."""
    deck = Deck()
    if shuffled:
        deck.shuffle(random.Random(seed))
    console = Console()
    render_hand(console, deck, title="The deck has:")
    console.print(f"{len(deck)} cards")


if __name__ == "__main__":
    main()
