import logging
import random
from dataclasses import dataclass
from typing import Optional

from pokerhand.cards import Deck, Hand
from pokerhand.config import HAND_SIZE
from pokerhand.hand_evaluator import HandAnalysis, evaluate

logger = logging.getLogger(__name__)


class DeckExhausted(RuntimeError):
    def __init__(self, requested: int, dealt: int):
        self.requested = requested
        self.dealt = dealt
        super().__init__(f"Failed to deal a card from the deck: {dealt} of {requested} dealt")


@dataclass
class Round:
    hand: Hand
    analysis: HandAnalysis
    seed: Optional[int] = None


def deal_hand(deck: Deck, size: int = HAND_SIZE) -> Hand:
    hand = Hand()
    for _ in range(size):
        card = deck.deal()
        if card is None:
            raise DeckExhausted(size, len(hand))
        hand.add_card(card)
    logger.debug("dealt %d cards, %d left in deck", len(hand), len(deck))
    return hand


def play_round(rng: Optional[random.Random] = None, seed: Optional[int] = None) -> Round:
    """Shuffle a fresh deck, deal a hand, sort it and evaluate it.

    An explicit ``rng`` wins over ``seed``; with neither the shuffle is
    seeded from the process random source.
    """
    if rng is None and seed is not None:
        rng = random.Random(seed)
    deck = Deck().shuffle(rng)
    hand = deal_hand(deck).sort()
    analysis = evaluate(hand.cards)
    logger.info("hand %s -> %s", " ".join(c.notation() for c in hand), analysis.best.label)
    return Round(hand, analysis, seed)
