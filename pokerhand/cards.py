import random
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterator, Optional

RANK_SYMBOLS = "A23456789TJQK"
SUIT_SYMBOLS = {"h": "♥", "d": "♦", "c": "♣", "s": "♠"}


class InvalidRankValue(ValueError):
    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid rank value: {value!r}")


class Suit(Enum):
    HEARTS = "h"
    DIAMONDS = "d"
    CLUBS = "c"
    SPADES = "s"

    @property
    def symbol(self) -> str:
        return SUIT_SYMBOLS[self.value]

    def __str__(self) -> str:
        return self.name.title()


SUIT_ORDER = {s: i for i, s in enumerate(Suit)}


class Rank(IntEnum):
    """Card ranks, Ace low. The integer value is the canonical 1-13 mapping."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    @classmethod
    def from_int(cls, value: int) -> "Rank":
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidRankValue(value)
        if not cls.ACE <= value <= cls.KING:
            raise InvalidRankValue(value)
        return cls(value)

    @classmethod
    def from_symbol(cls, symbol: str) -> "Rank":
        idx = RANK_SYMBOLS.find(symbol.upper())
        if len(symbol) != 1 or idx < 0:
            raise ValueError(f"Invalid rank: {symbol}")
        return cls(idx + 1)

    def to_int(self) -> int:
        return int(self)

    @property
    def symbol(self) -> str:
        return RANK_SYMBOLS[self - 1]

    def __str__(self) -> str:
        return self.name.title()


@dataclass(frozen=True)
class Card:
    rank: Rank
    suit: Suit

    def __post_init__(self):
        if not isinstance(self.rank, Rank):
            raise ValueError(f"Invalid rank: {self.rank}")
        if not isinstance(self.suit, Suit):
            raise ValueError(f"Invalid suit: {self.suit}")

    @property
    def value(self) -> int:
        return int(self.rank)

    def __str__(self) -> str:
        return f"{self.rank} of {self.suit}"

    def __repr__(self) -> str:
        return f"Card('{self.notation()}')"

    def notation(self) -> str:
        return f"{self.rank.symbol}{self.suit.value}"

    def pretty(self) -> str:
        return f"{self.rank.symbol}{self.suit.symbol}"

    def __lt__(self, other: "Card") -> bool:
        return sort_key(self) < sort_key(other)


def sort_key(card: Card) -> tuple[int, int]:
    return card.value, SUIT_ORDER[card.suit]


def parse_card(notation: str) -> Card:
    notation = notation.strip()
    if len(notation) != 2:
        raise ValueError(f"Invalid card notation: {notation}")
    try:
        suit = Suit(notation[1].lower())
    except ValueError:
        raise ValueError(f"Invalid suit: {notation[1]}") from None
    return Card(Rank.from_symbol(notation[0]), suit)


def parse_cards(notation: str) -> list[Card]:
    notation = notation.strip().replace(" ", "").replace(",", "")
    if len(notation) % 2 != 0:
        raise ValueError(f"Invalid hand notation: {notation}")
    return [parse_card(notation[i:i+2]) for i in range(0, len(notation), 2)]


class Deck:
    def __init__(self):
        self.cards = [Card(r, s) for s in Suit for r in Rank]

    def shuffle(self, rng: Optional[random.Random] = None):
        if rng is None:
            rng = random.Random()
        rng.shuffle(self.cards)
        return self

    def deal(self) -> Optional[Card]:
        """Remove the top card, or return None once the deck is empty."""
        if not self.cards:
            return None
        return self.cards.pop()

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __contains__(self, card: object) -> bool:
        return card in self.cards


class Hand:
    def __init__(self, cards: Optional[list[Card]] = None):
        self.cards: list[Card] = list(cards) if cards else []

    def add_card(self, card: Card):
        self.cards.append(card)

    def sort(self):
        # equal ranks fall back to suit declaration order
        self.cards.sort(key=sort_key)
        return self

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)
