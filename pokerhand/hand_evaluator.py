from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Optional

from pokerhand.cards import Card, Rank, Suit
from pokerhand.config import FLUSH_SIZE, STRAIGHT_LENGTH


class HandCategory(IntEnum):
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title().replace(" Of A ", " of a ")

    def sentence(self) -> str:
        return f"This hand has a {self.label.lower()}"

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True)
class HandAnalysis:
    suit_counts: dict[Suit, int]
    rank_counts: dict[Rank, int]
    flush: bool
    pairs: int
    three_of_a_kind: bool
    four_of_a_kind: bool
    longest_run: int
    straight_high: Optional[Rank]
    straight_flush_high: Optional[Rank]
    matched: tuple[HandCategory, ...]
    best: HandCategory

    @property
    def straight(self) -> bool:
        return self.straight_high is not None

    @property
    def full_house(self) -> bool:
        return HandCategory.FULL_HOUSE in self.matched

    def trace(self) -> list[str]:
        return [c.sentence() for c in self.matched]

    def __str__(self) -> str:
        return self.best.label


def _runs(values: Iterable[int]) -> list[tuple[int, int]]:
    """Maximal runs of consecutive values as (length, top) pairs."""
    runs = []
    length, prev = 0, None
    for v in sorted(set(values)):
        if prev is not None and v == prev + 1:
            length += 1
        else:
            if prev is not None:
                runs.append((length, prev))
            length = 1
        prev = v
    if prev is not None:
        runs.append((length, prev))
    return runs


def longest_run(values: Iterable[int]) -> int:
    return max((length for length, _ in _runs(values)), default=0)


def straight_high(values: Iterable[int]) -> Optional[Rank]:
    tops = [top for length, top in _runs(values) if length >= STRAIGHT_LENGTH]
    if not tops:
        return None
    return Rank(max(tops))


def _straight_flush_high(cards: list[Card], suit_counts: Counter) -> Optional[Rank]:
    best = None
    for suit, count in suit_counts.items():
        if count < FLUSH_SIZE:
            continue
        high = straight_high(c.value for c in cards if c.suit == suit)
        if high is not None and (best is None or high > best):
            best = high
    return best


def evaluate(cards: Iterable[Card]) -> HandAnalysis:
    cards = list(cards)
    suit_counts = Counter(c.suit for c in cards)
    rank_counts = Counter(c.rank for c in cards)

    flush = any(n >= FLUSH_SIZE for n in suit_counts.values())
    # a rank with three or four cards still counts towards pairs
    pairs = sum(1 for n in rank_counts.values() if n >= 2)
    three = any(n == 3 for n in rank_counts.values())
    four = any(n == 4 for n in rank_counts.values())

    values = [c.value for c in cards]
    high = straight_high(values)
    sf_high = _straight_flush_high(cards, suit_counts)

    matched = []
    if pairs == 1:
        matched.append(HandCategory.ONE_PAIR)
    elif pairs >= 2:
        matched.append(HandCategory.TWO_PAIR)
    if three:
        matched.append(HandCategory.THREE_OF_A_KIND)
    if high is not None:
        matched.append(HandCategory.STRAIGHT)
    if flush:
        matched.append(HandCategory.FLUSH)
    if (pairs > 1 and three) or four:
        matched.append(HandCategory.FULL_HOUSE)
    if four:
        matched.append(HandCategory.FOUR_OF_A_KIND)
    if sf_high is not None:
        matched.append(HandCategory.STRAIGHT_FLUSH)
        if sf_high == Rank.KING:
            matched.append(HandCategory.ROYAL_FLUSH)

    return HandAnalysis(
        suit_counts=dict(suit_counts),
        rank_counts=dict(rank_counts),
        flush=flush,
        pairs=pairs,
        three_of_a_kind=three,
        four_of_a_kind=four,
        longest_run=longest_run(values),
        straight_high=high,
        straight_flush_high=sf_high,
        matched=tuple(matched),
        best=max(matched, default=HandCategory.HIGH_CARD),
    )
