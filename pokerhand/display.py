from rich.console import Console
from rich.text import Text

from pokerhand.cards import Card, Suit
from pokerhand.hand_evaluator import HandAnalysis, HandCategory

SUIT_STYLES = {
    Suit.HEARTS: "bold red",
    Suit.DIAMONDS: "bold red",
    Suit.CLUBS: "bold green",
    Suit.SPADES: "bold cyan",
}


def card_text(card: Card) -> Text:
    text = Text("The ")
    text.append(str(card), style=SUIT_STYLES[card.suit])
    text.append(f" ({card.pretty()})", style="dim")
    return text


def render_hand(console: Console, cards, title: str = "My hand has:") -> None:
    console.print(title)
    for card in cards:
        console.print(card_text(card))


def render_analysis(console: Console, analysis: HandAnalysis) -> None:
    for sentence in analysis.trace():
        console.print(sentence)
    style = "bold yellow" if analysis.best > HandCategory.HIGH_CARD else "bold"
    console.print()
    console.print(Text("The best available hand is: ").append(analysis.best.label, style=style))


def render_round(console: Console, cards, analysis: HandAnalysis) -> None:
    render_hand(console, cards)
    console.print()
    render_analysis(console, analysis)
