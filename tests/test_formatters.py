"""Tests for text and Rich formatting."""

from io import StringIO

import pytest
from rich.console import Console

from blackjack.deck.diagnostics import run_self_check
from blackjack.deck.supplier import DeckSupplier
from blackjack.formatters.table import TableFormatter
from blackjack.formatters.text import TextFormatter
from blackjack.game.round import BlackjackRound, Outcome
from blackjack.models.card import Card
from blackjack.models.stats import Scoreboard


class StackedSupplier:
    def __init__(self, *codes):
        self.cards = [Card.parse(c) for c in codes]

    def draw_card(self) -> Card:
        return self.cards.pop(0)


@pytest.fixture
def console():
    return Console(file=StringIO(), width=100, record=True)


def _round(*codes) -> BlackjackRound:
    rnd = BlackjackRound(StackedSupplier(*codes))
    rnd.deal()
    return rnd


class TestTextFormatter:
    """Tests for TextFormatter."""

    def test_format_card(self):
        fmt = TextFormatter()
        assert fmt.format_card(Card.parse("Ac")) == "Ace   of Clubs"
        assert fmt.format_card(Card.parse("7h")) == "7     of Hearts"
        assert fmt.format_card(Card.parse("Qd")) == "Queen of Diamonds"

    def test_format_round_hides_hole_card(self):
        text = TextFormatter().format_round(_round("Th", "9c", "6d", "7s"))
        assert "Dealer: 9♣ ??" in text
        assert "7♠" not in text
        assert "You:    10♥ 6♦  (16)" in text

    def test_format_round_complete(self):
        rnd = _round("Th", "9c", "Qd", "8s")
        rnd.stand()
        text = TextFormatter().format_round(rnd)
        assert "9♣ 8♠  (17)" in text
        assert "Result: win" in text

    def test_format_self_check(self):
        report = run_self_check(DeckSupplier(seed=1), extra_draws=20)
        text = TextFormatter().format_self_check(report)
        lines = text.splitlines()
        assert len(lines) == 52 + 1 + len(report.results)
        assert "-Good: 13 of every suit seen" in text
        assert "-Bad:" not in text


class TestTableFormatter:
    """Tests for TableFormatter."""

    def test_card_styles(self):
        red = TableFormatter.card_text(Card.parse("Qh"))
        black = TableFormatter.card_text(Card.parse("Qs"))
        assert red.plain == "Q ♥"
        assert "red" in str(red.style)
        assert "black" in str(black.style)

    def test_table_hides_hole_card(self, console):
        fmt = TableFormatter(console)
        fmt.print_table(_round("Th", "9c", "6d", "7s"), Scoreboard())
        out = console.export_text()
        assert "B L A C K J A C K" in out
        assert "Dealer" in out
        assert "You" in out
        assert "? ?" in out
        assert "7 ♠" not in out
        assert "H=Hit" in out
        assert "Wins:" in out

    def test_table_shows_result(self, console):
        rnd = _round("Th", "9c", "Qd", "8s")
        rnd.stand()
        board = Scoreboard()
        board.record(rnd.outcome)
        TableFormatter(console).print_table(rnd, board)
        out = console.export_text()
        assert "YOU WON!" in out
        assert "enter C to continue" in out
        assert "8 ♠" in out
        assert "? ?" not in out

    @pytest.mark.parametrize("outcome,message", [
        (Outcome.LOSS, "YOU LOST"),
        (Outcome.DRAW, "DRAW"),
    ])
    def test_result_messages(self, console, outcome, message):
        console.print(TableFormatter(console).render_result(outcome))
        assert message in console.export_text()

    def test_print_deal(self, console):
        cards = [Card.parse("Ac"), Card.parse("10d")]
        TableFormatter(console).print_deal(cards)
        out = console.export_text()
        assert "Ace of Clubs" in out
        assert "10 of Diamonds" in out

    def test_print_deal_empty(self, console):
        TableFormatter(console).print_deal([])
        assert "No cards dealt" in console.export_text()

    def test_print_self_check(self, console):
        report = run_self_check(DeckSupplier(seed=2), extra_draws=10)
        TableFormatter(console).print_self_check(report)
        out = console.export_text()
        assert "-Good:" in out
        assert "all checks passed" in out
