"""Rich rendering of the blackjack table for terminal output."""

from typing import List, Optional

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from blackjack.deck.diagnostics import SelfCheckReport
from blackjack.game.round import BlackjackRound, Outcome
from blackjack.models.card import Card
from blackjack.models.stats import Scoreboard

TITLE = "B L A C K J A C K"
FELT = "on green"
RED_CARD = f"bold red {FELT}"
BLACK_CARD = f"bold black {FELT}"
HIDDEN_CARD = f"black {FELT}"
HEADING = f"bold blue {FELT}"

RESULT_MESSAGES = {
    Outcome.WIN: "YOU WON!",
    Outcome.LOSS: "YOU LOST",
    Outcome.DRAW: "DRAW",
}


class TableFormatter:
    """Format the table, cards and reports as Rich renderables."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    @staticmethod
    def card_text(card: Card) -> Text:
        """Label and glyph, red for hearts/diamonds, black otherwise."""
        style = RED_CARD if card.suit.is_red else BLACK_CARD
        return Text(f"{card.label} {card.suit.symbol}", style=style)

    @staticmethod
    def hidden_card_text() -> Text:
        return Text("? ?", style=HIDDEN_CARD)

    def _dealer_column(self, rnd: BlackjackRound) -> List[Text]:
        cells = []
        for i, card in enumerate(rnd.dealer.cards):
            if i == 1 and not rnd.hole_card_revealed:
                cells.append(self.hidden_card_text())
            else:
                cells.append(self.card_text(card))
        return cells

    def render_menu(self) -> Text:
        menu = Text()
        menu.append("Menu\n", style=HEADING)
        for key, action in (("H", "Hit"), ("S", "Stand"), ("Q", "Quit")):
            menu.append(key, style=f"bold red {FELT}")
            menu.append(f"={action}\n", style=f"black {FELT}")
        return menu

    def render_stats(self, scoreboard: Scoreboard) -> Text:
        stats = Text(style=HEADING)
        for name, value in scoreboard.summary_dict().items():
            stats.append(f"{name + ':':<8}{value:>4}\n")
        return stats

    def render_hands(self, rnd: BlackjackRound) -> Table:
        """Dealer and player cards side by side."""
        table = Table(show_edge=False, box=None, padding=(0, 6), style=FELT)
        table.add_column("Dealer", header_style=HEADING)
        table.add_column("You", header_style=HEADING)

        dealer = self._dealer_column(rnd)
        player = [self.card_text(c) for c in rnd.player.cards]
        for i in range(max(len(dealer), len(player))):
            table.add_row(
                dealer[i] if i < len(dealer) else "",
                player[i] if i < len(player) else "",
            )

        if rnd.is_complete:
            table.add_row(Text(f"({rnd.dealer.total})", style=HEADING),
                          Text(f"({rnd.player.total})", style=HEADING))
        elif rnd.player.cards:
            table.add_row("", Text(f"({rnd.player.total})", style=HEADING))
        return table

    def render_result(self, outcome: Outcome) -> Panel:
        message = Text(justify="center")
        message.append(RESULT_MESSAGES[outcome], style="bold red")
        message.append("\n\nenter C to continue")
        return Panel(message, width=28, border_style="red", style=FELT)

    def render_table(self, rnd: BlackjackRound, scoreboard: Scoreboard,
                     show_menu: bool = True) -> Panel:
        """The full table: menu, hands, optional result box and score."""
        parts = []
        if show_menu:
            parts.append(self.render_menu())
        parts.append(self.render_hands(rnd))
        if rnd.is_complete and rnd.outcome is not None:
            parts.append(self.render_result(rnd.outcome))
        parts.append(self.render_stats(scoreboard))
        return Panel(
            Group(*parts),
            title=Text(TITLE, style=f"bold red {FELT}"),
            style=FELT,
            border_style=f"black {FELT}",
        )

    def print_table(self, rnd: BlackjackRound, scoreboard: Scoreboard,
                    clear: bool = False) -> None:
        if clear:
            self.console.clear()
        self.console.print(self.render_table(rnd, scoreboard))

    def print_deal(self, cards: List[Card], title: Optional[str] = None) -> None:
        """Print dealt cards as a numbered Rich table."""
        if not cards:
            self.console.print("[dim]No cards dealt.[/dim]")
            return

        table = Table(title=title or f"Dealt Cards ({len(cards)})")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Card")
        table.add_column("Name")
        for i, card in enumerate(cards, 1):
            table.add_row(str(i), self.card_text(card), card.display_name)

        self.console.print(table)

    def print_self_check(self, report: SelfCheckReport) -> None:
        """Print self-check results as Good / Bad lines."""
        for result in report.results:
            if result.passed:
                self.console.print(f"[green]-Good:[/green] {result.detail}")
            else:
                self.console.print(f"[red]-Bad:[/red] {result.name}: {result.detail}")

        style = "green" if report.passed else "red"
        verdict = "all checks passed" if report.passed else f"{len(report.failures)} check(s) failed"
        self.console.print(Panel(f"{report.total_draws} cards drawn, {verdict}",
                                 title="Deck Self-Check", border_style=style))
