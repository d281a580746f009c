"""Terminal Blackjack CLI — Typer-based command line interface."""

from typing import Optional

import typer
from rich.console import Console

from blackjack import config

app = typer.Typer(
    name="blackjack",
    help="Blackjack at the terminal, dealt from a self-reshuffling deck",
    no_args_is_help=True,
)
console = Console()


def _get_supplier(seed: Optional[int]):
    from blackjack.deck import DeckSupplier
    supplier = DeckSupplier()
    supplier.initialize(seed if seed is not None else config.SEED)
    return supplier


def _read_choice(prompt: str, choices: str) -> str:
    """Read one choice per line; blank lines are skipped, end of input quits."""
    while True:
        try:
            raw = console.input(prompt)
        except EOFError:
            return "q"
        raw = raw.strip().lower()
        if not raw:
            continue
        if raw[0] == "q" or raw[0] in choices:
            return raw[0]
        console.print(f"[dim]Choose one of: {', '.join(choices.upper())}, Q[/dim]")


def _require_table_size(min_cols: int, min_rows: int):
    width, height = console.size
    if width < min_cols or height < min_rows:
        console.print(f"[red]The terminal must have a minimum size of "
                      f"{min_cols} x {min_rows}[/red] (found {width} x {height})")
        raise typer.Exit(1)


@app.callback()
def main(
    log_level: str = typer.Option(config.LOG_LEVEL, "--log-level",
                                  help="Logging level (DEBUG, INFO, WARNING, ERROR)"),
):
    """Terminal blackjack."""
    from blackjack.logging_utils import setup_logging
    setup_logging(log_level)


@app.command()
def play(
    seed: Optional[int] = typer.Option(None, "--seed",
                                       help="Seed the deck for a reproducible game"),
    dealer_stands: int = typer.Option(config.DEALER_STANDS_ON, "--dealer-stands",
                                      min=12, max=21,
                                      help="Dealer stands on this total or higher"),
):
    """Play blackjack against the dealer."""
    from blackjack.formatters.table import TableFormatter
    from blackjack.game.round import BlackjackRound
    from blackjack.models.stats import Scoreboard

    _require_table_size(config.MIN_COLS, config.MIN_ROWS)

    supplier = _get_supplier(seed)
    scoreboard = Scoreboard()
    fmt = TableFormatter(console)
    clear = console.is_terminal

    while True:
        rnd = BlackjackRound(supplier, dealer_stands_on=dealer_stands)
        rnd.deal()

        while not rnd.is_complete:
            fmt.print_table(rnd, scoreboard, clear=clear)
            choice = _read_choice("Hit or stand? ", "hs")
            if choice == "q":
                break
            if choice == "h":
                rnd.hit()
            else:
                rnd.stand()

        if not rnd.is_complete:
            break

        scoreboard.record(rnd.outcome)
        fmt.print_table(rnd, scoreboard, clear=clear)
        if _read_choice("Continue? ", "c") == "q":
            break

    if clear:
        console.clear()
    console.print(f"[bold]Final score[/bold]  Wins: {scoreboard.wins}  "
                  f"Losses: {scoreboard.losses}  Draws: {scoreboard.draws}")


@app.command()
def deal(
    count: int = typer.Option(5, "--count", "-n", min=0, help="Number of cards to deal"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed the deck"),
    plain: bool = typer.Option(False, "--plain", help="Plain text output"),
):
    """Deal cards from a fresh deck."""
    supplier = _get_supplier(seed)
    cards = supplier.deal(count)

    if plain:
        from blackjack.formatters.text import TextFormatter
        typer.echo(TextFormatter().format_cards(cards))
    else:
        from blackjack.formatters.table import TableFormatter
        TableFormatter(console).print_deal(cards)

    if count > 0 and supplier.generation > 1:
        console.print(f"[dim]Deck reshuffled {supplier.generation - 1} time(s).[/dim]")


@app.command()
def check(
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed the deck"),
    extra_draws: int = typer.Option(config.CHECK_EXTRA_DRAWS, "--extra-draws", min=0,
                                    help="Cards to draw after the first reshuffle"),
    plain: bool = typer.Option(False, "--plain",
                               help="Print every card of the first deck as text"),
):
    """Run the deck self-check: coverage, balance and sustained draws."""
    from blackjack.deck.diagnostics import run_self_check

    supplier = _get_supplier(seed)
    report = run_self_check(supplier, extra_draws=extra_draws)

    if plain:
        from blackjack.formatters.text import TextFormatter
        typer.echo(TextFormatter().format_self_check(report))
    else:
        from blackjack.formatters.table import TableFormatter
        TableFormatter(console).print_self_check(report)

    if not report.passed:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
