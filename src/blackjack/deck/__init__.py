"""Card supply for the table."""

from blackjack.deck.supplier import DeckSupplier
from blackjack.deck.diagnostics import CheckResult, SelfCheckReport, run_self_check

__all__ = ["DeckSupplier", "CheckResult", "SelfCheckReport", "run_self_check"]
