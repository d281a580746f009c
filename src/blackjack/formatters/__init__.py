"""Output formatting for terminal and tables."""

from blackjack.formatters.text import TextFormatter
from blackjack.formatters.table import TableFormatter

__all__ = ["TextFormatter", "TableFormatter"]
