"""Command line interface for terminal blackjack."""
