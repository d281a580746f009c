"""Terminal blackjack built on a self-reshuffling 52-card deck."""

__version__ = "0.1.0"
