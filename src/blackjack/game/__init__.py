"""Blackjack rules and round engine."""

from blackjack.game.round import BlackjackRound, Outcome, RoundPhase, RoundStateError

__all__ = ["BlackjackRound", "Outcome", "RoundPhase", "RoundStateError"]
