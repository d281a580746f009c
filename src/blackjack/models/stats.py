"""Win / loss / draw tallies for a table session."""

from dataclasses import dataclass
from typing import Dict

from blackjack.game.round import Outcome


@dataclass
class Scoreboard:
    """Running score for one player across rounds."""
    wins: int = 0
    losses: int = 0
    draws: int = 0

    def record(self, outcome: Outcome) -> None:
        if outcome is Outcome.WIN:
            self.wins += 1
        elif outcome is Outcome.LOSS:
            self.losses += 1
        else:
            self.draws += 1

    @property
    def rounds(self) -> int:
        return self.wins + self.losses + self.draws

    @property
    def win_rate(self) -> float:
        """Percentage of rounds won."""
        return (self.wins / self.rounds * 100) if self.rounds > 0 else 0.0

    def summary_dict(self) -> Dict[str, int]:
        return {"Wins": self.wins, "Losses": self.losses, "Draws": self.draws}
