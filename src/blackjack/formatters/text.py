"""Plain text formatting for terminal output."""

from typing import List

from blackjack.deck.diagnostics import SelfCheckReport
from blackjack.game.round import BlackjackRound
from blackjack.models.card import Card


class TextFormatter:
    """Format cards, rounds and reports as plain text."""

    def format_card(self, card: Card) -> str:
        """Format a card as a padded line, e.g. 'Ace   of Clubs'."""
        return f"{card.rank.display_name:<5} of {card.suit.display_name}"

    def format_cards(self, cards: List[Card]) -> str:
        return "\n".join(self.format_card(c) for c in cards)

    def format_round(self, rnd: BlackjackRound) -> str:
        """Format a round as it stands, hiding the hole card if needed."""
        dealer = []
        for i, card in enumerate(rnd.dealer.cards):
            if i == 1 and not rnd.hole_card_revealed:
                dealer.append("??")
            else:
                dealer.append(str(card))

        lines = [f"Dealer: {' '.join(dealer)}"]
        if rnd.hole_card_revealed:
            lines[0] += f"  ({rnd.dealer.total})"
        lines.append(f"You:    {rnd.player.cards_str}  ({rnd.player.total})")
        if rnd.outcome is not None:
            lines.append(f"Result: {rnd.outcome.value}")
        return "\n".join(lines)

    def format_self_check(self, report: SelfCheckReport) -> str:
        """Format a self-check the way the deck harness prints it."""
        lines = [self.format_cards(report.first_generation), "-" * 32]
        for result in report.results:
            prefix = "-Good:" if result.passed else "-Bad:"
            lines.append(f"{prefix} {result.detail}")
        return "\n".join(lines)
