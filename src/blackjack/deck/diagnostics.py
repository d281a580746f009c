"""Self-check of a deck supplier: coverage, balance and sustained use."""

from collections import Counter
from dataclasses import dataclass, field
from typing import List

from blackjack import config
from blackjack.deck.supplier import DeckSupplier
from blackjack.logging_utils import get_logger
from blackjack.models.card import Card, Rank, Suit, CARDS_PER_DECK, CARDS_PER_SUIT

logger = get_logger(__name__)


@dataclass
class CheckResult:
    """Outcome of a single named check."""
    name: str
    passed: bool
    detail: str = ""


@dataclass
class SelfCheckReport:
    """All checks from one run plus the first generation that was dealt."""
    first_generation: List[Card] = field(default_factory=list)
    results: List[CheckResult] = field(default_factory=list)
    total_draws: int = 0

    @property
    def passed(self) -> bool:
        return all(r.passed for r in self.results)

    @property
    def failures(self) -> List[CheckResult]:
        return [r for r in self.results if not r.passed]


def _is_valid(card: Card) -> bool:
    return isinstance(card.suit, Suit) and isinstance(card.rank, Rank)


def run_self_check(supplier: DeckSupplier,
                   extra_draws: int = config.CHECK_EXTRA_DRAWS) -> SelfCheckReport:
    """Exercise a fresh supplier and report what was observed.

    Draws one full generation, a 53rd card, then ``extra_draws`` more.
    The supplier should not have dealt any cards yet, otherwise the first
    52 draws straddle a reshuffle and the coverage checks are meaningless.
    """
    if supplier.deal_count not in (0, CARDS_PER_DECK):
        raise ValueError(
            f"Self-check needs a supplier at a reshuffle boundary, "
            f"it has dealt {supplier.deal_count} cards")

    report = SelfCheckReport()
    first = supplier.deal(CARDS_PER_DECK)
    report.first_generation = first
    report.total_draws = len(first)
    results = report.results

    invalid = [c for c in first if not _is_valid(c)]
    results.append(CheckResult(
        "valid cards", not invalid,
        f"{len(invalid)} invalid cards returned" if invalid
        else "no invalid suits or ranks returned"))

    distinct = len(set(first))
    results.append(CheckResult(
        "full deck", distinct == CARDS_PER_DECK,
        f"{distinct} distinct cards in the first {CARDS_PER_DECK} draws"))

    suit_counts = Counter(c.suit for c in first)
    bad_suits = [f"{s.display_name} had {suit_counts[s]}"
                 for s in Suit if suit_counts[s] != CARDS_PER_SUIT]
    results.append(CheckResult(
        "suit balance", not bad_suits,
        "; ".join(bad_suits) if bad_suits
        else f"{CARDS_PER_SUIT} of every suit seen"))

    rank_counts = Counter(c.rank for c in first)
    bad_ranks = [f"{r.display_name} had {rank_counts[r]}"
                 for r in Rank if rank_counts[r] != len(Suit)]
    results.append(CheckResult(
        "rank balance", not bad_ranks,
        "; ".join(bad_ranks) if bad_ranks
        else f"{len(Suit)} of every rank seen"))

    # A new generation may legally repeat the first card
    card53 = supplier.draw_card()
    report.total_draws += 1
    if card53 == first[0]:
        detail = f"53rd card {card53.display_name} repeats the first card"
    else:
        detail = "1st and 53rd cards are different"
    results.append(CheckResult("reshuffle", _is_valid(card53), detail))

    extra = supplier.deal(extra_draws)
    report.total_draws += len(extra)
    bad_extra = [i for i, c in enumerate(extra) if not _is_valid(c)]

    # Every complete later generation must also be a full deck
    later = [card53] + extra
    repeated = 0
    for start in range(0, len(later) - CARDS_PER_DECK + 1, CARDS_PER_DECK):
        if len(set(later[start:start + CARDS_PER_DECK])) != CARDS_PER_DECK:
            repeated += 1
    sustained_ok = not bad_extra and repeated == 0
    if sustained_ok:
        detail = f"no bad cards after {extra_draws} more cards"
    else:
        detail = (f"{len(bad_extra)} invalid cards, "
                  f"{repeated} generations with repeats")
    results.append(CheckResult("sustained draws", sustained_ok, detail))

    logger.info("Self-check finished: %d draws, %d failures",
                report.total_draws, len(report.failures))
    return report
