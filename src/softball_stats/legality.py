"""Consistency checks for recorded games and box-score lines.

These checks are advisory: they report problems as values and the caller
decides whether to block a save or only warn.
"""

import logging
from dataclasses import dataclass
from enum import StrEnum

from softball_stats.domain.appearance import PlayerAppearanceStats
from softball_stats.domain.game import Game, GameResult
from softball_stats.innings import is_valid_innings, outs_from_display

logger = logging.getLogger(__name__)


class LegalityRule(StrEnum):
    HOME_WIN_EXCESS_INNINGS = "home_win_excess_innings"
    HOME_LOSS_INCOMPLETE_INNINGS = "home_loss_incomplete_innings"


_REASONS: dict[LegalityRule, str] = {
    LegalityRule.HOME_WIN_EXCESS_INNINGS: "Winning home team cannot have more innings at bat than the visitor.",
    LegalityRule.HOME_LOSS_INCOMPLETE_INNINGS: "Losing home team must complete their final half-inning.",
}


@dataclass(frozen=True)
class GameValidation:
    is_valid: bool
    reason: str | None = None
    rule: LegalityRule | None = None


VALID = GameValidation(is_valid=True)


def _violation(rule: LegalityRule) -> GameValidation:
    return GameValidation(is_valid=False, reason=_REASONS[rule], rule=rule)


def validate_legal_game(result: GameResult) -> GameValidation:
    """Check a final score against each side's innings at bat.

    Rules, first violation wins:

    1. A winning home team may not have batted in more innings than the visitor.
    2. A losing home team must have batted in exactly as many innings as the visitor.

    Tied scores trigger neither rule. Innings are compared as out counts.
    """
    home_outs = outs_from_display(result.home_innings_batted)
    visitor_outs = outs_from_display(result.visitor_innings_batted)

    if result.home_score > result.visitor_score and home_outs > visitor_outs:
        return _violation(LegalityRule.HOME_WIN_EXCESS_INNINGS)
    if result.home_score < result.visitor_score and home_outs != visitor_outs:
        return _violation(LegalityRule.HOME_LOSS_INCOMPLETE_INNINGS)
    return VALID


def validate_game(game: Game) -> GameValidation:
    """Run :func:`validate_legal_game` when the game records innings for both sides."""
    result = game.result()
    if result is None:
        return VALID
    validation = validate_legal_game(result)
    if not validation.is_valid:
        logger.debug("Game %s failed legality check: %s", game.id, validation.rule)
    return validation


def check_appearance(stats: PlayerAppearanceStats) -> list[str]:
    """Return the field-level inconsistencies in one box-score line."""
    problems: list[str] = []
    if stats.h > stats.ab:
        problems.append(f"hits ({stats.h}) exceed at-bats ({stats.ab})")
    xbh = stats.doubles + stats.triples + stats.hr
    if xbh > stats.h:
        problems.append(f"extra-base hits ({xbh}) exceed hits ({stats.h})")
    if stats.er > stats.p_r:
        problems.append(f"earned runs ({stats.er}) exceed runs allowed ({stats.p_r})")
    if stats.ip and not is_valid_innings(f"{stats.ip:.1f}".removesuffix(".0")):
        problems.append(f"innings pitched {stats.ip} is not a valid X.0/X.1/X.2 value")
    return problems
