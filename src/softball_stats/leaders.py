"""Per-player leaderboard rows for the stats tables and exported reports."""

from collections import defaultdict
from dataclasses import dataclass

from softball_stats.domain.aggregates import (
    AggregateBattingStats,
    AggregateFieldingStats,
    AggregatePitchingStats,
    BattingTotals,
    FieldingTotals,
    PitchingTotals,
)
from softball_stats.domain.appearance import PlayerAppearanceStats
from softball_stats.domain.roster import Player, StatsDocument
from softball_stats.innings import outs_from_display
from softball_stats.stats import (
    DEFAULT_SETTINGS,
    StatsSettings,
    batting_from_totals,
    fielding_from_totals,
    pitching_from_totals,
    sum_batting,
    sum_fielding,
    sum_pitching,
)


@dataclass(frozen=True)
class BattingLine:
    player: Player
    totals: BattingTotals
    stats: AggregateBattingStats


@dataclass(frozen=True)
class PitchingLine:
    player: Player
    totals: PitchingTotals
    stats: AggregatePitchingStats


@dataclass(frozen=True)
class FieldingLine:
    player: Player
    totals: FieldingTotals
    stats: AggregateFieldingStats


def appearances_by_player(
    document: StatsDocument, tournament_id: str | None = None
) -> dict[str, list[PlayerAppearanceStats]]:
    by_player: dict[str, list[PlayerAppearanceStats]] = defaultdict(list)
    for game in document.games_for(tournament_id):
        for line in game.player_stats:
            by_player[line.player_id].append(line)
    return by_player


def batting_leaders(
    document: StatsDocument,
    tournament_id: str | None = None,
    settings: StatsSettings = DEFAULT_SETTINGS,
) -> list[BattingLine]:
    """Players with at least one appearance, best batting average first."""
    by_player = appearances_by_player(document, tournament_id)
    lines: list[BattingLine] = []
    for player in document.players:
        games = by_player.get(player.id)
        if not games:
            continue
        totals = sum_batting(games)
        lines.append(BattingLine(player=player, totals=totals, stats=batting_from_totals(totals, settings)))
    lines.sort(key=lambda line: (-line.stats.avg, line.player.name))
    return lines


def pitching_leaders(
    document: StatsDocument,
    tournament_id: str | None = None,
    settings: StatsSettings = DEFAULT_SETTINGS,
) -> list[PitchingLine]:
    """Players who recorded at least one out pitching, lowest ERA first."""
    by_player = appearances_by_player(document, tournament_id)
    lines: list[PitchingLine] = []
    for player in document.players:
        games = [g for g in by_player.get(player.id, []) if outs_from_display(g.ip) > 0]
        if not games:
            continue
        totals = sum_pitching(games)
        lines.append(PitchingLine(player=player, totals=totals, stats=pitching_from_totals(totals, settings)))
    lines.sort(key=lambda line: (line.stats.era, line.player.name))
    return lines


def fielding_leaders(
    document: StatsDocument,
    tournament_id: str | None = None,
    settings: StatsSettings = DEFAULT_SETTINGS,
) -> list[FieldingLine]:
    """Players with at least one fielding chance, best fielding percentage first.

    Only appearances with a putout, assist or error count toward games played.
    """
    by_player = appearances_by_player(document, tournament_id)
    lines: list[FieldingLine] = []
    for player in document.players:
        games = [g for g in by_player.get(player.id, []) if g.po + g.a + g.e > 0]
        if not games:
            continue
        totals = sum_fielding(games)
        lines.append(FieldingLine(player=player, totals=totals, stats=fielding_from_totals(totals, settings)))
    lines.sort(key=lambda line: (-line.stats.fld_pct, line.player.name))
    return lines
