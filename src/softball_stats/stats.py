"""Batting, pitching and fielding aggregates derived from per-game counters.

Every function here is a pure fold over :class:`PlayerAppearanceStats`. The
caller picks the slice (one player, one team, a whole tournament); player
identity is never inspected. Rates divide through :func:`safe_divide`, so an
empty or all-zero slice yields the configured fallback instead of raising.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from softball_stats.domain.aggregates import (
    AggregateBattingStats,
    AggregateFieldingStats,
    AggregatePitchingStats,
    BattingTotals,
    FieldingTotals,
    PitchingTotals,
    PlayerAggregate,
)
from softball_stats.domain.appearance import PlayerAppearanceStats
from softball_stats.innings import innings_from_outs, outs_from_display

logger = logging.getLogger(__name__)

REGULATION_INNINGS = 7


@dataclass(frozen=True)
class StatsSettings:
    regulation_innings: int = REGULATION_INNINGS
    fallback: float = 0.0


DEFAULT_SETTINGS = StatsSettings()

type Appearances = PlayerAppearanceStats | Iterable[PlayerAppearanceStats]


def safe_divide(num: float, denom: float, fallback: float = 0.0) -> float:
    if denom == 0:
        return fallback
    return num / denom


def _as_list(appearances: Appearances) -> list[PlayerAppearanceStats]:
    if isinstance(appearances, PlayerAppearanceStats):
        return [appearances]
    return list(appearances)


def sum_batting(appearances: Appearances) -> BattingTotals:
    rows = _as_list(appearances)
    return BattingTotals(
        games=len(rows),
        ab=sum(g.ab for g in rows),
        h=sum(g.h for g in rows),
        doubles=sum(g.doubles for g in rows),
        triples=sum(g.triples for g in rows),
        hr=sum(g.hr for g in rows),
        rbi=sum(g.rbi for g in rows),
        r=sum(g.r for g in rows),
        bb=sum(g.bb for g in rows),
        so=sum(g.so for g in rows),
        hbp=sum(g.hbp for g in rows),
        sb=sum(g.sb for g in rows),
        cs=sum(g.cs for g in rows),
        sac=sum(g.sac for g in rows),
        sf=sum(g.sf for g in rows),
    )


def sum_pitching(appearances: Appearances) -> PitchingTotals:
    """Sum pitching counters, adding innings as outs rather than decimals."""
    rows = _as_list(appearances)
    return PitchingTotals(
        games=len(rows),
        outs=sum(outs_from_display(g.ip) for g in rows),
        h=sum(g.p_h for g in rows),
        r=sum(g.p_r for g in rows),
        er=sum(g.er for g in rows),
        bb=sum(g.p_bb for g in rows),
        so=sum(g.p_so for g in rows),
        hr=sum(g.p_hr for g in rows),
        pitch_count=sum(g.pitch_count for g in rows),
        batters_faced=sum(g.ab + g.p_bb + g.hbp for g in rows),
    )


def sum_fielding(appearances: Appearances) -> FieldingTotals:
    rows = _as_list(appearances)
    return FieldingTotals(
        games=len(rows),
        po=sum(g.po for g in rows),
        a=sum(g.a for g in rows),
        e=sum(g.e for g in rows),
        catcher_cs=sum(g.catcher_cs or 0 for g in rows),
        catcher_sb=sum(g.catcher_sb or 0 for g in rows),
        passed_balls=sum(g.passed_balls or 0 for g in rows),
        pickoffs=sum(g.pickoffs or 0 for g in rows),
    )


def batting_from_totals(t: BattingTotals, settings: StatsSettings = DEFAULT_SETTINGS) -> AggregateBattingStats:
    fb = settings.fallback
    pa = t.ab + t.bb + t.hbp + t.sf + t.sac
    singles = t.h - t.doubles - t.triples - t.hr
    if singles < 0:
        logger.debug("Extra-base hits exceed hits (h=%d, xbh=%d)", t.h, t.doubles + t.triples + t.hr)
    tb = max(singles, 0) + 2 * t.doubles + 3 * t.triples + 4 * t.hr
    avg = safe_divide(t.h, t.ab, fb)
    slg = safe_divide(tb, t.ab, fb)
    obp = safe_divide(t.h + t.bb + t.hbp, t.ab + t.bb + t.hbp + t.sf, fb)
    return AggregateBattingStats(
        pa=pa,
        singles=singles,
        total_bases=tb,
        avg=avg,
        slg=slg,
        obp=obp,
        ops=obp + slg,
        iso=slg - avg,
        bb_pct=safe_divide(t.bb, pa, fb),
        k_pct=safe_divide(t.so, pa, fb),
        sb_pct=safe_divide(t.sb, t.sb + t.cs, fb),
        babip=safe_divide(t.h - t.hr, t.ab - t.so - t.hr + t.sf, fb),
        xbh=t.doubles + t.triples + t.hr,
    )


def pitching_from_totals(t: PitchingTotals, settings: StatsSettings = DEFAULT_SETTINGS) -> AggregatePitchingStats:
    fb = settings.fallback
    innings = innings_from_outs(t.outs)
    return AggregatePitchingStats(
        outs=t.outs,
        innings=innings,
        batters_faced=t.batters_faced,
        era=safe_divide(t.er * settings.regulation_innings, innings, fb),
        whip=safe_divide(t.bb + t.h, innings, fb),
        k_bb=safe_divide(t.so, t.bb, fb),
        oba=safe_divide(t.h, t.batters_faced or 1, fb),
        pitches_per_inning=safe_divide(t.pitch_count, innings, fb),
    )


def fielding_from_totals(t: FieldingTotals, settings: StatsSettings = DEFAULT_SETTINGS) -> AggregateFieldingStats:
    fb = settings.fallback
    return AggregateFieldingStats(
        fld_pct=safe_divide(t.po + t.a, t.chances, fb),
        cs_pct=safe_divide(t.catcher_cs, t.catcher_cs + t.catcher_sb, fb),
    )


def calc_batting(appearances: Appearances, settings: StatsSettings = DEFAULT_SETTINGS) -> AggregateBattingStats:
    return batting_from_totals(sum_batting(appearances), settings)


def calc_pitching(appearances: Appearances, settings: StatsSettings = DEFAULT_SETTINGS) -> AggregatePitchingStats:
    """ERA is scaled to ``settings.regulation_innings`` (7 for softball)."""
    return pitching_from_totals(sum_pitching(appearances), settings)


def calc_fielding(appearances: Appearances, settings: StatsSettings = DEFAULT_SETTINGS) -> AggregateFieldingStats:
    return fielding_from_totals(sum_fielding(appearances), settings)


def aggregate(appearances: Appearances, settings: StatsSettings = DEFAULT_SETTINGS) -> PlayerAggregate:
    rows = _as_list(appearances)
    batting_totals = sum_batting(rows)
    pitching_totals = sum_pitching(rows)
    fielding_totals = sum_fielding(rows)
    return PlayerAggregate(
        batting_totals=batting_totals,
        pitching_totals=pitching_totals,
        fielding_totals=fielding_totals,
        batting=batting_from_totals(batting_totals, settings),
        pitching=pitching_from_totals(pitching_totals, settings),
        fielding=fielding_from_totals(fielding_totals, settings),
    )
