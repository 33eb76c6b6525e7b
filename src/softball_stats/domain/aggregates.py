from dataclasses import dataclass


@dataclass(frozen=True)
class BattingTotals:
    games: int = 0
    ab: int = 0
    h: int = 0
    doubles: int = 0
    triples: int = 0
    hr: int = 0
    rbi: int = 0
    r: int = 0
    bb: int = 0
    so: int = 0
    hbp: int = 0
    sb: int = 0
    cs: int = 0
    sac: int = 0
    sf: int = 0


@dataclass(frozen=True)
class PitchingTotals:
    games: int = 0
    outs: int = 0
    h: int = 0
    r: int = 0
    er: int = 0
    bb: int = 0
    so: int = 0
    hr: int = 0
    pitch_count: int = 0
    batters_faced: int = 0  # AB + BB + HBP, an approximation


@dataclass(frozen=True)
class FieldingTotals:
    games: int = 0
    po: int = 0
    a: int = 0
    e: int = 0
    catcher_cs: int = 0
    catcher_sb: int = 0
    passed_balls: int = 0
    pickoffs: int = 0

    @property
    def chances(self) -> int:
        return self.po + self.a + self.e


@dataclass(frozen=True)
class AggregateBattingStats:
    pa: int
    singles: int
    total_bases: int
    avg: float
    slg: float
    obp: float
    ops: float
    iso: float
    bb_pct: float
    k_pct: float
    sb_pct: float
    babip: float
    xbh: int


@dataclass(frozen=True)
class AggregatePitchingStats:
    outs: int
    innings: float
    batters_faced: int
    era: float
    whip: float
    k_bb: float
    oba: float
    pitches_per_inning: float


@dataclass(frozen=True)
class AggregateFieldingStats:
    fld_pct: float
    cs_pct: float


@dataclass(frozen=True)
class PlayerAggregate:
    batting_totals: BattingTotals
    pitching_totals: PitchingTotals
    fielding_totals: FieldingTotals
    batting: AggregateBattingStats
    pitching: AggregatePitchingStats
    fielding: AggregateFieldingStats
