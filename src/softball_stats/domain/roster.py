from dataclasses import dataclass, field
from enum import StrEnum

from softball_stats.domain.game import Game


class Position(StrEnum):
    P = "P"
    C = "C"
    FIRST = "1B"
    SECOND = "2B"
    THIRD = "3B"
    SS = "SS"
    LF = "LF"
    CF = "CF"
    RF = "RF"
    DP = "DP"
    FLEX = "FLEX"


class TournamentKind(StrEnum):
    LEAGUE = "league"
    TOURNAMENT = "tournament"
    FRIENDLY = "friendly"


@dataclass(frozen=True)
class Team:
    id: str
    name: str


@dataclass(frozen=True)
class Tournament:
    id: str
    name: str
    start_date: str
    kind: TournamentKind = TournamentKind.TOURNAMENT
    end_date: str | None = None
    team_id: str | None = None


@dataclass(frozen=True)
class Player:
    id: str
    name: str
    jersey_number: str = ""
    primary_position: Position | None = None
    secondary_positions: tuple[Position, ...] = ()
    tournament_id: str | None = None


@dataclass(frozen=True)
class StatsDocument:
    teams: tuple[Team, ...] = field(default_factory=tuple)
    tournaments: tuple[Tournament, ...] = field(default_factory=tuple)
    players: tuple[Player, ...] = field(default_factory=tuple)
    games: tuple[Game, ...] = field(default_factory=tuple)

    def games_for(self, tournament_id: str | None = None) -> list[Game]:
        if tournament_id is None:
            return list(self.games)
        return [g for g in self.games if g.tournament_id == tournament_id]
