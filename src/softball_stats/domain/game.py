from dataclasses import dataclass, field
from enum import StrEnum

from softball_stats.domain.appearance import PlayerAppearanceStats


class HomeAway(StrEnum):
    HOME = "home"
    AWAY = "away"


class GameType(StrEnum):
    REGULAR = "regular"
    PLAYOFF = "playoff"
    CHAMPIONSHIP = "championship"
    FRIENDLY = "friendly"


@dataclass(frozen=True)
class GameResult:
    home_score: int
    visitor_score: int
    home_innings_batted: float | str
    visitor_innings_batted: float | str


@dataclass(frozen=True)
class Game:
    id: str
    tournament_id: str
    date: str
    opponent: str
    home_away: HomeAway = HomeAway.HOME
    game_type: GameType = GameType.REGULAR
    team_score: int = 0
    opponent_score: int = 0
    team_innings_batted: float | None = None
    opponent_innings_batted: float | None = None
    player_stats: tuple[PlayerAppearanceStats, ...] = field(default_factory=tuple)

    def result(self) -> GameResult | None:
        """Orient the final score as home/visitor, or None without innings data."""
        if self.team_innings_batted is None or self.opponent_innings_batted is None:
            return None
        if self.home_away is HomeAway.HOME:
            return GameResult(
                home_score=self.team_score,
                visitor_score=self.opponent_score,
                home_innings_batted=self.team_innings_batted,
                visitor_innings_batted=self.opponent_innings_batted,
            )
        return GameResult(
            home_score=self.opponent_score,
            visitor_score=self.team_score,
            home_innings_batted=self.opponent_innings_batted,
            visitor_innings_batted=self.team_innings_batted,
        )
