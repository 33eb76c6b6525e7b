import math
from typing import Any

from softball_stats.domain.appearance import PlayerAppearanceStats
from softball_stats.domain.game import Game, GameType, HomeAway
from softball_stats.domain.roster import Player, Position, Team, Tournament, TournamentKind
from softball_stats.innings import parse_innings

# document key -> PlayerAppearanceStats field
APPEARANCE_COUNTERS: dict[str, str] = {
    "ab": "ab",
    "h": "h",
    "doubles": "doubles",
    "triples": "triples",
    "hr": "hr",
    "rbi": "rbi",
    "r": "r",
    "bb": "bb",
    "so": "so",
    "hbp": "hbp",
    "sb": "sb",
    "cs": "cs",
    "sac": "sac",
    "sf": "sf",
    "pH": "p_h",
    "pR": "p_r",
    "er": "er",
    "pBB": "p_bb",
    "pSO": "p_so",
    "pHR": "p_hr",
    "pitchCount": "pitch_count",
    "po": "po",
    "a": "a",
    "e": "e",
}

APPEARANCE_OPTIONAL: dict[str, str] = {
    "cCS": "catcher_cs",
    "cSB": "catcher_sb",
    "pb": "passed_balls",
    "pk": "pickoffs",
}


def _to_int(value: Any) -> int:
    """Counters missing from a document count as zero."""
    if value is None or value == "":
        return 0
    if isinstance(value, float) and math.isnan(value):
        return 0
    return int(value)


def _to_optional_int(value: Any) -> int | None:
    if value is None or value == "":
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    return int(value)


def _to_optional_innings(value: Any) -> float | None:
    if value is None or value == "":
        return None
    return parse_innings(value)


def _to_optional_str(value: Any) -> str | None:
    if value is None:
        return None
    s = str(value)
    if s == "":
        return None
    return s


def appearance_from_row(row: dict[str, Any]) -> PlayerAppearanceStats:
    counters = {field: _to_int(row.get(key)) for key, field in APPEARANCE_COUNTERS.items()}
    optional = {field: _to_optional_int(row.get(key)) for key, field in APPEARANCE_OPTIONAL.items()}
    return PlayerAppearanceStats(
        player_id=str(row["playerId"]),
        ip=parse_innings(row.get("ip")),
        **counters,
        **optional,
    )


def game_from_row(row: dict[str, Any]) -> Game:
    return Game(
        id=str(row["id"]),
        tournament_id=str(row["tournamentId"]),
        date=str(row.get("date", "")),
        opponent=str(row.get("opponent", "")),
        home_away=HomeAway(row.get("homeAway", HomeAway.HOME)),
        game_type=GameType(row.get("gameType", GameType.REGULAR)),
        team_score=_to_int(row.get("teamScore")),
        opponent_score=_to_int(row.get("opponentScore")),
        team_innings_batted=_to_optional_innings(row.get("teamInningsBatted")),
        opponent_innings_batted=_to_optional_innings(row.get("opponentInningsBatted")),
        player_stats=tuple(appearance_from_row(s) for s in row.get("playerStats", [])),
    )


def player_from_row(row: dict[str, Any]) -> Player:
    primary = _to_optional_str(row.get("primaryPosition"))
    return Player(
        id=str(row["id"]),
        name=str(row["name"]),
        jersey_number=str(row.get("jerseyNumber", "")),
        primary_position=Position(primary) if primary is not None else None,
        secondary_positions=tuple(Position(p) for p in row.get("secondaryPositions", [])),
        tournament_id=_to_optional_str(row.get("tournamentId")),
    )


def tournament_from_row(row: dict[str, Any]) -> Tournament:
    return Tournament(
        id=str(row["id"]),
        name=str(row["name"]),
        start_date=str(row.get("startDate", "")),
        kind=TournamentKind(row.get("type", TournamentKind.TOURNAMENT)),
        end_date=_to_optional_str(row.get("endDate")),
        team_id=_to_optional_str(row.get("teamId")),
    )


def team_from_row(row: dict[str, Any]) -> Team:
    return Team(id=str(row["id"]), name=str(row["name"]))
