"""Shared pytest fixtures for test modules."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import pytest

if TYPE_CHECKING:
    from pathlib import Path

from softball_stats.domain.roster import StatsDocument
from softball_stats.ingest.document import parse_document


def _appearance(player_id: str, **counters: Any) -> dict[str, Any]:
    return {"playerId": player_id, **counters}


@pytest.fixture
def raw_document() -> dict[str, Any]:
    """A two-tournament season in the application's JSON document shape."""
    return {
        "teams": [{"id": "team1", "name": "Lady Hornets"}],
        "tournaments": [
            {"id": "t1", "name": "Spring League", "startDate": "2025-03-01", "type": "league", "teamId": "team1"},
            {"id": "t2", "name": "Summer Classic", "startDate": "2025-06-10", "type": "tournament"},
        ],
        "players": [
            {"id": "p1", "name": "Ava", "jerseyNumber": "7", "primaryPosition": "SS", "secondaryPositions": ["2B"]},
            {"id": "p2", "name": "Mia", "jerseyNumber": "21", "primaryPosition": "P", "secondaryPositions": []},
            {"id": "p3", "name": "Zoe", "jerseyNumber": "2", "primaryPosition": "C"},
            {"id": "p4", "name": "Bench", "jerseyNumber": "99", "primaryPosition": "FLEX"},
        ],
        "games": [
            {
                "id": "g1",
                "tournamentId": "t1",
                "date": "2025-03-08",
                "opponent": "Hawks",
                "homeAway": "home",
                "gameType": "regular",
                "teamScore": 6,
                "opponentScore": 2,
                "teamInningsBatted": 6.0,
                "opponentInningsBatted": 7.0,
                "playerStats": [
                    _appearance("p1", ab=4, h=2, doubles=1, rbi=2, r=1, bb=1, po=2, a=3, e=0),
                    _appearance("p2", ab=3, h=1, ip=4.1, pH=3, pR=1, er=1, pBB=1, pSO=5, pitchCount=60, po=1),
                    _appearance("p3", ab=3, h=0, so=2, po=8, a=1, e=1, cCS=1, cSB=2),
                ],
            },
            {
                "id": "g2",
                "tournamentId": "t1",
                "date": "2025-03-15",
                "opponent": "Comets",
                "homeAway": "away",
                "gameType": "regular",
                "teamScore": 3,
                "opponentScore": 5,
                "playerStats": [
                    _appearance("p1", ab=3, h=0, so=1, po=1, a=2, e=1),
                    _appearance("p2", ab=3, h=2, hr=1, ip=2.2, pH=4, pR=3, er=2, pBB=2, pSO=2, pitchCount=55),
                    _appearance("p3", ab=3, h=1, po=6, cCS=1, cSB=0),
                ],
            },
            {
                "id": "g3",
                "tournamentId": "t2",
                "date": "2025-06-11",
                "opponent": "Storm",
                "homeAway": "home",
                "teamScore": 2,
                "opponentScore": 9,
                "teamInningsBatted": 4.2,
                "opponentInningsBatted": 5.0,
                "playerStats": [
                    _appearance("p1", ab=2, h=3, po=1),
                ],
            },
        ],
    }


@pytest.fixture
def document(raw_document: dict[str, Any]) -> StatsDocument:
    return parse_document(raw_document)


@pytest.fixture
def document_path(tmp_path: Path, raw_document: dict[str, Any]) -> Path:
    path = tmp_path / "softball.json"
    path.write_text(json.dumps(raw_document))
    return path
