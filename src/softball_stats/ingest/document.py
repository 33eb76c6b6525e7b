import json
import logging
from pathlib import Path
from typing import Any

from softball_stats.domain.errors import DocumentError
from softball_stats.domain.result import Err, Ok, Result
from softball_stats.domain.roster import StatsDocument
from softball_stats.ingest.column_maps import game_from_row, player_from_row, team_from_row, tournament_from_row

logger = logging.getLogger(__name__)


def parse_document(raw: dict[str, Any]) -> StatsDocument:
    """Map the application's JSON document onto domain records.

    Raises ``KeyError``/``ValueError`` for rows missing required identifiers
    or carrying unknown enum values.
    """
    return StatsDocument(
        teams=tuple(team_from_row(r) for r in raw.get("teams", [])),
        tournaments=tuple(tournament_from_row(r) for r in raw.get("tournaments", [])),
        players=tuple(player_from_row(r) for r in raw.get("players", [])),
        games=tuple(game_from_row(r) for r in raw.get("games", [])),
    )


def load_document(path: str | Path) -> Result[StatsDocument, DocumentError]:
    path = Path(path)
    logger.debug("Reading stats document %s", path)
    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except OSError as e:
        return Err(DocumentError(message=f"cannot read document: {e}", path=str(path)))
    except json.JSONDecodeError as e:
        return Err(DocumentError(message=f"invalid JSON: {e}", path=str(path)))

    if not isinstance(raw, dict):
        return Err(DocumentError(message="document root must be an object", path=str(path)))

    try:
        document = parse_document(raw)
    except (KeyError, ValueError, TypeError) as e:
        return Err(DocumentError(message=f"malformed document: {e!r}", path=str(path)))

    logger.info(
        "Loaded %d players and %d games from %s",
        len(document.players),
        len(document.games),
        path,
    )
    return Ok(document)
