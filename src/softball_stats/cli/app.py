import logging
from pathlib import Path
from typing import Annotated

import typer

from softball_stats.cli._logging import configure_logging
from softball_stats.cli._output import (
    console,
    print_batting_leaders,
    print_error,
    print_fielding_leaders,
    print_game_problems,
    print_innings,
    print_pitching_leaders,
    print_validation,
)
from softball_stats.config import StatsConfigError, create_config, load_stats_settings
from softball_stats.domain.game import GameResult
from softball_stats.domain.result import Err, Ok
from softball_stats.domain.roster import StatsDocument
from softball_stats.ingest.document import load_document
from softball_stats.leaders import batting_leaders, fielding_leaders, pitching_leaders
from softball_stats.legality import check_appearance, validate_game, validate_legal_game
from softball_stats.stats import StatsSettings

logger = logging.getLogger(__name__)

app = typer.Typer(name="softball", help="Softball statistics — box-score aggregation CLI")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable DEBUG logging")] = False,
) -> None:
    """Softball statistics — box-score aggregation CLI."""
    configure_logging(verbose=verbose)
    if ctx.invoked_subcommand is None:
        raise typer.Exit()


_DocumentArg = Annotated[Path, typer.Argument(help="Path to the stats JSON document")]
_TournamentOpt = Annotated[str | None, typer.Option("--tournament", "-t", help="Only include games of this tournament")]
_ConfigOpt = Annotated[str, typer.Option("--config", help="YAML configuration file")]


def _load(path: Path) -> StatsDocument:
    match load_document(path):
        case Ok(document):
            return document
        case Err(error):
            print_error(f"{error.message} ({error.path})")
            raise typer.Exit(code=1)


def _settings(config_path: str) -> StatsSettings:
    try:
        return load_stats_settings(create_config(yaml_path=config_path))
    except StatsConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


@app.command()
def batting(path: _DocumentArg, tournament: _TournamentOpt = None, config: _ConfigOpt = "softball.yaml") -> None:
    """Show the batting leaderboard."""
    settings = _settings(config)
    print_batting_leaders(batting_leaders(_load(path), tournament, settings))


@app.command()
def pitching(path: _DocumentArg, tournament: _TournamentOpt = None, config: _ConfigOpt = "softball.yaml") -> None:
    """Show the pitching leaderboard."""
    settings = _settings(config)
    print_pitching_leaders(pitching_leaders(_load(path), tournament, settings))


@app.command()
def fielding(path: _DocumentArg, tournament: _TournamentOpt = None, config: _ConfigOpt = "softball.yaml") -> None:
    """Show the fielding leaderboard."""
    settings = _settings(config)
    print_fielding_leaders(fielding_leaders(_load(path), tournament, settings))


@app.command()
def check(path: _DocumentArg, tournament: _TournamentOpt = None) -> None:
    """Report impossible game results and inconsistent box-score lines."""
    document = _load(path)
    flagged = 0
    for game in document.games_for(tournament):
        validation = validate_game(game)
        problems = {line.player_id: p for line in game.player_stats if (p := check_appearance(line))}
        if validation.is_valid and not problems:
            continue
        flagged += 1
        print_game_problems(game, validation, problems)
    if flagged:
        logger.info("%d game(s) with problems", flagged)
        raise typer.Exit(code=1)
    console.print("[bold green]No problems found[/bold green]")


@app.command()
def innings(value: Annotated[str, typer.Argument(help="Innings in X.0/X.1/X.2 form")]) -> None:
    """Convert an innings value to outs and its normalized display form."""
    print_innings(value)


@app.command()
def legal(
    home_score: Annotated[int, typer.Option("--home-score", help="Home team final score")],
    visitor_score: Annotated[int, typer.Option("--visitor-score", help="Visiting team final score")],
    home_innings: Annotated[str, typer.Option("--home-innings", help="Innings the home team batted")],
    visitor_innings: Annotated[str, typer.Option("--visitor-innings", help="Innings the visitor batted")],
) -> None:
    """Check whether a final score is consistent with the innings each side batted."""
    validation = validate_legal_game(
        GameResult(
            home_score=home_score,
            visitor_score=visitor_score,
            home_innings_batted=home_innings,
            visitor_innings_batted=visitor_innings,
        )
    )
    print_validation(validation)
    if not validation.is_valid:
        raise typer.Exit(code=1)
