from rich.console import Console
from rich.table import Table

from softball_stats.domain.game import Game
from softball_stats.formatting import (
    PerformanceLevel,
    avg_level,
    era_level,
    fld_level,
    format_avg,
    format_era,
    format_pct,
    format_rate,
    format_whip,
    obp_level,
    ops_level,
    slg_level,
)
from softball_stats.innings import display_from_outs, format_innings, outs_from_display
from softball_stats.leaders import BattingLine, FieldingLine, PitchingLine
from softball_stats.legality import GameValidation

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

_LEVEL_STYLES: dict[PerformanceLevel, str] = {
    PerformanceLevel.ELITE: "green",
    PerformanceLevel.AVERAGE: "yellow",
    PerformanceLevel.UNDER: "red",
}


def _styled(text: str, level: PerformanceLevel) -> str:
    style = _LEVEL_STYLES[level]
    return f"[{style}]{text}[/{style}]"


def print_error(message: str) -> None:
    err_console.print(f"[red bold]Error:[/red bold] {message}")


def print_batting_leaders(lines: list[BattingLine]) -> None:
    if not lines:
        console.print("No batting statistics found.")
        return
    table = Table(title="Batting Statistics", show_edge=False, pad_edge=False)
    table.add_column("Player")
    table.add_column("#", justify="right")
    for header in ("G", "PA", "AB", "H", "2B", "3B", "HR", "RBI", "R", "BB", "K", "SB"):
        table.add_column(header, justify="right")
    for header in ("AVG", "OBP", "SLG", "OPS", "BB%", "K%"):
        table.add_column(header, justify="right")
    for line in lines:
        t, s = line.totals, line.stats
        table.add_row(
            line.player.name,
            line.player.jersey_number,
            str(t.games),
            str(s.pa),
            str(t.ab),
            str(t.h),
            str(t.doubles),
            str(t.triples),
            str(t.hr),
            str(t.rbi),
            str(t.r),
            str(t.bb),
            str(t.so),
            str(t.sb),
            _styled(format_avg(s.avg), avg_level(s.avg)),
            _styled(format_pct(s.obp), obp_level(s.obp)),
            _styled(format_pct(s.slg), slg_level(s.slg)),
            _styled(format_pct(s.ops), ops_level(s.ops)),
            format_rate(s.bb_pct),
            format_rate(s.k_pct),
        )
    console.print(table)


def print_pitching_leaders(lines: list[PitchingLine]) -> None:
    if not lines:
        console.print("No pitching statistics found.")
        return
    table = Table(title="Pitching Statistics", show_edge=False, pad_edge=False)
    table.add_column("Player")
    for header in ("G", "IP", "H", "R", "ER", "BB", "K", "HR", "ERA", "WHIP", "K/BB", "OBA", "P/IP"):
        table.add_column(header, justify="right")
    for line in lines:
        t, s = line.totals, line.stats
        table.add_row(
            line.player.name,
            str(t.games),
            f"{display_from_outs(t.outs):.1f}",
            str(t.h),
            str(t.r),
            str(t.er),
            str(t.bb),
            str(t.so),
            str(t.hr),
            _styled(format_era(s.era), era_level(s.era)),
            format_whip(s.whip),
            f"{s.k_bb:.2f}",
            format_pct(s.oba),
            f"{s.pitches_per_inning:.1f}",
        )
    console.print(table)


def print_fielding_leaders(lines: list[FieldingLine]) -> None:
    if not lines:
        console.print("No fielding statistics found.")
        return
    table = Table(title="Fielding Statistics", show_edge=False, pad_edge=False)
    table.add_column("Player")
    for header in ("G", "PO", "A", "E", "FLD%", "CS", "SB", "CS%"):
        table.add_column(header, justify="right")
    for line in lines:
        t, s = line.totals, line.stats
        table.add_row(
            line.player.name,
            str(t.games),
            str(t.po),
            str(t.a),
            str(t.e),
            _styled(format_pct(s.fld_pct), fld_level(s.fld_pct)),
            str(t.catcher_cs),
            str(t.catcher_sb),
            format_pct(s.cs_pct),
        )
    console.print(table)


def print_innings(value: str) -> None:
    outs = outs_from_display(value)
    console.print(f"[bold]{value}[/bold] = {outs} outs, displayed as {format_innings(value)}")


def print_validation(validation: GameValidation) -> None:
    if validation.is_valid:
        console.print("[bold green]Valid[/bold green] game result")
        return
    console.print(f"[bold red]Invalid[/bold red] game result ({validation.rule}): {validation.reason}")


def print_game_problems(game: Game, validation: GameValidation, lines: dict[str, list[str]]) -> None:
    console.print(f"[bold]Game {game.id}[/bold] vs {game.opponent} ({game.date})")
    if not validation.is_valid:
        console.print(f"  [red]{validation.reason}[/red]")
    for player_id, problems in lines.items():
        for problem in problems:
            console.print(f"  player {player_id}: {problem}")
