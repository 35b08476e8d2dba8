"""Typer entry-point wiring for the Candy Land CLI."""

from __future__ import annotations

import logging
from collections import deque
from pathlib import Path
from typing import Sequence

import typer
from rich import box
from rich.align import Align
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from .. import board, saves, simulation
from ..state import HUMAN_INDEX, NUM_PLAYERS, CandyLandConfig, Difficulty, token_name
from ..turns import GameSession, RoundReport, TurnRecord
from .render import format_card, format_color, render_state

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()

MAX_EVENT_LOG = 12
DECK_PREVIEW = 8


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _actor_label(index: int) -> str:
    return "[yellow]You[/yellow]" if index == HUMAN_INDEX else f"[cyan]Computer {index}[/cyan]"


def _describe_turn(record: TurnRecord) -> str:
    actor = _actor_label(record.player_index)
    move = record.move
    if move is None:
        return f"{actor} sat on licorice and lost the turn"
    if len(record.drawn) == 2 and record.chosen is not None:
        drawn = " and ".join(format_card(card) for card in record.drawn)
        text = f"{actor} drew {drawn}, chose {format_card(record.chosen)}"
    else:
        text = f"{actor} drew {format_card(move.card)}"
    text += f" → {move.landing} ({format_color(board.color_at(move.landing))})"
    if move.shortcut_from is not None:
        text += f", took {board.SHORTCUT_NAMES[move.shortcut_from]} to {move.position}"
    if move.landed_on_skip:
        text += ", stuck on licorice"
    if move.finished:
        text += " [bold green]and reached the finish![/bold green]"
    return text


def _event_panel(events: Sequence[str]) -> Panel:
    log_table = Table.grid(expand=True)
    log_table.add_column(justify="left")
    if events:
        for line in events:
            log_table.add_row(line)
    else:
        log_table.add_row("[dim]Event log will appear here[/dim]")
    return Panel(log_table, title="Event Log", border_style="magenta", box=box.SIMPLE)


def _record_round(events: deque[str], report: RoundReport) -> None:
    events.append(f"[dim]Round {report.round_number}[/dim]")
    for record in report.turns:
        events.append(_describe_turn(record))


def _winner_panel(winner: int) -> Panel:
    if winner == HUMAN_INDEX:
        message = "[bold green]Congratulations! You have won the game![/bold green]"
    else:
        message = f"[bold red]Computer {winner} has won the game![/bold red]"
    return Panel(Align.center(message, vertical="middle"), border_style="green", box=box.ROUNDED)


def _prompt_slot() -> int:
    choice = Prompt.ask("Save slot", choices=[str(slot) for slot in saves.VALID_SLOTS], default="1")
    return int(choice)


@app.command()
def play(
    difficulty: Difficulty = typer.Option(
        Difficulty.NORMAL,
        case_sensitive=False,
        help="[bold]extreme[/bold] lets computers draw two cards and keep the better one.",
    ),
    token: int = typer.Option(0, min=0, max=NUM_PLAYERS - 1, help="Your game piece (0-3)."),
    seed: int | None = typer.Option(None, help="Random seed for reproducible games (omit for randomness)."),
    load: int | None = typer.Option(None, min=1, max=3, help="Resume the game saved in this slot."),
    save_dir: Path = typer.Option(Path("."), help="Directory holding the save slot files."),
    verbose: bool = typer.Option(False, "--verbose", help="Log every draw and move."),
) -> None:
    """Play against three computer opponents, one round per key press."""

    _configure_logging(verbose)
    config = CandyLandConfig(difficulty=difficulty, token_selection=token, seed=seed, save_dir=save_dir)
    session = GameSession(config)
    events: deque[str] = deque(maxlen=MAX_EVENT_LOG)

    if load is not None:
        if session.load(load):
            events.append(f"Loaded slot {load}")
        else:
            console.print(f"[yellow]Slot {load} is empty; starting a new game.[/yellow]")

    console.print(f"Your piece: [bold]{token_name(session.player(HUMAN_INDEX).token_index)}[/bold]")
    while session.winner < 0:
        console.print(render_state(session.state))
        console.print(_event_panel(events))
        choice = Prompt.ask(
            "[bold]d[/bold] draw • [bold]s[/bold] save • [bold]q[/bold] quit",
            choices=["d", "s", "q"],
            default="d",
            show_choices=False,
        )
        if choice == "q":
            raise typer.Exit()
        if choice == "s":
            slot = _prompt_slot()
            if session.save(slot):
                console.print(f"[green]Game saved in slot {slot}.[/green]")
            else:
                console.print(f"[red]Could not save slot {slot}.[/red]")
            continue
        report = session.draw_card()
        if report is not None:
            _record_round(events, report)

    console.print(render_state(session.state))
    console.print(_event_panel(events))
    console.print(_winner_panel(session.winner))


@app.command()
def simulate(
    games: int = typer.Option(100, min=1, help="Number of complete games to play."),
    difficulty: Difficulty = typer.Option(Difficulty.NORMAL, case_sensitive=False, help="Computer difficulty."),
    seed: int = typer.Option(123, help="Random seed for the batch."),
    verbose: bool = typer.Option(False, "--verbose", help="Log every draw and move."),
) -> None:
    """Play many games automatically and report how often each seat wins."""

    _configure_logging(verbose)
    report = simulation.run_simulation(games, difficulty=difficulty, seed=seed)

    table = Table(title=f"{games} Game Simulation ({difficulty.value})", box=box.SIMPLE_HEAVY)
    table.add_column("Seat", justify="center")
    table.add_column("Wins", justify="right")
    table.add_column("Win rate", justify="right")
    table.add_column("Shortcuts", justify="right")
    table.add_column("Skips", justify="right")

    for total in report.history.totals():
        idx = total.player_index
        label = "You" if idx == HUMAN_INDEX else f"Computer {idx}"
        table.add_row(
            label,
            str(report.win_counts[idx]),
            f"{report.win_rates[idx]:.1%}",
            str(total.shortcuts),
            str(total.skips),
        )

    console.print(table)
    console.print(f"[cyan]Mean rounds: {report.mean_rounds:.1f} (longest {report.max_rounds}).[/cyan]")


@app.command()
def inspect(
    slot: int = typer.Argument(..., help="Save slot to decode (1-3)."),
    save_dir: Path = typer.Option(Path("."), help="Directory holding the save slot files."),
) -> None:
    """Show the contents of a save slot."""

    if slot not in saves.VALID_SLOTS:
        raise typer.BadParameter("Slot must be between 1 and 3.")
    record = saves.read_slot(slot, save_dir)
    if record is None:
        console.print(f"[yellow]Slot {slot} is empty.[/yellow]")
        raise typer.Exit(code=1)

    table = Table(title=f"Slot {slot}", box=box.SIMPLE_HEAVY)
    table.add_column("Player", justify="center")
    table.add_column("Token", justify="left")
    table.add_column("Position", justify="right")
    table.add_column("Skips next turn", justify="center")
    for idx, player in enumerate(record.players):
        table.add_row(
            _actor_label(idx),
            token_name(player.token_index),
            str(player.position),
            "yes" if player.skip_next_turn else "no",
        )
    console.print(table)

    preview = " ".join(format_card(card) for card in record.deck[:DECK_PREVIEW])
    more = len(record.deck) - DECK_PREVIEW
    if more > 0:
        preview += f" … (+{more})"
    console.print(f"[cyan]Deck[/cyan]: {len(record.deck)} card(s) {preview}")


def main() -> None:
    """Entry-point for ``python -m candyland.cli``."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
