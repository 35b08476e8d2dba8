"""Composable view primitives for the Candy Land CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from rich import box
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table

from .. import board
from ..cards import Card, Color
from ..state import HUMAN_INDEX, GameState, PlayerState, token_name


@dataclass(slots=True)
class BoardSummaryView:
    """Renderable summarising every seat and the draw pile."""

    state: GameState
    card_formatter: Callable[[Card], str]
    color_formatter: Callable[[Color], str]

    def _status(self, idx: int, player: PlayerState) -> str:
        notes: list[str] = []
        if self.state.winner_index == idx:
            notes.append("[bold green]Winner[/bold green]")
        if player.skip_current_turn_display:
            notes.append("Skipped (licorice)")
        if player.skip_next_turn:
            notes.append("Skips next turn")
        if player.shortcut_taken:
            notes.append("Shortcut!")
        return ", ".join(notes) if notes else "—"

    def _metadata_panel(self) -> Panel:
        grid = Table.grid(expand=True)
        grid.add_column(justify="left")
        grid.add_row(f"[cyan]Round[/cyan]: {self.state.round_number}")
        grid.add_row(f"[cyan]Deck[/cyan]: {len(self.state.deck)} card(s)")
        grid.add_row(f"[cyan]Phase[/cyan]: {self.state.phase.value.replace('_', ' ').title()}")
        if self.state.loaded:
            grid.add_row("[cyan]Game[/cyan]: Loaded game")
        return Panel(grid, title="Table State", box=box.SQUARE, border_style="blue")

    def render(self) -> RenderableType:
        table = Table(box=box.ROUNDED, expand=True)
        table.add_column("Player", justify="left", style="bold")
        table.add_column("Token", justify="left")
        table.add_column("Square", justify="right")
        table.add_column("Color", justify="left")
        table.add_column("Drawn", justify="left")
        table.add_column("Status", justify="left")

        for idx, player in enumerate(self.state.players):
            name = "You" if idx == HUMAN_INDEX else f"Computer {idx}"
            if idx == self.state.turn_index and self.state.winner_index is None:
                name = f"[bold yellow]{name}[/bold yellow]"
            square = f"{player.position}/{board.FINISH_POSITION}"
            color = self.color_formatter(board.color_at(player.position))
            drawn = " / ".join(self.card_formatter(card) for card in player.drawn_cards) or "—"
            table.add_row(
                name,
                token_name(player.token_index),
                square,
                color,
                drawn,
                self._status(idx, player),
            )

        return Group(table, self._metadata_panel())
