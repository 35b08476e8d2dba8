"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from rich.console import RenderableType
from rich.panel import Panel

from ..cards import Card, Color
from ..state import GameState
from .views import BoardSummaryView

_COLOR_STYLES = {
    Color.PURPLE: "magenta",
    Color.YELLOW: "yellow",
    Color.BLUE: "blue",
    Color.GREEN: "green",
    Color.ORANGE: "dark_orange",
    Color.RED: "red",
}


def format_color(color: Color) -> str:
    style = _COLOR_STYLES.get(color, "white")
    return f"[{style}]{color.value}[/{style}]"


def format_card(card: Card) -> str:
    """Return a Rich-rendered label for ``card``."""

    if card.color is None:
        return f"[bold cyan]{card.label()}[/bold cyan]"
    style = _COLOR_STYLES.get(card.color, "white")
    if card.is_double:
        return f"[bold {style}]{card.label()}[/bold {style}]"
    return f"[{style}]{card.label()}[/{style}]"


def render_state(state: GameState, *, title: str = "Candy Land") -> RenderableType:
    """Return a Rich panel describing the current board state."""

    view = BoardSummaryView(
        state=state,
        card_formatter=format_card,
        color_formatter=format_color,
    )
    return Panel(view.render(), title=title, padding=(0, 1), border_style="cyan")
