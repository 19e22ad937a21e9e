"""Panel rendering for the email picker."""

from rich.console import Console, RenderableType
from rich.padding import Padding
from rich.panel import Panel
from rich.text import Text

from gitwho.core.selector import SelectorState

LEGEND = "[dim]↑↓ navigate • Enter select • q cancel[/dim]"

console = Console()
err_console = Console(stderr=True)


def build_panel(state: SelectorState, title: str) -> RenderableType:
    """Render the candidates as a bordered list.

    The row under the cursor is drawn in reverse video.
    """
    body = Text()
    for i, item in enumerate(state.items):
        if i:
            body.append("\n")
        body.append(item, style="reverse" if i == state.cursor else "")

    panel = Panel(
        body,
        title=title,
        title_align="left",
        subtitle=LEGEND,
        subtitle_align="left",
        border_style="cyan",
    )
    return Padding(panel, 2)
