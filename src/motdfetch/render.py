from __future__ import annotations

from rich.console import Console, Group
from rich.table import Table
from rich.text import Text

from motdfetch.dashboard import DisplayLine, Divider, FetchConfig, IconLine, TextLine


def line_text(line: DisplayLine) -> Text:
    if isinstance(line, IconLine):
        return Text.assemble(Text.from_ansi(line.icon), "  ", Text.from_ansi(line.text))
    if isinstance(line, Divider):
        return Text(line.char)
    if isinstance(line, TextLine):
        return Text.from_ansi(line.text)
    raise TypeError(f"Unknown display line: {line!r}")


def render(config: FetchConfig, console: Console) -> None:
    grid = Table.grid(padding=(0, config.gap))
    grid.add_column(no_wrap=True)
    grid.add_column()
    logo = Text.from_ansi(config.logo.rstrip("\n"))
    dashboard = Group(*(line_text(line) for line in config.dashboard))
    grid.add_row(logo, dashboard)
    console.print(grid)
