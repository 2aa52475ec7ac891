from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Union

from motdfetch.config import Config
from motdfetch.quote import daily_quote
from motdfetch.style import PALETTE, load_logo, merge_palette, style
from motdfetch.system import SystemFacts, collect_facts

# Nerd Font glyphs.
ICON_USER = "\uf415"
ICON_SYSTEM = "\U000f01c5"
ICON_OS = "\uebc6"
ICON_MACHINE = "\uf4bc"
ICON_UPTIME = "\U000f0535"
ICON_ENVIRONMENT = "\U000f02dc"
ICON_SHELL = "\uebca"
ICON_TERMINAL = "\uea85"
ICON_EDITOR = "\uf044"
ICON_BROWSER = "\U000f0239"
ICON_DESKTOP = "\U000f0379"


@dataclass(frozen=True)
class IconLine:
    icon: str
    text: str


@dataclass(frozen=True)
class Divider:
    char: str = " "


@dataclass(frozen=True)
class TextLine:
    text: str


DisplayLine = Union[IconLine, Divider, TextLine]


@dataclass(frozen=True)
class FetchConfig:
    logo: str
    dashboard: list[DisplayLine] = field(default_factory=list)
    gap: int = 3


def build_dashboard(
    facts: SystemFacts,
    quote: str | None,
    palette: Mapping[str, str] = PALETTE,
) -> list[DisplayLine]:
    def icon(color: str, glyph: str) -> str:
        return style(color, glyph, palette)

    def body(text: str) -> str:
        return style("text", text, palette)

    def optional(color: str, glyph: str, value: str | None) -> list[DisplayLine]:
        if value is None:
            return []
        return [IconLine(icon(color, glyph), body(value))]

    lines: list[DisplayLine] = []
    lines += optional("red", ICON_USER, facts.username)
    lines.append(Divider())

    lines.append(IconLine(icon("peach", ICON_SYSTEM), "System"))
    lines += optional("peach", ICON_OS, facts.os_name)
    lines += optional("peach", ICON_MACHINE, facts.machine)
    lines += optional("peach", ICON_UPTIME, facts.uptime)
    lines.append(Divider())

    lines.append(IconLine(icon("yellow", ICON_ENVIRONMENT), "Environment"))
    lines += optional("yellow", ICON_SHELL, facts.shell)
    lines += optional("yellow", ICON_TERMINAL, facts.terminal)
    lines += optional("yellow", ICON_EDITOR, facts.editor)
    lines += optional("yellow", ICON_BROWSER, facts.browser)
    lines += optional("yellow", ICON_DESKTOP, facts.desktop)
    lines.append(Divider())

    if quote is not None:
        lines.append(TextLine(body(quote)))
    return lines


def build_config(
    cfg: Config,
    logo_path: Path | None = None,
    now: datetime | None = None,
    facts: SystemFacts | None = None,
) -> FetchConfig:
    quote = daily_quote(cfg, now=now)
    facts = facts or collect_facts()
    palette = merge_palette(cfg.palette)
    return FetchConfig(
        logo=load_logo(logo_path or cfg.logo_path),
        dashboard=build_dashboard(facts, quote, palette),
    )
