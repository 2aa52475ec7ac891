from datetime import datetime

import pytest
from rich.console import Console

from motdfetch import dashboard, quote as quote_mod
from motdfetch.config import AppConfig, Config, QuoteConfig
from motdfetch.dashboard import (
    Divider,
    IconLine,
    TextLine,
    build_config,
    build_dashboard,
)
from motdfetch.quote import FailureKind, FetchFailure
from motdfetch.render import render
from motdfetch.style import PALETTE, load_logo, style
from motdfetch.system import SystemFacts


def test_style_uses_truecolor_escape() -> None:
    assert style("#102030", "hi") == "\x1b[38;2;16;32;48mhi\x1b[0m"
    assert style("red", "x") == style(PALETTE["red"], "x")


def test_style_rejects_unknown_color() -> None:
    with pytest.raises(ValueError):
        style("chartreuse", "x")
    with pytest.raises(ValueError):
        style("#12", "x")
    with pytest.raises(ValueError, match="'white'"):
        style("text", "x", dict(PALETTE, text="white"))


def test_bundled_logo_loads() -> None:
    assert "sssss" in load_logo()


def test_full_dashboard_order() -> None:
    facts = SystemFacts(
        username="alice",
        os_name="GNU/Linux",
        machine="x86_64",
        uptime="up 1 hour",
        shell="zsh",
        terminal="xterm",
        editor="nvim",
        browser="firefox",
        desktop="sway",
    )

    lines = build_dashboard(facts, "Q\n~ A")

    kinds = [type(line).__name__ for line in lines]
    assert kinds == [
        "IconLine",
        "Divider",
        "IconLine", "IconLine", "IconLine", "IconLine",
        "Divider",
        "IconLine", "IconLine", "IconLine", "IconLine", "IconLine", "IconLine",
        "Divider",
        "TextLine",
    ]
    assert lines[0].text == style("text", "alice")
    assert lines[2].text == "System"
    assert lines[7].text == "Environment"
    assert lines[-1] == TextLine(style("text", "Q\n~ A"))


def test_absent_facts_and_quote_are_omitted() -> None:
    lines = build_dashboard(SystemFacts(shell="bash"), None)

    assert not any(isinstance(line, TextLine) for line in lines)
    icon_texts = [line.text for line in lines if isinstance(line, IconLine)]
    assert icon_texts == ["System", "Environment", style("text", "bash")]
    assert sum(isinstance(line, Divider) for line in lines) == 3


def test_palette_overrides_apply() -> None:
    palette = dict(PALETTE, text="#000000")
    lines = build_dashboard(SystemFacts(username="bob"), None, palette)
    assert lines[0].text == "\x1b[38;2;0;0;0mbob\x1b[0m"


def test_build_config_tolerates_quote_failure(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(
        quote_mod.QuoteClient,
        "fetch",
        lambda self: FetchFailure(FailureKind.TRANSPORT, "offline"),
    )
    cfg = Config(app=AppConfig(cache_dir=str(tmp_path)), quote=QuoteConfig())

    built = build_config(cfg, now=datetime(2024, 5, 2, 9, 0), facts=SystemFacts(username="alice"))

    assert not any(isinstance(line, TextLine) for line in built.dashboard)
    assert built.logo == load_logo()


def test_build_config_custom_logo(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(dashboard, "collect_facts", lambda: SystemFacts())
    logo = tmp_path / "logo.ansi"
    logo.write_text("LOGO", encoding="utf-8")
    cfg = Config(app=AppConfig(cache_dir=str(tmp_path)), quote=QuoteConfig(enabled=False))

    built = build_config(cfg, logo_path=logo)

    assert built.logo == "LOGO"


def test_render_places_lines_beside_logo() -> None:
    config = dashboard.FetchConfig(
        logo="ART",
        dashboard=build_dashboard(SystemFacts(username="alice"), "Be kind\n~ Anon"),
    )
    console = Console(record=True, width=100, color_system=None)

    render(config, console)

    output = console.export_text()
    assert "ART" in output
    assert "alice" in output
    assert "Be kind" in output
    assert "~ Anon" in output
