from __future__ import annotations

from collections.abc import Mapping
from importlib import resources
from pathlib import Path

# Catppuccin Mocha.
PALETTE: dict[str, str] = {
    "rosewater": "#f5e0dc",
    "flamingo": "#f2cdcd",
    "pink": "#f5c2e7",
    "mauve": "#cba6f7",
    "red": "#f38ba8",
    "maroon": "#eba0ac",
    "peach": "#fab387",
    "yellow": "#f9e2af",
    "green": "#a6e3a1",
    "teal": "#94e2d5",
    "sky": "#89dceb",
    "sapphire": "#74c7ec",
    "blue": "#89b4fa",
    "lavender": "#b4befe",
    "text": "#cdd6f4",
}

RESET = "\x1b[0m"
DEFAULT_LOGO = "endeavouros.ansi"


def merge_palette(overrides: Mapping[str, str] | None = None) -> dict[str, str]:
    palette = dict(PALETTE)
    if overrides:
        palette.update(overrides)
    return palette


def _hex_to_rgb(color: str) -> tuple[int, int, int]:
    if not color.startswith("#"):
        raise ValueError(f"Unsupported color: {color!r}")
    value = color[1:]
    if len(value) != 6:
        raise ValueError(f"Unsupported color: {color!r}")
    try:
        return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)
    except ValueError as exc:
        raise ValueError(f"Unsupported color: {color!r}") from exc


def style(color: str, text: str, palette: Mapping[str, str] = PALETTE) -> str:
    """Prefix text with a 24-bit foreground color escape.

    ``color`` is either ``#rrggbb`` or a palette name.
    """
    r, g, b = _hex_to_rgb(palette.get(color, color))
    return f"\x1b[38;2;{r};{g};{b}m{text}{RESET}"


def check_palette(palette: Mapping[str, str]) -> None:
    for name, value in palette.items():
        try:
            _hex_to_rgb(value)
        except ValueError as exc:
            raise ValueError(f"Palette entry {name!r}: {exc}") from exc


def load_logo(path: Path | None = None) -> str:
    if path is not None:
        return path.read_text(encoding="utf-8")
    art = resources.files("motdfetch").joinpath("art", DEFAULT_LOGO)
    return art.read_text(encoding="utf-8")
