from dataclasses import dataclass, field
import os
from pathlib import Path
import tomllib

from motdfetch.style import check_palette


def _xdg_dir(var: str, fallback: str) -> Path:
    value = os.environ.get(var)
    if value:
        return Path(value)
    return Path.home() / fallback


def default_cache_dir() -> str:
    return str(_xdg_dir("XDG_CACHE_HOME", ".cache"))


@dataclass(frozen=True)
class AppConfig:
    cache_dir: str = field(default_factory=default_cache_dir)
    logo_path: str | None = None

    @property
    def cache_path(self) -> Path:
        return Path(self.cache_dir).expanduser()


@dataclass(frozen=True)
class QuoteConfig:
    enabled: bool = True
    url: str = "https://zenquotes.io/api/random/"
    timeout_seconds: float = 5.0
    user_agent: str = "motdfetch/0.1"
    cache_file: str = "motd.txt"


@dataclass(frozen=True)
class Config:
    app: AppConfig = field(default_factory=AppConfig)
    quote: QuoteConfig = field(default_factory=QuoteConfig)
    palette: dict[str, str] = field(default_factory=dict)

    @property
    def logo_path(self) -> Path | None:
        if not self.app.logo_path:
            return None
        return Path(self.app.logo_path).expanduser()


def default_config_path() -> Path:
    return _xdg_dir("XDG_CONFIG_HOME", ".config") / "motdfetch" / "config.toml"


def load_config(path: Path | None = None) -> Config:
    if path is not None and not path.exists():
        raise FileNotFoundError(
            f"Missing config file: {path}. Copy config.example.toml there and edit it."
        )

    config_path = path or default_config_path()
    if not config_path.exists():
        return Config()

    raw = tomllib.loads(config_path.read_text(encoding="utf-8"))

    app = raw.get("app", {})
    quote = raw.get("quote", {})
    palette = {str(k): str(v) for k, v in raw.get("palette", {}).items()}
    check_palette(palette)

    return Config(
        app=AppConfig(**app),
        quote=QuoteConfig(**quote),
        palette=palette,
    )
