"""Daily quote resolution.

A quote is fetched at most once per calendar day and kept in a single text
file. Network trouble never reaches the caller: the previous quote is shown
instead, or nothing at all.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
import enum
from pathlib import Path
from typing import Any, Union

import requests

from motdfetch.config import Config
from motdfetch.util.cache import CacheEntry, FileCache
from motdfetch.util.logging import get_logger

LOG = get_logger(__name__)


class QuoteCacheError(RuntimeError):
    """The quote cache file could not be written."""


class FailureKind(enum.Enum):
    TRANSPORT = "transport"
    STATUS = "status"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class QuoteRecord:
    quote: str
    author: str

    def format(self) -> str:
        return f"{self.quote}\n~ {self.author}"


@dataclass(frozen=True)
class FetchFailure:
    kind: FailureKind
    detail: str


FetchOutcome = Union[QuoteRecord, FetchFailure]
Fetcher = Callable[[], FetchOutcome]


@dataclass(frozen=True)
class Fresh:
    text: str


@dataclass(frozen=True)
class Refreshed:
    text: str


@dataclass(frozen=True)
class FallbackStale:
    text: str
    failure: FetchFailure


@dataclass(frozen=True)
class Absent:
    failure: FetchFailure | None = None

    @property
    def text(self) -> None:
        return None


QuoteResult = Union[Fresh, Refreshed, FallbackStale, Absent]


@dataclass(frozen=True)
class QuoteContext:
    now: datetime
    cache_path: Path
    fetch: Fetcher


def parse_quote_payload(payload: Any) -> FetchOutcome:
    if not isinstance(payload, list) or not payload:
        return FetchFailure(FailureKind.MALFORMED, "expected a non-empty list")
    first = payload[0]
    if not isinstance(first, dict):
        return FetchFailure(FailureKind.MALFORMED, "first record is not an object")
    quote = first.get("q")
    author = first.get("a")
    if not isinstance(quote, str) or not isinstance(author, str):
        return FetchFailure(FailureKind.MALFORMED, "record lacks string 'q' and 'a' fields")
    return QuoteRecord(quote=quote, author=author)


class QuoteClient:
    def __init__(self, url: str, user_agent: str, timeout_seconds: float = 5.0) -> None:
        self.url = url
        self.timeout_seconds = timeout_seconds
        self.session = requests.Session()
        self.session.headers.update({"User-Agent": user_agent, "Accept": "application/json"})

    def fetch(self) -> FetchOutcome:
        LOG.info("Fetching quote: %s", self.url)
        try:
            resp = self.session.get(self.url, timeout=self.timeout_seconds)
        except requests.RequestException as exc:
            return FetchFailure(FailureKind.TRANSPORT, str(exc))
        if not 200 <= resp.status_code < 300:
            return FetchFailure(FailureKind.STATUS, f"HTTP {resp.status_code}")
        try:
            payload = resp.json()
        except ValueError as exc:
            return FetchFailure(FailureKind.MALFORMED, f"invalid JSON: {exc}")
        return parse_quote_payload(payload)


def _read_previous(entry: CacheEntry) -> str | None:
    try:
        return entry.read_text()
    except (OSError, UnicodeDecodeError) as exc:
        LOG.info("Ignoring unreadable quote cache %s: %s", entry.path, exc)
        return None


def resolve_daily_quote(ctx: QuoteContext) -> QuoteResult:
    entry = CacheEntry(ctx.cache_path)

    previous: str | None = None
    if entry.exists():
        previous = _read_previous(entry)
        if previous is not None and entry.is_fresh_on(ctx.now.date()):
            LOG.info("Quote cache hit: %s", entry.path)
            return Fresh(previous)

    outcome = ctx.fetch()
    if isinstance(outcome, FetchFailure):
        LOG.info("Quote fetch failed (%s): %s", outcome.kind.value, outcome.detail)
        if previous is not None:
            return FallbackStale(previous, outcome)
        return Absent(outcome)

    text = outcome.format()
    try:
        entry.write_text(text)
    except OSError as exc:
        raise QuoteCacheError(f"Failed to write quote cache {entry.path}") from exc
    return Refreshed(text)


def default_context(cfg: Config, now: datetime | None = None) -> QuoteContext:
    client = QuoteClient(cfg.quote.url, cfg.quote.user_agent, cfg.quote.timeout_seconds)
    entry = FileCache(cfg.app.cache_path).entry(cfg.quote.cache_file)
    return QuoteContext(
        now=now or datetime.now(),
        cache_path=entry.path,
        fetch=client.fetch,
    )


def daily_quote(cfg: Config, now: datetime | None = None) -> str | None:
    if not cfg.quote.enabled:
        return None
    try:
        return resolve_daily_quote(default_context(cfg, now)).text
    except QuoteCacheError as exc:
        LOG.info("%s: %s", exc, exc.__cause__)
        return None
