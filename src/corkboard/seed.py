"""Initial board content: an HTTP JSON seed, a board file, or sample data.

Every source returns seed-shaped data::

    [{"title": "To Do", "cards": [{"text": ..., "description": ..., "dueDate": "YYYY-MM-DD"}]}]

``load_seed`` falls back to the built-in sample board whenever the
chosen source fails.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Protocol

import httpx

from corkboard.config import Settings
from corkboard.store import BoardStore

logger = logging.getLogger(__name__)


class SeedError(Exception):
    """A seed source could not produce board data."""


class SeedSource(Protocol):
    async def fetch(self) -> list[dict]: ...


class FallbackSeed:
    """Fixed sample board. One card is due today and one is five days overdue."""

    def __init__(self, today: date | None = None):
        self.today = today

    async def fetch(self) -> list[dict]:
        return sample_board(self.today)


def sample_board(today: date | None = None) -> list[dict]:
    today = today or date.today()
    past = today - timedelta(days=5)
    return [
        {
            "id": "c1",
            "title": "To Do",
            "cards": [
                {
                    "id": "t1",
                    "text": "Setup project",
                    "description": "Initialize repository and install dependencies.",
                    "dueDate": "",
                },
                {
                    "id": "t2",
                    "text": "Create components",
                    "description": "Build reusable UI components for the design system.",
                    "dueDate": today.isoformat(),
                },
            ],
        },
        {
            "id": "c2",
            "title": "In Progress",
            "cards": [
                {
                    "id": "t3",
                    "text": "Design landing page",
                    "description": "Create mockups and wireframes in Figma for the main landing page.",
                    "dueDate": "",
                },
            ],
        },
        {
            "id": "c3",
            "title": "Done",
            "cards": [
                {
                    "id": "t4",
                    "text": "Define project scope",
                    "description": "Initial planning meeting and document creation with stakeholders.",
                    "dueDate": past.isoformat(),
                },
            ],
        },
    ]


class HttpSeedSource:
    """Fetches seed data as JSON from a URL."""

    def __init__(self, url: str, timeout: float = 10.0, transport: httpx.AsyncBaseTransport | None = None):
        self.url = url
        self.timeout = timeout
        self.transport = transport

    async def fetch(self) -> list[dict]:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(self.url)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as exc:
            raise SeedError(f"seed server returned {exc.response.status_code}") from exc
        except httpx.RequestError as exc:
            raise SeedError(f"could not reach seed server: {exc}") from exc
        except ValueError as exc:
            raise SeedError(f"seed response is not JSON: {exc}") from exc

        if not isinstance(data, list) or not all(isinstance(col, dict) for col in data):
            raise SeedError("seed response is not a list of columns")
        return data


class StoredSeed:
    """Seeds from a board file written by an earlier run."""

    def __init__(self, store: BoardStore):
        self.store = store

    async def fetch(self) -> list[dict]:
        data = self.store.load()
        if data is None:
            raise SeedError(f"board file {self.store.path} is unusable")
        return data


def select_seed_source(settings: Settings, store: BoardStore | None = None) -> SeedSource:
    """Pick the best available source: board file, then URL, then sample data."""
    if store is not None and store.exists():
        return StoredSeed(store)
    if settings.seed_url:
        return HttpSeedSource(settings.seed_url, timeout=settings.seed_timeout)
    return FallbackSeed()


@dataclass
class SeedResult:
    data: list[dict]
    fallback_used: bool = False


async def load_seed(source: SeedSource, fallback: SeedSource | None = None) -> SeedResult:
    """Fetch from source, falling back to sample data on failure."""
    try:
        return SeedResult(await source.fetch())
    except SeedError as exc:
        logger.warning("could not load board seed, using sample data: %s", exc)
    fallback = fallback or FallbackSeed()
    return SeedResult(await fallback.fetch(), fallback_used=True)
