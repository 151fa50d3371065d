import asyncio
from abc import ABC, abstractmethod
from pathlib import Path

import httpx

from investor_intake.compliance.exceptions import WatchlistError

DEFAULT_WATCHLIST_PATH = Path(__file__).parent / "data" / "watchlist.csv"


class BaseWatchlistSource(ABC):
    """Contract for watchlist data sources."""

    @abstractmethod
    async def fetch(self) -> str:
        """Return the raw line-oriented watchlist text.

        Raises:
            WatchlistError: if the data cannot be read.
        """

    @property
    @abstractmethod
    def location(self) -> str:
        """Human-readable location used in log messages."""


class HttpWatchlistSource(BaseWatchlistSource):
    """Downloads the watchlist over HTTP(S) on every fetch."""

    def __init__(
        self,
        url: str,
        *,
        timeout_seconds: float = 10,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._url = url
        self._timeout = timeout_seconds
        self._transport = transport

    @property
    def location(self) -> str:
        return self._url

    async def fetch(self) -> str:
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.get(self._url)
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise WatchlistError(
                f"Could not load watchlist file. Status: {exc.response.status_code}"
            ) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise WatchlistError(f"Could not load watchlist file: {exc}") from exc
        return response.text


class FileWatchlistSource(BaseWatchlistSource):
    """Reads the watchlist from a local file on every fetch."""

    def __init__(self, path: Path = DEFAULT_WATCHLIST_PATH) -> None:
        self._path = path

    @property
    def location(self) -> str:
        return str(self._path)

    async def fetch(self) -> str:
        try:
            return await asyncio.to_thread(self._path.read_text, encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise WatchlistError(f"Could not load watchlist file: {exc}") from exc
