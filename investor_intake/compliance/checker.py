"""Exact, case-insensitive watchlist screening."""

from investor_intake.compliance.exceptions import WatchlistError
from investor_intake.compliance.models import ComplianceOutcome
from investor_intake.compliance.source import BaseWatchlistSource
from investor_intake.logging.logger import Log


def normalize_name(name: str) -> str:
    return name.strip().lower()


def parse_watchlist(raw: str) -> list[str]:
    """Split watchlist text into normalized names.

    The first line is a header and is discarded; blank lines are dropped.
    """
    rows = [normalize_name(row) for row in raw.split("\n")]
    return [row for row in rows[1:] if row]


class WatchlistChecker:
    """Screens a name against a watchlist loaded fresh for every check.

    When the watchlist cannot be loaded the check fails, unless a
    ``fallback_outcome`` is configured, in which case that outcome is
    returned and a warning is logged.
    """

    def __init__(
        self,
        source: BaseWatchlistSource,
        fallback_outcome: ComplianceOutcome | None = None,
    ) -> None:
        self._source = source
        self._fallback_outcome = fallback_outcome

    async def check(self, name: str) -> ComplianceOutcome:
        """Return FLAGGED if the normalized name is on the watchlist, else APPROVED.

        Raises:
            WatchlistError: if the watchlist cannot be loaded and no fallback is set.
        """
        try:
            raw = await self._source.fetch()
        except WatchlistError as exc:
            if self._fallback_outcome is None:
                raise
            Log.warning(
                f"Watchlist {self._source.location} unavailable ({exc}); "
                f"applying fallback outcome {self._fallback_outcome.value}"
            )
            return self._fallback_outcome

        entries = parse_watchlist(raw)
        if normalize_name(name) in entries:
            Log.info(f"Compliance check: {name} is FLAGGED")
            return ComplianceOutcome.FLAGGED
        Log.info(f"Compliance check: {name} is APPROVED ({len(entries)} entries screened)")
        return ComplianceOutcome.APPROVED
