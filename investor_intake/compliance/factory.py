from pathlib import Path

from investor_intake.compliance.checker import WatchlistChecker
from investor_intake.compliance.models import ComplianceOutcome
from investor_intake.compliance.source import (
    BaseWatchlistSource,
    FileWatchlistSource,
    HttpWatchlistSource,
)
from investor_intake.config.settings import Settings


class WatchlistCheckerFactory:
    """Creates a WatchlistChecker wired to the configured source and failure policy."""

    FALLBACK_OUTCOMES: dict[str, ComplianceOutcome | None] = {
        "fail": None,
        "flag": ComplianceOutcome.FLAGGED,
        "approve": ComplianceOutcome.APPROVED,
    }

    @classmethod
    def create(cls, settings: Settings) -> WatchlistChecker:
        policy = settings.watchlist_failure_policy
        if policy not in cls.FALLBACK_OUTCOMES:
            raise ValueError(
                f"Unknown watchlist failure policy '{policy}'. "
                f"Choose from: {list(cls.FALLBACK_OUTCOMES)}"
            )
        return WatchlistChecker(
            source=cls.create_source(settings),
            fallback_outcome=cls.FALLBACK_OUTCOMES[policy],
        )

    @staticmethod
    def create_source(settings: Settings) -> BaseWatchlistSource:
        location = settings.watchlist_source.strip()
        if not location:
            return FileWatchlistSource()
        if location.lower().startswith(("http://", "https://")):
            return HttpWatchlistSource(
                location, timeout_seconds=settings.watchlist_timeout_seconds
            )
        return FileWatchlistSource(Path(location))
