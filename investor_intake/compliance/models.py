from enum import Enum


class ComplianceOutcome(str, Enum):
    """Binary result of the watchlist check."""

    APPROVED = "Approved"
    FLAGGED = "Flagged"
