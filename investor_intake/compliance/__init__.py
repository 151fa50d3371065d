from investor_intake.compliance.checker import WatchlistChecker
from investor_intake.compliance.models import ComplianceOutcome

__all__ = ["ComplianceOutcome", "WatchlistChecker"]
