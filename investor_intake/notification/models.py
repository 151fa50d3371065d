from dataclasses import dataclass

from investor_intake.compliance.models import ComplianceOutcome


@dataclass(frozen=True)
class NotificationDraft:
    """Body-only notification text, tagged with the outcome it answers."""

    body: str
    intent: ComplianceOutcome
