from abc import ABC, abstractmethod

from investor_intake.analysis.models import StructuredRecord
from investor_intake.compliance.models import ComplianceOutcome
from investor_intake.notification.models import NotificationDraft


class BaseDrafter(ABC):
    """Contract for notification drafting adapters."""

    @abstractmethod
    async def draft(
        self, record: StructuredRecord, outcome: ComplianceOutcome
    ) -> NotificationDraft:
        """Write the notification body for a screened investor.

        Raises:
            DraftError: for an unsupported outcome or an empty response.
            LLMError: when the AI provider call itself fails.
        """
