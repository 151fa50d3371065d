from abc import ABC, abstractmethod

from investor_intake.analysis.models import StructuredRecord


class BaseAnalyzer(ABC):
    """Contract for all structured analysis adapters."""

    @abstractmethod
    async def analyze(self, text: str) -> StructuredRecord:
        """Turn validated document text into a structured record.

        Args:
            text: Plain text extracted from the document.

        Returns:
            StructuredRecord with name, investment_amount and address.

        Raises:
            AnalysisError: on any failure (empty, malformed or invalid response).
            LLMError: when the AI provider call itself fails.
        """
