from abc import ABC, abstractmethod
from dataclasses import dataclass

from investor_intake.analysis.models import StructuredRecord
from investor_intake.compliance.models import ComplianceOutcome
from investor_intake.notification.models import NotificationDraft
from investor_intake.processor.models import DocumentHandle, PipelineStage


@dataclass(slots=True)
class PipelineContext:
    run_id: int
    document: DocumentHandle
    extracted_text: str = ""
    record: StructuredRecord | None = None
    outcome: ComplianceOutcome | None = None
    notification: NotificationDraft | None = None


class PipelineStep(ABC):
    stage: PipelineStage

    @abstractmethod
    async def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
