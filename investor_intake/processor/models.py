from dataclasses import dataclass, field
from enum import Enum

from investor_intake.analysis.models import StructuredRecord
from investor_intake.compliance.models import ComplianceOutcome
from investor_intake.notification.models import NotificationDraft


@dataclass(frozen=True)
class DocumentHandle:
    """User-supplied document content held for the duration of a run."""

    name: str
    data: bytes = field(repr=False)

    @property
    def size(self) -> int:
        return len(self.data)


class ComplianceStatus(str, Enum):
    APPROVED = "Approved"
    FLAGGED = "Flagged"
    CHECKING = "Checking"
    UNSET = "Unset"

    @classmethod
    def from_outcome(cls, outcome: ComplianceOutcome) -> "ComplianceStatus":
        return cls(outcome.value)


class PipelineStage(str, Enum):
    IDLE = "Idle"
    EXTRACTING = "Extracting"
    ANALYZING = "Analyzing"
    CHECKING_COMPLIANCE = "CheckingCompliance"
    DRAFTING = "Drafting"
    COMPLETE = "Complete"
    FAILED = "Failed"


BUSY_STAGES = frozenset(
    {
        PipelineStage.EXTRACTING,
        PipelineStage.ANALYZING,
        PipelineStage.CHECKING_COMPLIANCE,
        PipelineStage.DRAFTING,
    }
)

PROGRESS_LABELS: dict[PipelineStage, str] = {
    PipelineStage.EXTRACTING: "Step 1/4: Extracting text from PDF...",
    PipelineStage.ANALYZING: "Step 2/4: AI is analyzing the document...",
    PipelineStage.CHECKING_COMPLIANCE: "Step 3/4: Performing compliance check...",
    PipelineStage.DRAFTING: "Step 4/4: Drafting notification email...",
}


@dataclass(frozen=True)
class ProcessedResult:
    """What the pipeline has established about a document so far."""

    record: StructuredRecord
    compliance_status: ComplianceStatus = ComplianceStatus.UNSET
    notification: NotificationDraft | None = None


@dataclass(frozen=True)
class PipelineState:
    """Read-only snapshot published to subscribers after every transition."""

    stage: PipelineStage = PipelineStage.IDLE
    run_id: int | None = None
    document: DocumentHandle | None = None
    result: ProcessedResult | None = None
    error: str | None = None

    @property
    def is_busy(self) -> bool:
        return self.stage in BUSY_STAGES

    @property
    def progress(self) -> str:
        return PROGRESS_LABELS.get(self.stage, "")
