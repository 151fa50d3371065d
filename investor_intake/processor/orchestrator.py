"""Sequential extract -> analyze -> check -> notify pipeline with observable state."""

import itertools
from collections.abc import Callable
from dataclasses import replace

from investor_intake.analysis.analyzer import StructuredAnalyzer
from investor_intake.compliance.factory import WatchlistCheckerFactory
from investor_intake.compliance.models import ComplianceOutcome
from investor_intake.config.settings import Settings
from investor_intake.llm.factory import ChatClientFactory
from investor_intake.logging.logger import Log
from investor_intake.notification.drafter import NotificationDrafter
from investor_intake.pdf.factory import PdfExtractorFactory
from investor_intake.processor.exceptions import (
    NoDocumentSelectedError,
    ProcessingError,
    RunInProgressError,
    UnknownFailureError,
)
from investor_intake.processor.models import (
    ComplianceStatus,
    DocumentHandle,
    PipelineStage,
    PipelineState,
    ProcessedResult,
)
from investor_intake.processor.pipeline import PipelineContext, PipelineStep
from investor_intake.processor.steps import (
    AnalyzeStep,
    CheckComplianceStep,
    DraftNotificationStep,
    ExtractTextStep,
)

StateListener = Callable[[PipelineState], None]

ERROR_PREFIX = "Processing failed: "

_DRAFTABLE_OUTCOMES = frozenset({ComplianceOutcome.APPROVED, ComplianceOutcome.FLAGGED})


class _StaleRun(Exception):
    """Raised internally when a run was superseded by reset() while awaiting a stage."""


class PipelineOrchestrator:
    """Owns the single run-state slot and drives one document through the pipeline.

    Stages: Idle -> Extracting -> Analyzing -> CheckingCompliance -> Drafting
    -> Complete, with Failed reachable from every working stage. A snapshot
    is published after each transition, both to ``subscribe``d listeners and
    through the ``state`` property.

    Each run carries an identity token. ``reset()`` invalidates the token of
    an in-flight run without cancelling it; when that run's next stage
    resolves, its completion is discarded instead of published.
    """

    def __init__(
        self,
        *,
        extract_step: PipelineStep,
        analyze_step: PipelineStep,
        check_step: PipelineStep,
        draft_step: PipelineStep,
    ) -> None:
        self._extract_step = extract_step
        self._analyze_step = analyze_step
        self._check_step = check_step
        self._draft_step = draft_step
        self._run_ids = itertools.count(1)
        self._active_run_id: int | None = None
        self._state = PipelineState()
        self._listeners: list[StateListener] = []
        # Last snapshot each in-flight run published, keyed by run id
        self._run_snapshots: dict[int, PipelineState] = {}

    @property
    def state(self) -> PipelineState:
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener for published states. Returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def select_document(self, document: DocumentHandle | None) -> None:
        """Hold ``document`` for the next run (``None`` clears the selection).

        Any finished run's result or error is dropped and the stage returns
        to Idle.

        Raises:
            RunInProgressError: while a run is in flight.
        """
        if self._state.is_busy:
            raise RunInProgressError()
        self._publish(PipelineState(document=document))

    def reset(self) -> None:
        """Return to Idle, drop the document and abandon any in-flight run."""
        if self._active_run_id is not None and self._state.is_busy:
            Log.info(f"Run {self._active_run_id} abandoned by reset")
        self._active_run_id = None
        self._publish(PipelineState())

    async def process(self) -> PipelineState:
        """Run the pipeline for the selected document.

        Stage failures do not raise: they end the run in Failed with a
        "Processing failed: ..." message and no result.

        Returns the last state this run published. For a run abandoned by
        ``reset()`` that is its final pre-reset snapshot, not the current
        ``state``.

        Raises:
            RunInProgressError: if a run is already in flight.
            NoDocumentSelectedError: if no document is selected.
        """
        if self._state.is_busy:
            raise RunInProgressError()
        document = self._state.document
        if document is None:
            raise NoDocumentSelectedError()

        run_id = next(self._run_ids)
        self._active_run_id = run_id
        Log.info(f"Run {run_id}: processing {document.name} ({document.size} bytes)")
        self._publish_run(
            run_id, PipelineState(stage=PipelineStage.EXTRACTING, run_id=run_id, document=document)
        )

        context = PipelineContext(run_id=run_id, document=document)
        try:
            await self._run_stages(context)
        except _StaleRun:
            Log.debug(f"Run {run_id}: discarding completion after reset")
        except Exception as exc:
            self._fail(run_id, exc)
        return self._run_snapshots.pop(run_id)

    async def _run_stages(self, context: PipelineContext) -> None:
        context = await self._run_step(self._extract_step, context)
        self._advance(context.run_id, PipelineStage.ANALYZING)

        context = await self._run_step(self._analyze_step, context)
        if context.record is None:
            raise ValueError("Analysis stage finished without a structured record")
        result = ProcessedResult(record=context.record, compliance_status=ComplianceStatus.CHECKING)
        self._advance(context.run_id, PipelineStage.CHECKING_COMPLIANCE, result)

        context = await self._run_step(self._check_step, context)
        outcome = context.outcome
        if outcome not in _DRAFTABLE_OUTCOMES:
            Log.warning(f"Run {context.run_id}: unexpected compliance outcome {outcome!r}, skipping draft")
            self._advance(context.run_id, PipelineStage.COMPLETE, result)
            return
        result = replace(result, compliance_status=ComplianceStatus.from_outcome(outcome))
        self._advance(context.run_id, PipelineStage.DRAFTING, result)

        context = await self._run_step(self._draft_step, context)
        result = replace(result, notification=context.notification)
        self._advance(context.run_id, PipelineStage.COMPLETE, result)
        Log.info(f"Run {context.run_id}: complete with status {result.compliance_status.value}")

    async def _run_step(self, step: PipelineStep, context: PipelineContext) -> PipelineContext:
        try:
            context = await step.run(context)
        except Exception:
            self._ensure_current(context.run_id)
            raise
        self._ensure_current(context.run_id)
        return context

    def _ensure_current(self, run_id: int) -> None:
        if run_id != self._active_run_id:
            raise _StaleRun()

    def _advance(
        self,
        run_id: int,
        stage: PipelineStage,
        result: ProcessedResult | None = None,
    ) -> None:
        Log.debug(f"Run {run_id}: entering {stage.value}")
        self._publish_run(run_id, replace(self._state, stage=stage, result=result, error=None))

    def _fail(self, run_id: int, exc: Exception) -> None:
        error = exc if isinstance(exc, ProcessingError) else UnknownFailureError(str(exc) or None)
        stage = self._state.stage.value
        if error is exc:
            cause = f" (cause: {exc.__cause__})" if exc.__cause__ is not None else ""
            Log.error(f"Run {run_id} failed during {stage}: {error}{cause}")
        else:
            Log.exception(f"Run {run_id} failed during {stage} with unexpected error: {exc!r}")
        self._publish_run(
            run_id,
            replace(
                self._state,
                stage=PipelineStage.FAILED,
                result=None,
                error=f"{ERROR_PREFIX}{error}",
            ),
        )

    def _publish_run(self, run_id: int, state: PipelineState) -> None:
        self._run_snapshots[run_id] = state
        self._publish(state)

    def _publish(self, state: PipelineState) -> None:
        self._state = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                Log.exception(f"State listener {listener!r} raised")


def build_orchestrator(settings: Settings) -> PipelineOrchestrator:
    """Build a PipelineOrchestrator with all adapters chosen by ``settings``."""
    client = ChatClientFactory.create(settings)
    model = ChatClientFactory.resolve_model_name(settings)
    return PipelineOrchestrator(
        extract_step=ExtractTextStep(
            PdfExtractorFactory.create(settings),
            min_text_length=settings.min_text_length,
        ),
        analyze_step=AnalyzeStep(
            StructuredAnalyzer(
                client=client,
                model=model,
                temperature=settings.analysis_temperature,
            )
        ),
        check_step=CheckComplianceStep(WatchlistCheckerFactory.create(settings)),
        draft_step=DraftNotificationStep(
            NotificationDrafter(
                client=client,
                model=model,
                temperature=settings.drafting_temperature,
            )
        ),
    )
