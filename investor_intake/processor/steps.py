import asyncio

from investor_intake.analysis.base import BaseAnalyzer
from investor_intake.analysis.exceptions import (
    AnalysisEmptyResponseError,
    AnalysisError,
    AnalysisValidationError,
)
from investor_intake.compliance.checker import WatchlistChecker
from investor_intake.compliance.exceptions import WatchlistError
from investor_intake.llm.exceptions import LLMError
from investor_intake.logging.logger import Log
from investor_intake.notification.base import BaseDrafter
from investor_intake.notification.exceptions import DraftError
from investor_intake.pdf.base import BasePdfExtractor
from investor_intake.pdf.exceptions import PdfExtractionError
from investor_intake.processor.exceptions import (
    AnalysisFailedError,
    DraftFailedError,
    InsufficientContentError,
    WatchlistUnavailableError,
)
from investor_intake.processor.models import PipelineStage
from investor_intake.processor.pipeline import PipelineContext, PipelineStep


class ExtractTextStep(PipelineStep):
    stage = PipelineStage.EXTRACTING

    def __init__(self, pdf_extractor: BasePdfExtractor, min_text_length: int = 20) -> None:
        self._pdf_extractor = pdf_extractor
        self._min_text_length = min_text_length

    async def run(self, context: PipelineContext) -> PipelineContext:
        document = context.document
        try:
            text = await asyncio.to_thread(self._pdf_extractor.extract, document.data)
        except PdfExtractionError as exc:
            raise InsufficientContentError() from exc

        if not text or len(text.strip()) < self._min_text_length:
            raise InsufficientContentError()

        context.extracted_text = text
        Log.info(f"Extracted {len(text)} chars from {document.name} ({document.size} bytes)")
        return context


class AnalyzeStep(PipelineStep):
    stage = PipelineStage.ANALYZING

    def __init__(self, analyzer: BaseAnalyzer) -> None:
        self._analyzer = analyzer

    async def run(self, context: PipelineContext) -> PipelineContext:
        try:
            context.record = await self._analyzer.analyze(context.extracted_text)
        except AnalysisEmptyResponseError as exc:
            raise AnalysisFailedError(AnalysisFailedError.EMPTY_RESPONSE) from exc
        except AnalysisValidationError as exc:
            raise AnalysisFailedError(AnalysisFailedError.INVALID_STRUCTURE) from exc
        except (AnalysisError, LLMError) as exc:
            raise AnalysisFailedError() from exc

        # The raw text is not needed past this point.
        context.extracted_text = ""
        return context


class CheckComplianceStep(PipelineStep):
    stage = PipelineStage.CHECKING_COMPLIANCE

    def __init__(self, checker: WatchlistChecker) -> None:
        self._checker = checker

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.record is None:
            raise ValueError("PipelineContext.record must be set before the compliance check")
        try:
            context.outcome = await self._checker.check(context.record.name)
        except WatchlistError as exc:
            raise WatchlistUnavailableError() from exc
        return context


class DraftNotificationStep(PipelineStep):
    stage = PipelineStage.DRAFTING

    def __init__(self, drafter: BaseDrafter) -> None:
        self._drafter = drafter

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.record is None or context.outcome is None:
            raise ValueError("PipelineContext.record and outcome must be set before drafting")
        try:
            context.notification = await self._drafter.draft(context.record, context.outcome)
        except (DraftError, LLMError) as exc:
            raise DraftFailedError() from exc
        return context
