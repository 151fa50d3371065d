from pathlib import Path

import httpx
import pytest

from investor_intake.analysis.analyzer import StructuredAnalyzer
from investor_intake.compliance.checker import WatchlistChecker
from investor_intake.compliance.source import (
    DEFAULT_WATCHLIST_PATH,
    FileWatchlistSource,
    HttpWatchlistSource,
)
from investor_intake.config.settings import Settings
from investor_intake.llm.example_client_adapter import ExampleClientAdapter
from investor_intake.notification.drafter import NotificationDrafter
from investor_intake.pdf.pdfplumber_adapter import PdfPlumberAdapter
from investor_intake.pdf.pymupdf_adapter import PyMuPdfAdapter
from investor_intake.processor.file_loader import FileLoader
from investor_intake.processor.models import ComplianceStatus, PipelineStage
from investor_intake.processor.orchestrator import PipelineOrchestrator, build_orchestrator
from investor_intake.processor.steps import (
    AnalyzeStep,
    CheckComplianceStep,
    DraftNotificationStep,
    ExtractTextStep,
)


def _orchestrator(
    source: FileWatchlistSource | HttpWatchlistSource,
    extractor: PdfPlumberAdapter | PyMuPdfAdapter | None = None,
) -> PipelineOrchestrator:
    client = ExampleClientAdapter()
    return PipelineOrchestrator(
        extract_step=ExtractTextStep(extractor or PdfPlumberAdapter()),
        analyze_step=AnalyzeStep(StructuredAnalyzer(client=client, model="example")),
        check_step=CheckComplianceStep(WatchlistChecker(source)),
        draft_step=DraftNotificationStep(NotificationDrafter(client=client, model="example")),
    )


@pytest.fixture
def investor_pdf(tmp_path: Path, investor_pdf_bytes: bytes) -> Path:
    path = tmp_path / "Investor Letter.PDF"
    path.write_bytes(investor_pdf_bytes)
    return path


@pytest.mark.integration
class TestPipelineEndToEnd:
    @pytest.mark.asyncio
    async def test_unlisted_investor_is_approved(self, investor_pdf: Path) -> None:
        orchestrator = _orchestrator(FileWatchlistSource())
        orchestrator.select_document(FileLoader().load(investor_pdf))

        final = await orchestrator.process()

        assert final.stage is PipelineStage.COMPLETE
        assert final.result is not None
        assert final.result.record.name == "Jane Doe"
        assert final.result.compliance_status is ComplianceStatus.APPROVED
        assert final.result.notification is not None
        assert final.result.notification.body

    @pytest.mark.asyncio
    @pytest.mark.parametrize("extractor", [PdfPlumberAdapter(), PyMuPdfAdapter()])
    async def test_listed_investor_is_flagged(
        self,
        investor_pdf: Path,
        tmp_path: Path,
        extractor: PdfPlumberAdapter | PyMuPdfAdapter,
    ) -> None:
        watchlist = tmp_path / "watchlist.csv"
        watchlist.write_text("name\nJohn Smith\n  JANE DOE  \n\n", encoding="utf-8")
        orchestrator = _orchestrator(FileWatchlistSource(watchlist), extractor)
        orchestrator.select_document(FileLoader().load(investor_pdf))

        final = await orchestrator.process()

        assert final.stage is PipelineStage.COMPLETE
        assert final.result is not None
        assert final.result.compliance_status is ComplianceStatus.FLAGGED

    @pytest.mark.asyncio
    async def test_unreachable_watchlist_fails_run(self, investor_pdf: Path) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(503))
        source = HttpWatchlistSource("https://example.test/watchlist.csv", transport=transport)
        orchestrator = _orchestrator(source)
        orchestrator.select_document(FileLoader().load(investor_pdf))

        final = await orchestrator.process()

        assert final.stage is PipelineStage.FAILED
        assert final.result is None
        assert final.error is not None
        assert "compliance check" in final.error

    @pytest.mark.asyncio
    async def test_malformed_watchlist_url_fails_run(self, investor_pdf: Path) -> None:
        orchestrator = _orchestrator(HttpWatchlistSource("http://[::1/w.csv"))
        orchestrator.select_document(FileLoader().load(investor_pdf))

        final = await orchestrator.process()

        assert final.stage is PipelineStage.FAILED
        assert final.error is not None
        assert "compliance check" in final.error

    @pytest.mark.asyncio
    async def test_blank_pdf_fails_with_insufficient_text(
        self, tmp_path: Path, empty_pdf_bytes: bytes
    ) -> None:
        path = tmp_path / "blank.pdf"
        path.write_bytes(empty_pdf_bytes)
        orchestrator = _orchestrator(FileWatchlistSource())
        orchestrator.select_document(FileLoader().load(path))

        final = await orchestrator.process()

        assert final.stage is PipelineStage.FAILED
        assert final.error is not None
        assert "Could not extract sufficient text" in final.error

    @pytest.mark.asyncio
    async def test_corrupted_pdf_fails_with_insufficient_text(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.pdf"
        path.write_bytes(b"%PDF-1.4 this is not really a pdf")
        orchestrator = _orchestrator(FileWatchlistSource())
        orchestrator.select_document(FileLoader().load(path))

        final = await orchestrator.process()

        assert final.stage is PipelineStage.FAILED
        assert final.error is not None
        assert "Could not extract sufficient text" in final.error


@pytest.mark.integration
class TestBuildOrchestrator:
    def test_bundled_watchlist_exists(self) -> None:
        assert DEFAULT_WATCHLIST_PATH.is_file()

    @pytest.mark.asyncio
    async def test_example_provider_runs_to_completion(self, investor_pdf: Path) -> None:
        orchestrator = build_orchestrator(Settings(llm_provider="example", pdf_engine="pymupdf"))
        orchestrator.select_document(FileLoader().load(investor_pdf))

        final = await orchestrator.process()

        assert final.stage is PipelineStage.COMPLETE
        assert final.result is not None
        assert final.result.compliance_status is ComplianceStatus.APPROVED

    @pytest.mark.asyncio
    async def test_flag_policy_completes_when_watchlist_missing(
        self, investor_pdf: Path, tmp_path: Path
    ) -> None:
        settings = Settings(
            llm_provider="example",
            watchlist_source=str(tmp_path / "missing.csv"),
            watchlist_failure_policy="flag",
        )
        orchestrator = build_orchestrator(settings)
        orchestrator.select_document(FileLoader().load(investor_pdf))

        final = await orchestrator.process()

        assert final.stage is PipelineStage.COMPLETE
        assert final.result is not None
        assert final.result.compliance_status is ComplianceStatus.FLAGGED
