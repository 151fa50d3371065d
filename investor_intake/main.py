import argparse
import asyncio
import sys
from pathlib import Path

from investor_intake.config.settings import Settings
from investor_intake.logging.logger import Log
from investor_intake.processor.file_loader import FileLoader
from investor_intake.processor.models import PipelineStage, PipelineState
from investor_intake.processor.orchestrator import PipelineOrchestrator, build_orchestrator

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_BAD_INPUT = 2


def _log_progress(state: PipelineState) -> None:
    if state.progress:
        Log.info(state.progress)


def render(state: PipelineState) -> str:
    """Format a terminal pipeline state for the console."""
    if state.stage is PipelineStage.FAILED:
        return state.error or "Processing failed"
    if state.result is None:
        return f"No result ({state.stage.value})"
    record = state.result.record
    lines = [
        f"Name:              {record.name}",
        f"Investment amount: {record.investment_amount}",
        f"Address:           {record.address}",
        f"Compliance status: {state.result.compliance_status.value}",
    ]
    if state.result.notification is not None:
        lines += ["", state.result.notification.body]
    return "\n".join(lines)


async def run(orchestrator: PipelineOrchestrator, path: Path) -> int:
    """Process one document and print the outcome. Returns the exit code."""
    try:
        document = FileLoader().load(path)
    except (OSError, ValueError) as exc:
        Log.error(f"Cannot read {path}: {exc}")
        return EXIT_BAD_INPUT

    orchestrator.select_document(document)
    unsubscribe = orchestrator.subscribe(_log_progress)
    try:
        state = await orchestrator.process()
    finally:
        unsubscribe()

    print(render(state))
    return EXIT_OK if state.stage is PipelineStage.COMPLETE else EXIT_FAILED


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings -> build pipeline -> process the given PDF."""
    parser = argparse.ArgumentParser(
        prog="investor-intake",
        description="Extract investor details from a PDF, screen them and draft a notification.",
    )
    parser.add_argument("pdf", type=Path, help="path to the investor PDF")
    args = parser.parse_args(argv)

    settings = Settings()
    Log.configure(settings.log_level)
    orchestrator = build_orchestrator(settings)
    return asyncio.run(run(orchestrator, args.pdf))


if __name__ == "__main__":
    sys.exit(main())
