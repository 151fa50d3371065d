class ProcessingError(Exception):
    """Base exception for all pipeline failures.

    ``str(exc)`` is the user-facing message; orchestrator failures are
    published as ``"Processing failed: <message>"``.
    """

    default_message = "An unknown error occurred."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class NoDocumentSelectedError(ProcessingError):
    default_message = "Please select a PDF file first."


class RunInProgressError(ProcessingError):
    default_message = "A document is already being processed."


class InsufficientContentError(ProcessingError):
    default_message = (
        "Could not extract sufficient text from the PDF. The document might be "
        "empty, scanned as an image, or corrupted."
    )


class AnalysisFailedError(ProcessingError):
    default_message = "Failed to analyze the document with AI. Please try again."

    EMPTY_RESPONSE = (
        "The API returned an empty response. The document may not contain the "
        "required information."
    )
    INVALID_STRUCTURE = (
        "AI failed to generate valid structured data. The document might be "
        "unclear or lack the required information."
    )


class WatchlistUnavailableError(ProcessingError):
    default_message = "The compliance check couldn't be completed."


class DraftFailedError(ProcessingError):
    default_message = "Failed to generate notification email with AI."


class UnknownFailureError(ProcessingError):
    """Wraps any exception that escaped a stage without being classified."""
