class AnalysisError(Exception):
    """Raised when structured analysis of document text fails."""


class AnalysisEmptyResponseError(AnalysisError):
    """Raised when the AI provider answers with no content."""


class AnalysisValidationError(AnalysisError):
    """Raised when the AI response is not a valid structured record."""
