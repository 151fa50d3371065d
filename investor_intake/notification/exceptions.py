class DraftError(Exception):
    """Raised when a notification draft cannot be produced."""
