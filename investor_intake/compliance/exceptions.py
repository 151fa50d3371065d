class WatchlistError(Exception):
    """Raised when the watchlist cannot be loaded."""
