"""Custom exceptions."""


class ShukujitsuError(Exception):
    """Base exception for shukujitsu."""


class RangeLimitExceededError(ShukujitsuError):
    """Raised when a range query spans more days than the configured maximum."""

    def __init__(self, limit: int, requested_days: int) -> None:
        self.limit = limit
        self.requested_days = requested_days
        super().__init__(
            f"Date range exceeds maximum allowed days ({limit}). "
            f"Requested: {requested_days} days. "
            "Use configure(max_between_days=0) to disable this limit."
        )


class InvalidConfigError(ShukujitsuError, ValueError):
    """Raised when a configuration value is invalid."""


class OfficialDataError(ShukujitsuError):
    """Raised when the official holiday list cannot be fetched or parsed."""
