"""Custom exceptions for Blue Horizon API."""


class BlueHorizonError(Exception):
    """Base exception for Blue Horizon API."""
    pass


class InvalidRangeError(BlueHorizonError):
    """Raised when a range token is not one of the supported ones."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid range parameter: {token!r}")


class DataSourceError(BlueHorizonError):
    """Raised when real sensor samples cannot be fetched or decoded."""
    pass
