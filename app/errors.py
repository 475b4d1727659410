"""Application errors raised by services and translated to HTTP in web.api."""


class PulseError(Exception):
    """Base application error."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ValidationError(PulseError):
    """Caller input rejected before any I/O."""

    def __init__(self, reason: str, message: str = "Validation error"):
        self.reason = reason
        super().__init__(message)


class NotFoundError(PulseError):
    """Country has no match or lacks the data this service needs."""

    def __init__(self, message: str = "Resource not found", name: str | None = None):
        self.name = name
        super().__init__(message)


class UpstreamUnavailableError(PulseError):
    """Essential upstream call failed. Message is safe to show callers."""

    def __init__(self, message: str = "Upstream service unavailable"):
        super().__init__(message)
