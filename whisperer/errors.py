"""Exceptions raised by the generation pipeline and mapped to HTTP status codes by the adapters."""


class WhispererError(Exception):
    """Base class for all PM Whisperer errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(WhispererError):
    """Request failed validation (e.g. feature too short). API should return 400."""

    def __init__(self, message: str = "Feature is required."):
        super().__init__(message)


class ServiceUnavailableError(WhispererError):
    """Generation service is not configured. API should return 500; no call is attempted."""

    def __init__(self, message: str = "Missing OPENAI_API_KEY in environment."):
        super().__init__(message)


class GenerationFailure(WhispererError):
    """Generation call was attempted and produced nothing usable."""

    public_message = "Failed to generate argument."


class TransportError(GenerationFailure):
    """Network failure, non-success status or timeout from the OpenAI API."""
    pass


class MalformedResponseError(GenerationFailure):
    """Response body was not a JSON object."""
    pass


class EmptyResultError(GenerationFailure):
    """JSON parsed but the variants list was missing, not a list, or empty."""

    public_message = "No variants returned."
