from typing import Optional


class AssistantError(Exception):
    """Base class for failures at the completion / transcription boundary."""


class TransportFailure(AssistantError):
    """Non-2xx answer or network-level failure from an external service."""

    def __init__(self, message: str = "Request to the AI service failed", status: Optional[int] = None):
        self.status = status
        if status is not None:
            message = f"{message} (status {status})"
        super().__init__(message)


class EmptyResultFailure(TransportFailure):
    """The service answered successfully but the payload is empty."""


class DecodeFailure(AssistantError):
    """The extracted candidate is not well-formed JSON."""

    def __init__(self, candidate: str, reason: str = ""):
        self.candidate = candidate
        super().__init__(f"Could not decode generated payload: {reason}" if reason else "Could not decode generated payload")
