"""
Failure taxonomy for the receipt ingestion and recipe pipelines.

Every stage failure aborts the rest of the run. Routers turn these into
HTTP errors using ``status_code``; the message is shown to the user as-is.
"""
from __future__ import annotations

from typing import Any


class PipelineError(Exception):
    """Base class for all stage-level failures."""
    status_code: int = 500


class OcrFailure(PipelineError):
    """The image produced no usable text."""
    status_code = 422


class LlmUnavailable(PipelineError):
    """The relay could not be reached."""
    status_code = 502


class RelayFailure(PipelineError):
    """The relay answered with a non-2xx status."""
    status_code = 502

    def __init__(self, status: int, payload: Any = None) -> None:
        self.status = status
        self.payload = payload
        error = payload.get("error") if isinstance(payload, dict) else None
        super().__init__(f"Relay returned {status}: {error or 'unknown error'}")


class LlmEmptyResponse(PipelineError):
    """The provider reply carried no usable text."""
    status_code = 502


class MalformedExtraction(PipelineError):
    """The item-list response could not be parsed into the expected shape."""
    status_code = 422

    def __init__(self, raw_text: str, reason: str = "") -> None:
        self.raw_text = raw_text
        self.reason = reason
        message = "Failed to parse Gemini response"
        if reason:
            message += f" ({reason})"
        super().__init__(f"{message}:\n{raw_text}")


class NoAuthenticatedUser(PipelineError):
    """No session identity was supplied."""
    status_code = 401

    def __init__(self, message: str = "No user logged in.") -> None:
        super().__init__(message)


class PersistenceFailure(PipelineError):
    """The store rejected the insert."""
    status_code = 500
