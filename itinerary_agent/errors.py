"""Failure conditions raised by the generation pipeline."""
from __future__ import annotations


class ItineraryAgentError(Exception):
    """Base class for every pipeline failure."""


class BackendUnavailable(ItineraryAgentError):
    """No credential is configured for the generation backend."""


class GenerationFailed(ItineraryAgentError):
    """The backend was configured but the completion call failed."""


class MalformedResponse(ItineraryAgentError):
    """The backend returned text that does not decode into the expected shape."""

    def __init__(self, stage: str, detail: str) -> None:
        self.stage = stage
        self.detail = detail
        super().__init__(f"{stage} returned a malformed response: {detail}")
