"""
Domain-specific exceptions for the brand concept client.

Catching these at the CLI entry point allows clean exit codes and targeted error
messages.  All exceptions inherit from ``BrandConceptError`` so callers can
also use a single broad catch when needed.
"""

from __future__ import annotations


class BrandConceptError(Exception):
    """Base exception for all brand concept errors."""


class ConceptGenerationError(BrandConceptError):
    """Raised when the text service fails or returns unusable concept data.

    Attributes
    ----------
    details:
        Human-readable list of individual validation failures, if any.
    """

    def __init__(self, message: str, details: list[str] | None = None) -> None:
        super().__init__(message)
        self.details: list[str] = details or []


class ProviderGenerationError(BrandConceptError):
    """Raised when a GenAI backend (Gemini Developer, Vertex AI) fails."""


class ConfigurationError(BrandConceptError):
    """Raised when required configuration (env vars, optional SDKs) is missing."""
