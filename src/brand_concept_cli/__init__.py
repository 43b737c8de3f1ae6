"""Interactive AI logo concept client backed by Gemini text and image models."""

__version__ = "0.1.0"
