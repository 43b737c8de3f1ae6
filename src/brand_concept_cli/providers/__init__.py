from .base import GenerativeProvider
from .factory import create_provider
from .mock import MockGenerativeProvider

__all__ = ["GenerativeProvider", "MockGenerativeProvider", "create_provider"]
