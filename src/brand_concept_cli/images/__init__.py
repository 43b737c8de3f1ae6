from .generator import ImageGenerator

__all__ = ["ImageGenerator"]
