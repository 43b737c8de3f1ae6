from .brand import BrandInput, Concept, ConceptDraft, InlineImage

__all__ = ["BrandInput", "Concept", "ConceptDraft", "InlineImage"]
