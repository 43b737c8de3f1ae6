from .generator import CONCEPT_COUNT, ConceptGenerator, parse_concept_drafts

__all__ = ["CONCEPT_COUNT", "ConceptGenerator", "parse_concept_drafts"]
