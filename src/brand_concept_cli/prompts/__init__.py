from .builder import CONCEPTS_RESPONSE_SCHEMA, IMAGE_STYLE_SUFFIX, build_concepts_prompt, build_image_prompt

__all__ = ["CONCEPTS_RESPONSE_SCHEMA", "IMAGE_STYLE_SUFFIX", "build_concepts_prompt", "build_image_prompt"]
