"""Text helpers shared by every model-facing stage."""

from .extraction import Extracted, ExtractionError, ExtractionResult, extract_json, extract_model
from .sanitizer import clean_headline, strip_category_prefix, strip_dashes

__all__ = [
    "Extracted",
    "ExtractionError",
    "ExtractionResult",
    "extract_json",
    "extract_model",
    "clean_headline",
    "strip_category_prefix",
    "strip_dashes",
]
