from bookguard.extraction.exceptions import (
    ExtractionError,
    ExtractionFailedError,
    UnsupportedFormatError,
)
from bookguard.extraction.models import MediaKind, SourceDocument
from bookguard.extraction.optical import OpticalFallbackExtractor
from bookguard.extraction.orchestrator import ExtractionOrchestrator
from bookguard.extraction.text_layer import TextLayerExtractor

__all__ = [
    "ExtractionError",
    "ExtractionFailedError",
    "ExtractionOrchestrator",
    "MediaKind",
    "OpticalFallbackExtractor",
    "SourceDocument",
    "TextLayerExtractor",
    "UnsupportedFormatError",
]
