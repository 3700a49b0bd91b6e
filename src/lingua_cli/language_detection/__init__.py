"""Language detection module for lingua-cli."""

from .builder import (
    build_detector,
    display_name,
    iso_code,
    resolve_language,
    supported_languages,
)
from .invoker import classify, compute_confidence, detect_spans, detector_text, long_enough
from .models import UNKNOWN, ConfidenceResult, ConfidenceValue, Span, SpanResult

__all__ = [
    "build_detector",
    "display_name",
    "iso_code",
    "resolve_language",
    "supported_languages",
    "classify",
    "compute_confidence",
    "detector_text",
    "detect_spans",
    "long_enough",
    "UNKNOWN",
    "ConfidenceResult",
    "ConfidenceValue",
    "Span",
    "SpanResult",
]
