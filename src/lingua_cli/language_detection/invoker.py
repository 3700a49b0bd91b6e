"""Decide whether to call the detector for an input unit, and which operation to call."""

import logging
import re
from typing import Any

from ..config import OutputConfig
from .builder import iso_code
from .models import ConfidenceResult, ConfidenceValue, Span, SpanResult

logger = logging.getLogger(__name__)

# Undecodable input bytes, as produced by the surrogateescape error handler
ESCAPED_BYTES = re.compile("[\udc80-\udcff]")


def long_enough(text: str, minimum: int) -> bool:
    """True if the text contains at least ``minimum`` alphabetic characters."""
    if minimum <= 0:
        return True
    count = 0
    for char in text:
        if char.isalpha():
            count += 1
            if count >= minimum:
                return True
    return False


def detector_text(text: str) -> str:
    """
    Replace escaped undecodable bytes with U+FFFD before handing text to lingua.

    The replacement is one character for one character, so lingua's character
    indices still line up with ``text``.
    """
    return ESCAPED_BYTES.sub("\ufffd", text)


def compute_confidence(detector: Any, text: str) -> ConfidenceResult:
    """Full confidence distribution for the text, highest score first."""
    values = detector.compute_language_confidence_values(detector_text(text))
    return ConfidenceResult(
        tuple(ConfidenceValue(iso_code(value.language), value.value) for value in values)
    )


def detect_spans(detector: Any, text: str) -> SpanResult:
    """
    Split a mixed-language text into single-language spans.

    lingua reports character indices into the Python string; they are
    converted to byte offsets into the UTF-8 encoding of ``text``.
    """
    spans = []
    for result in detector.detect_multiple_languages_of(detector_text(text)):
        fragment = text[result.start_index:result.end_index]
        start = len(text[:result.start_index].encode("utf-8", "surrogateescape"))
        end = start + len(fragment.encode("utf-8", "surrogateescape"))
        spans.append(Span(start, end, iso_code(result.language), fragment))
    return SpanResult(tuple(spans))


def classify(
    detector: Any, text: str, output: OutputConfig
) -> ConfidenceResult | SpanResult | None:
    """
    Run the detector operation that matches the configured mode.

    Args:
        detector: A lingua LanguageDetector (or any object with the same methods)
        text: The input unit
        output: Output configuration with the minimum length and mode flags

    Returns:
        None when the text is below the minimum alphabetic length (the detector
        is not called), a SpanResult in multi-language mode, otherwise a
        ConfidenceResult
    """
    if not long_enough(text, output.minimum_length):
        logger.debug(f"Input shorter than {output.minimum_length} letters, skipping detection")
        return None

    if output.multi:
        return detect_spans(detector, text)
    return compute_confidence(detector, text)
