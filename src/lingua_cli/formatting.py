"""Render detection results as delimiter-separated output lines."""

from .config import OutputConfig, OutputMode
from .language_detection.models import UNKNOWN, ConfidenceResult, SpanResult


def format_score(score: float) -> str:
    """Exactly 1.0 prints as ``1``; every other score gets 16 decimal places."""
    if score == 1.0:
        return "1"
    return f"{score:.16f}"


def _passes(score: float, threshold: float | None) -> bool:
    return threshold is None or score >= threshold


def format_unknown(mode: OutputMode, delimiter: str, line: str | None = None) -> str:
    """The ``unknown`` line for a unit that was not classified."""
    if mode is OutputMode.LINE:
        return f"{UNKNOWN}{delimiter}{delimiter}{line or ''}"
    return f"{UNKNOWN}{delimiter}"


def format_confidence_values(result: ConfidenceResult, output: OutputConfig) -> list[str]:
    """
    Render a confidence distribution for whole-input mode.

    Only the top entry is considered unless ``show_all`` is set. Entries below
    the confidence threshold are skipped; if nothing is left a single
    ``unknown`` line is returned.
    """
    delimiter = output.delimiter
    lines = []
    for value in result:
        if _passes(value.score, output.confidence_threshold):
            lines.append(f"{value.language}{delimiter}{format_score(value.score)}")
        if not output.show_all:
            break
    if not lines:
        lines.append(format_unknown(OutputMode.DEFAULT, delimiter))
    return lines


def format_line_confidence_values(
    line: str, result: ConfidenceResult, output: OutputConfig
) -> list[str]:
    """
    Render a confidence distribution for one line of per-line mode.

    Every emitted line carries the original text as its last column. Each
    visited entry below the threshold becomes its own ``unknown`` line, so with
    ``show_all`` a line can yield several ``unknown`` rows.
    """
    delimiter = output.delimiter
    lines = []
    for value in result:
        if _passes(value.score, output.confidence_threshold):
            lines.append(
                f"{value.language}{delimiter}{format_score(value.score)}{delimiter}{line}"
            )
        else:
            lines.append(format_unknown(OutputMode.LINE, delimiter, line))
        if not output.show_all:
            break
    if not lines:
        lines.append(format_unknown(OutputMode.LINE, delimiter, line))
    return lines


def format_spans(result: SpanResult, delimiter: str) -> list[str]:
    """Render multi-language spans; thresholds and ``show_all`` do not apply."""
    return [
        f"{span.start}{delimiter}{span.end}{delimiter}{span.language}{delimiter}{span.fragment}"
        for span in result
    ]


def format_result(
    result: ConfidenceResult | SpanResult | None,
    mode: OutputMode,
    output: OutputConfig,
    line: str | None = None,
) -> list[str]:
    """Dispatch to the formatter for the given mode; ``None`` means the unit was too short."""
    if result is None:
        return [format_unknown(mode, output.delimiter, line)]
    if isinstance(result, SpanResult):
        return format_spans(result, output.delimiter)
    if mode is OutputMode.LINE:
        return format_line_confidence_values(line or "", result, output)
    return format_confidence_values(result, output)
