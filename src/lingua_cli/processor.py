"""Run input units through the detector and write formatted results."""

import logging
from collections.abc import Iterable
from typing import Any, TextIO

from .config import OutputConfig
from .formatting import format_result
from .input_source import InputUnit
from .language_detection.invoker import classify

logger = logging.getLogger(__name__)


def process_unit(detector: Any, unit: InputUnit, output: OutputConfig) -> list[str]:
    """Classify one input unit and return its output lines."""
    mode = output.mode_for(unit.is_line)
    result = classify(detector, unit.text, output)
    return format_result(result, mode, output, line=unit.text if unit.is_line else None)


def run(
    detector: Any,
    units: Iterable[InputUnit],
    output: OutputConfig,
    out: TextIO,
) -> int:
    """
    Process units in order, writing each unit's lines before reading the next.

    Args:
        detector: Configured language detector, shared by every unit
        units: Input units, possibly a lazy stream
        output: Output configuration
        out: Destination stream

    Returns:
        Number of units processed
    """
    processed = 0
    for unit in units:
        for line in process_unit(detector, unit, output):
            out.write(line + "\n")
        # Downstream consumers of per-line mode read results as lines arrive
        if unit.is_line:
            out.flush()
        processed += 1
    logger.info(f"Processed {processed} input unit(s)")
    return processed
