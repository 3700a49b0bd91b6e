"""Configuration for lingua-cli."""

from dataclasses import dataclass, field
from enum import Enum

DEFAULT_DELIMITER = "\t"


class OutputMode(Enum):
    """Output shapes produced by the formatter."""

    DEFAULT = "default"
    LINE = "line"
    MULTI = "multi"


def parse_language_codes(raw: str | None) -> tuple[str, ...]:
    """Split a comma separated code list, trimming whitespace and skipping empty tokens."""
    if not raw:
        return ()
    return tuple(code.strip() for code in raw.split(",") if code.strip())


@dataclass(frozen=True)
class DetectorConfig:
    """Options that shape the underlying language detector."""

    # Empty means every supported language
    languages: tuple[str, ...] = field(default_factory=tuple)
    quick: bool = False
    # None means "not given"; 0.0 is a valid explicit value
    minimum_relative_distance: float | None = None

    @classmethod
    def from_options(
        cls,
        languages: str | None = None,
        quick: bool = False,
        minimum_relative_distance: float | None = None,
    ) -> "DetectorConfig":
        """
        Create detector config from raw CLI values.

        Args:
            languages: Comma separated ISO 639-1 codes, or None for all languages
            quick: Use the low accuracy mode
            minimum_relative_distance: Explicit minimum relative distance, if given

        Returns:
            DetectorConfig instance
        """
        return cls(
            languages=parse_language_codes(languages),
            quick=quick,
            minimum_relative_distance=minimum_relative_distance,
        )


@dataclass(frozen=True)
class OutputConfig:
    """Options that decide which detector call is made and how results are rendered."""

    delimiter: str = DEFAULT_DELIMITER
    confidence_threshold: float | None = None
    show_all: bool = False
    minimum_length: int = 0
    per_line: bool = False
    multi: bool = False

    def __post_init__(self):
        """Reject combinations the pipeline cannot honour."""
        if self.per_line and self.multi:
            raise ValueError("Per-line mode and multi-language mode can not be combined")
        if self.minimum_length < 0:
            raise ValueError("Minimum length must not be negative")

    def mode_for(self, is_line: bool) -> OutputMode:
        """Output mode for an input unit."""
        if self.multi:
            return OutputMode.MULTI
        if is_line:
            return OutputMode.LINE
        return OutputMode.DEFAULT
