"""Data models for language detection results."""

from dataclasses import dataclass

UNKNOWN = "unknown"


@dataclass(frozen=True)
class ConfidenceValue:
    """One entry of a confidence distribution."""

    language: str
    score: float

    def __repr__(self) -> str:
        return f"ConfidenceValue(language='{self.language}', score={self.score:.4f})"


@dataclass(frozen=True)
class Span:
    """A single-language fragment of a mixed-language text, located by UTF-8 byte offsets."""

    start: int
    end: int
    language: str
    fragment: str


@dataclass(frozen=True)
class ConfidenceResult:
    """Confidence distribution for one input unit, highest score first."""

    values: tuple[ConfidenceValue, ...] = ()

    def __iter__(self):
        return iter(self.values)


@dataclass(frozen=True)
class SpanResult:
    """Ordered, non-overlapping spans for one input unit."""

    spans: tuple[Span, ...] = ()

    def __iter__(self):
        return iter(self.spans)
