"""Shared pytest fixtures for all tests."""

import io
from types import SimpleNamespace

import pytest
from lingua import Language


class StubDetector:
    """Stand-in for a lingua LanguageDetector that records how often it is called."""

    def __init__(self, confidence_values=None, spans=None):
        # (Language, score) pairs, highest score first
        self.confidence_values = confidence_values or []
        # (start_index, end_index, Language) tuples in character indices
        self.spans = spans or []
        self.confidence_calls = []
        self.multi_calls = []

    @property
    def call_count(self) -> int:
        return len(self.confidence_calls) + len(self.multi_calls)

    def compute_language_confidence_values(self, text):
        self.confidence_calls.append(text)
        return [
            SimpleNamespace(language=language, value=score)
            for language, score in self.confidence_values
        ]

    def detect_multiple_languages_of(self, text):
        self.multi_calls.append(text)
        return [
            SimpleNamespace(start_index=start, end_index=end, language=language)
            for start, end, language in self.spans
        ]


@pytest.fixture
def stub_detector():
    """Detector returning a fixed English/French/German distribution."""
    return StubDetector(
        confidence_values=[
            (Language.ENGLISH, 0.75),
            (Language.FRENCH, 0.2),
            (Language.GERMAN, 0.05),
        ]
    )


@pytest.fixture
def certain_detector():
    """Detector that is completely sure the text is French."""
    return StubDetector(
        confidence_values=[
            (Language.FRENCH, 1.0),
            (Language.ENGLISH, 0.0),
        ]
    )


@pytest.fixture
def stdin_factory():
    """Build an in-memory text stream."""

    def _make(text: str) -> io.StringIO:
        return io.StringIO(text)

    return _make


@pytest.fixture
def make_detector():
    """Factory for stub detectors with custom results."""
    return StubDetector
