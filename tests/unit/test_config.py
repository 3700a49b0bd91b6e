"""Tests for configuration module."""

import dataclasses

import pytest

from lingua_cli.config import (
    DEFAULT_DELIMITER,
    DetectorConfig,
    OutputConfig,
    OutputMode,
    parse_language_codes,
)


class TestParseLanguageCodes:
    """Test splitting of comma separated code lists."""

    def test_none_and_empty(self):
        assert parse_language_codes(None) == ()
        assert parse_language_codes("") == ()

    def test_trims_and_skips_empty_tokens(self):
        assert parse_language_codes(" en, fr ,,de , ") == ("en", "fr", "de")


class TestDetectorConfig:
    """Test detector configuration."""

    def test_defaults(self):
        config = DetectorConfig()
        assert config.languages == ()
        assert config.quick is False
        assert config.minimum_relative_distance is None

    def test_from_options(self):
        config = DetectorConfig.from_options(languages="EN,fr", quick=True)
        assert config.languages == ("EN", "fr")
        assert config.quick is True

    def test_zero_distance_is_kept(self):
        """0.0 is an explicit value, distinct from not given."""
        config = DetectorConfig.from_options(minimum_relative_distance=0.0)
        assert config.minimum_relative_distance == 0.0
        assert config.minimum_relative_distance is not None

    def test_immutable(self):
        config = DetectorConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.quick = True


class TestOutputConfig:
    """Test output configuration."""

    def test_defaults(self):
        config = OutputConfig()
        assert config.delimiter == DEFAULT_DELIMITER == "\t"
        assert config.confidence_threshold is None
        assert config.minimum_length == 0

    def test_per_line_and_multi_rejected(self):
        with pytest.raises(ValueError, match="can not be combined"):
            OutputConfig(per_line=True, multi=True)

    def test_negative_minimum_length_rejected(self):
        with pytest.raises(ValueError, match="must not be negative"):
            OutputConfig(minimum_length=-1)

    def test_mode_for(self):
        assert OutputConfig().mode_for(is_line=False) is OutputMode.DEFAULT
        assert OutputConfig(per_line=True).mode_for(is_line=True) is OutputMode.LINE
        assert OutputConfig(multi=True).mode_for(is_line=False) is OutputMode.MULTI
