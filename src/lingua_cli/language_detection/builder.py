"""Build a configured lingua detector from CLI-level options."""

import logging

from lingua import Language, LanguageDetector, LanguageDetectorBuilder

from ..config import DetectorConfig
from ..errors import ConfigurationError

logger = logging.getLogger(__name__)


def iso_code(language: Language) -> str:
    """Lowercase ISO 639-1 code of a lingua language."""
    return language.iso_code_639_1.name.lower()


def display_name(language: Language) -> str:
    """Human readable language name, e.g. ``English``."""
    return language.name.capitalize()


def supported_languages() -> list[Language]:
    """All languages known to lingua, sorted by name."""
    return sorted(Language.all(), key=lambda language: language.name)


def resolve_language(code: str) -> Language:
    """
    Resolve an ISO 639-1 code to a lingua language.

    Args:
        code: Two-letter code, matched case-insensitively

    Returns:
        The matching Language

    Raises:
        ConfigurationError: If no supported language has this code
    """
    wanted = code.strip().lower()
    for language in Language.all():
        if iso_code(language) == wanted:
            return language
    raise ConfigurationError(
        f"unknown ISO 639-1 language code: {code!r}",
        technical_details={"code": code},
    )


def resolve_languages(codes: tuple[str, ...]) -> list[Language]:
    """Resolve every code, failing on the first unknown one."""
    languages = []
    for code in codes:
        language = resolve_language(code)
        if language not in languages:
            languages.append(language)
    return languages


def build_detector(config: DetectorConfig) -> LanguageDetector:
    """
    Build a lingua detector for the given configuration.

    All language codes are resolved before the detector is built, so an invalid
    code never produces a partially configured detector.

    Args:
        config: Detector configuration

    Returns:
        Configured LanguageDetector

    Raises:
        ConfigurationError: If a code is unknown or lingua rejects the options
    """
    languages = resolve_languages(config.languages)
    if len(languages) == 1:
        raise ConfigurationError(
            "at least two languages are needed to choose from, "
            f"got only {iso_code(languages[0])!r}",
            technical_details={"languages": list(config.languages)},
        )

    try:
        if languages:
            builder = LanguageDetectorBuilder.from_languages(*languages)
            logger.debug(f"Restricting detector to: {[iso_code(lang) for lang in languages]}")
        else:
            builder = LanguageDetectorBuilder.from_all_languages()
            logger.debug("Using all supported languages")

        if config.quick:
            builder = builder.with_low_accuracy_mode()
            logger.debug("Low accuracy mode enabled")

        if config.minimum_relative_distance is not None:
            builder = builder.with_minimum_relative_distance(config.minimum_relative_distance)
            logger.debug(f"Minimum relative distance: {config.minimum_relative_distance}")

        detector = builder.build()
    except ValueError as e:
        raise ConfigurationError(
            str(e),
            technical_details={
                "languages": list(config.languages),
                "minimum_relative_distance": config.minimum_relative_distance,
            },
        ) from e

    logger.info("Language detector built")
    return detector
