"""Error types raised by the lingua-cli pipeline."""

from typing import Any


class LinguaCliError(Exception):
    """Base class for lingua-cli errors."""

    def __init__(
        self,
        message: str,
        error_code: str = "LINGUA_CLI_ERROR",
        technical_details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.error_code = error_code
        self.user_message = message
        self.technical_details = technical_details or {}


class ConfigurationError(LinguaCliError):
    """Invalid detector configuration, e.g. an unknown language code."""

    def __init__(self, message: str, technical_details: dict[str, Any] | None = None):
        super().__init__(message, "CONFIG_ERROR", technical_details)


class InputReadError(LinguaCliError):
    """Failure while reading from the input stream."""

    def __init__(self, message: str, technical_details: dict[str, Any] | None = None):
        super().__init__(message, "INPUT_READ_ERROR", technical_details)
