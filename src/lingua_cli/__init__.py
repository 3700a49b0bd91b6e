"""lingua-cli - natural language classification on the command line."""

__version__ = "0.2.0"

from .cli import cli, main
from .config import DetectorConfig, OutputConfig, OutputMode
from .errors import ConfigurationError, InputReadError, LinguaCliError

__all__ = [
    "main",
    "cli",
    "DetectorConfig",
    "OutputConfig",
    "OutputMode",
    "LinguaCliError",
    "ConfigurationError",
    "InputReadError",
    "__version__",
]
