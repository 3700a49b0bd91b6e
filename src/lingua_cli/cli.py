"""Command-line interface for lingua-cli."""

import argparse
import logging
import os
import sys
from collections.abc import Sequence
from typing import TextIO

from . import __version__
from .config import DEFAULT_DELIMITER, DetectorConfig, OutputConfig
from .errors import LinguaCliError
from .input_source import select_input
from .language_detection import build_detector, display_name, iso_code, supported_languages
from .processor import run

# Configure logging - default to WARNING so stdout only carries results
logging.basicConfig(
    level=logging.WARNING, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# Status of a process killed by SIGPIPE
BROKEN_PIPE_EXIT_CODE = 141


def _silence_stdout() -> None:
    """Point stdout at devnull so the final flush at interpreter exit cannot fail again."""
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


def list_languages(out: TextIO) -> None:
    """Print every supported language as ``<code> - <Name>``."""
    for language in supported_languages():
        out.write(f"{iso_code(language)} - {display_name(language)}\n")


def main(
    detector_config: DetectorConfig,
    output_config: OutputConfig,
    arguments: Sequence[str] = (),
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """
    Build the detector and classify the input.

    Args:
        detector_config: Languages, quick mode and minimum relative distance
        output_config: Mode flags, thresholds and delimiter
        arguments: Positional text arguments; stdin is read when empty
        stdin: Input stream (default: sys.stdin)
        stdout: Output stream (default: sys.stdout)

    Returns:
        Exit code: 0 for success, 1 for failure
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    logger.info(f"Languages: {', '.join(detector_config.languages) or 'all'}")
    logger.info(f"Quick mode: {detector_config.quick}")
    if detector_config.minimum_relative_distance is not None:
        logger.info(f"Minimum relative distance: {detector_config.minimum_relative_distance}")
    if output_config.confidence_threshold is not None:
        logger.info(f"Confidence threshold: {output_config.confidence_threshold}")

    try:
        # Fails before any input is consumed
        detector = build_detector(detector_config)
        units = select_input(arguments, stdin, per_line=output_config.per_line)
        run(detector, units, output_config, stdout)
    except LinguaCliError as e:
        logger.debug(f"{e.error_code}: {e.technical_details}")
        print(f"error: {e.user_message}", file=sys.stderr)
        return 1
    finally:
        stdout.flush()

    return 0


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="lingua-cli",
        description=(
            "lingua-cli is a command line tool for language classification, "
            "using the lingua library."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Classify text given as arguments
  lingua-cli "Bonjour à tous"

  # Restrict to a few languages and classify stdin line by line
  lingua-cli -l en,fr,es -n < sentences.txt

  # Mixed-language text with UTF-8 byte offsets
  lingua-cli -l fr,de -m "Parlez-vous français? Ich spreche Deutsch."

Environment:
  LINGUA_CLI_LANGUAGES   default for --languages
  LINGUA_CLI_DELIMITER   default for --delimiter
        """,
    )

    parser.add_argument("text", nargs="*", metavar="TEXT", help="Text to classify")
    parser.add_argument(
        "-l",
        "--languages",
        default=None,
        help=(
            "Comma separated list of iso-639-1 codes of languages to detect, if not specified, "
            "all supported languages will be used. Setting this improves accuracy and resource usage."
        ),
    )
    parser.add_argument(
        "-n",
        "--per-line",
        action="store_true",
        help="Classify language per line, this only works if text is not supplied directly as an argument",
    )
    parser.add_argument(
        "-L", "--list", action="store_true", help="List all supported languages"
    )
    parser.add_argument(
        "-a",
        "--all",
        action="store_true",
        dest="show_all",
        help=(
            "Show all confidence values (entire probability distribution), rather than just the "
            "winning score. Does not work with --multi"
        ),
    )
    parser.add_argument("-q", "--quick", action="store_true", help="Quick/low accuracy mode")
    parser.add_argument(
        "-m",
        "--multi",
        action="store_true",
        help=(
            "Classify multiple languages in mixed texts, will return matches along with UTF-8 "
            "byte offsets. Can not be combined with line mode."
        ),
    )
    parser.add_argument(
        "-c",
        "--confidence",
        type=float,
        default=None,
        help="Confidence threshold, only output results with at least this confidence value (0.0-1.0)",
    )
    parser.add_argument(
        "-M",
        "--minlength",
        type=int,
        default=0,
        help=(
            "Minimum text length (without regard for whitespace, punctuation or numerals!). "
            "Shorter fragments will be classified as 'unknown'"
        ),
    )
    parser.add_argument(
        "-d",
        "--min-relative-distance",
        type=float,
        default=None,
        help="Minimum relative distance between top language probabilities (0.0-1.0).",
    )
    parser.add_argument(
        "-D", "--delimiter", default=None, help="Output column delimiter (default: tab)."
    )
    parser.add_argument(
        "-V", "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging on stderr"
    )
    return parser


def cli(argv: Sequence[str] | None = None) -> None:
    """Command-line interface for lingua-cli."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Set logging level based on verbose flag
    if args.verbose:
        logging.getLogger().setLevel(logging.INFO)
        logging.getLogger("lingua_cli").setLevel(logging.DEBUG)
    else:
        logging.getLogger().setLevel(logging.WARNING)

    if args.list:
        try:
            list_languages(sys.stdout)
            sys.stdout.flush()
        except BrokenPipeError:
            _silence_stdout()
            sys.exit(BROKEN_PIPE_EXIT_CODE)
        sys.exit(0)

    # Check for mutually exclusive options
    if args.per_line and args.multi:
        parser.error("--per-line and --multi are mutually exclusive")
    if args.minlength < 0:
        parser.error("--minlength must not be negative")

    # Get configuration from arguments, environment variables or defaults
    detector_config = DetectorConfig.from_options(
        languages=args.languages if args.languages is not None else os.getenv("LINGUA_CLI_LANGUAGES"),
        quick=args.quick,
        minimum_relative_distance=args.min_relative_distance,
    )
    delimiter = args.delimiter
    if delimiter is None:
        delimiter = os.getenv("LINGUA_CLI_DELIMITER", DEFAULT_DELIMITER)
    output_config = OutputConfig(
        delimiter=delimiter,
        confidence_threshold=args.confidence,
        show_all=args.show_all,
        minimum_length=args.minlength,
        per_line=args.per_line,
        multi=args.multi,
    )

    try:
        exit_code = main(detector_config, output_config, arguments=args.text)
    except KeyboardInterrupt:
        logger.info("Interrupted")
        exit_code = 130
    except BrokenPipeError:
        logger.debug("Output closed by reader")
        _silence_stdout()
        exit_code = BROKEN_PIPE_EXIT_CODE
    sys.exit(exit_code)


if __name__ == "__main__":
    cli()
