"""Prompt highlight command line entry point."""

import argparse
import logging
import sys
from typing import List, Optional

from highlight.config import Config, resolve_config_path
from highlight.diff import highlight
from highlight.filters import process_inputs
from highlight.markup import STYLES, get_style
from highlight.validation import LOG_LEVELS

# stdout carries the prompt, so logs go to stderr
logging.basicConfig(
    level=logging.WARNING, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

STDIN_MARKER = "-"


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        description="Highlight the difference between two prompt strings"
    )
    parser.add_argument("current", help="First string, or '-' to read it from stdin")
    parser.add_argument("previous", help="Second string, or '-' to read it from stdin")
    parser.add_argument("--config", help="Path to config YAML file")
    parser.add_argument(
        "--style", choices=sorted(STYLES), help="Markup style (overrides config)"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=sorted(LOG_LEVELS),
        help="Logging level (overrides config)",
    )
    return parser


def read_input(value: str) -> str:
    """Return the argument value, reading stdin for the '-' marker."""
    if value == STDIN_MARKER:
        return sys.stdin.read()
    return value


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.current == STDIN_MARKER and args.previous == STDIN_MARKER:
        parser.error("only one of the inputs can be read from stdin")

    if args.log_level:
        logging.getLogger().setLevel(args.log_level)

    try:
        config = Config(resolve_config_path(args.config))
    except (OSError, ValueError) as e:
        logger.error(f"Configuration error: {e}")
        return 2

    logging.getLogger().setLevel(args.log_level or config.get_log_level())

    try:
        style = get_style(args.style) if args.style else config.get_style()
        text_a, text_b = process_inputs(
            read_input(args.current),
            read_input(args.previous),
            strip_whitespace=config.get_strip_whitespace(),
        )
        highlighted_a, highlighted_b = highlight(text_a, text_b, style)
    except Exception as e:
        logger.error(f"Highlight error: {e}", exc_info=True)
        return 1

    print(highlighted_a, highlighted_b, sep=config.get_separator())
    return 0


if __name__ == "__main__":
    sys.exit(main())
