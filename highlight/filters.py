"""Input normalization utilities."""
from typing import Tuple


def normalize_input(text: str, strip_whitespace: bool = True) -> str:
    """Reduce raw input to a single prompt line.

    Args:
        text: Raw input, e.g. captured command output
        strip_whitespace: Remove leading and trailing whitespace

    Returns:
        First non-blank line of text, optionally stripped
    """
    lines = [line for line in text.splitlines() if line.strip()]
    line = lines[0] if lines else ""

    if strip_whitespace:
        return line.strip()
    return line


def process_inputs(text_a: str, text_b: str,
                   strip_whitespace: bool = True) -> Tuple[str, str]:
    """Normalize both inputs of a highlight call.

    Args:
        text_a: First raw input
        text_b: Second raw input
        strip_whitespace: Remove leading and trailing whitespace

    Returns:
        Tuple of (normalized_a, normalized_b)
    """
    return (
        normalize_input(text_a, strip_whitespace),
        normalize_input(text_b, strip_whitespace),
    )
