"""Prompt highlight generation utilities."""
import logging
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from highlight.markup import ZSH_STYLE, MarkupStyle

logger = logging.getLogger(__name__)


def count_escapes(text: str, escape_char: Optional[str] = "%") -> int:
    """Count occurrences of the escape character in text."""
    if not escape_char:
        return 0
    return text.count(escape_char)


def escape(text: str, count: Optional[int] = None, escape_char: str = "%") -> str:
    """Double every escape character so the renderer prints it literally.

    Args:
        text: Input text
        count: Number of escape characters in text, if already known
        escape_char: Character to double

    Returns:
        Escaped copy of text, exactly len(text) + count characters long

    Raises:
        ValueError: If count does not match the text
    """
    actual = count_escapes(text, escape_char)
    if count is None:
        count = actual
    elif count != actual:
        raise ValueError(
            f"Escape count mismatch: expected {count} '{escape_char}', found {actual}"
        )

    if count == 0:
        return text
    return text.replace(escape_char, escape_char * 2)


def split_units(escaped: str, escape_char: Optional[str] = "%") -> List[str]:
    """Split escaped text into display units.

    A doubled escape character is a single unit, so markup inserted between
    units can never separate the two halves of an escape pair.
    """
    if not escape_char:
        return list(escaped)

    units = []
    i = 0
    while i < len(escaped):
        if escaped[i] == escape_char:
            units.append(escaped[i:i + 2])
            i += 2
        else:
            units.append(escaped[i])
            i += 1
    return units


def common_prefix(one: Sequence, two: Sequence) -> int:
    """Return the index of the first element that differs.

    Args:
        one: First sequence (string or list of units)
        two: Second sequence

    Returns:
        Length of the common leading run; the shorter length on a full match
    """
    shorter = min(len(one), len(two))
    for i in range(shorter):
        if one[i] != two[i]:
            return i
    return shorter


def common_suffix(one: Sequence, two: Sequence, prefix: Optional[int] = None) -> int:
    """Return the length of the common trailing run.

    Only the part of the shorter sequence not already claimed by the common
    prefix is considered, so prefix and suffix never overlap.

    Args:
        one: First sequence (string or list of units)
        two: Second sequence
        prefix: Common prefix length, computed when omitted

    Returns:
        Number of matching trailing elements, at most
        min(len(one), len(two)) - prefix
    """
    if prefix is None:
        prefix = common_prefix(one, two)

    limit = min(len(one), len(two)) - prefix
    for i in range(limit):
        if one[-1 - i] != two[-1 - i]:
            return i
    return limit


def max_toggles(one: Sequence, two: Sequence) -> int:
    """Upper bound on highlight on/off pairs between two sequences.

    Worst case is strictly alternating matches and mismatches; the bound
    depends on the lengths only and is intentionally loose.
    """
    relevant_length = max(len(one), len(two))
    # ceil((n + 1) / 2)
    return (relevant_length + 2) // 2


def output_capacity(text: str, other: str, style: MarkupStyle = ZSH_STYLE) -> int:
    """Upper bound on the length of the highlighted form of text.

    Covers escaping plus the worst-case number of inserted markers, and one
    extra slot for a terminator.
    """
    return (
        1
        + len(text)
        + count_escapes(text, style.escape_char)
        + 2 * max_toggles(text, other) * style.marker_length
    )


class HighlightState(Enum):
    """Highlight state shared by both output streams."""

    PLAIN = "plain"
    HIGHLIGHTED = "highlighted"


class _PairWriter:
    """Collects both outputs; a single state drives markup for both."""

    def __init__(self, style: MarkupStyle):
        self.style = style
        self.state = HighlightState.PLAIN
        self.parts_a: List[str] = []
        self.parts_b: List[str] = []
        self.toggles = 0

    def extend_both(self, units: Sequence[str]) -> None:
        self.parts_a.extend(units)
        self.parts_b.extend(units)

    def match(self, unit: str) -> None:
        if self.state is HighlightState.HIGHLIGHTED:
            self.parts_a.append(self.style.off)
            self.parts_b.append(self.style.off)
            self.state = HighlightState.PLAIN
        self.parts_a.append(unit)
        self.parts_b.append(unit)

    def mismatch(self, unit_a: str, unit_b: str) -> None:
        if self.state is HighlightState.PLAIN:
            self.parts_a.append(self.style.on)
            self.parts_b.append(self.style.on)
            self.state = HighlightState.HIGHLIGHTED
            self.toggles += 1
        self.parts_a.append(unit_a)
        self.parts_b.append(unit_b)

    def finish(self, rest_a: Sequence[str], rest_b: Sequence[str]) -> None:
        """Close the core region on both sides.

        A side with leftover units gets them highlighted, opening a bracket
        only when the shared state is plain. A side without leftovers only
        closes an open bracket. Both outputs end the core balanced.
        """
        highlighted = self.state is HighlightState.HIGHLIGHTED
        opened = False
        for parts, rest in ((self.parts_a, rest_a), (self.parts_b, rest_b)):
            if rest:
                if not highlighted:
                    parts.append(self.style.on)
                    opened = True
                parts.extend(rest)
                parts.append(self.style.off)
            elif highlighted:
                parts.append(self.style.off)
        if opened:
            self.toggles += 1
        self.state = HighlightState.PLAIN

    def result(self) -> Tuple[str, str]:
        return "".join(self.parts_a), "".join(self.parts_b)


def highlight(
    text_a: str, text_b: str, style: MarkupStyle = ZSH_STYLE
) -> Tuple[str, str]:
    """Highlight the differing middle of two nearly identical strings.

    The common prefix and suffix are copied unmarked. Between them the two
    strings are compared position by position and every run of differing
    characters is wrapped in the style's on/off markers, in both outputs at
    the same time. Escape characters are doubled throughout.

    Args:
        text_a: First string, e.g. the current branch name
        text_b: Second string, e.g. the previous branch name
        style: Marker set of the target renderer

    Returns:
        Tuple of (highlighted_a, highlighted_b)

    Raises:
        TypeError: If either input is not a string
    """
    if not isinstance(text_a, str) or not isinstance(text_b, str):
        raise TypeError(
            f"highlight() expects two strings, got {type(text_a).__name__} "
            f"and {type(text_b).__name__}"
        )

    escape_char = style.escape_char
    escapes_a = count_escapes(text_a, escape_char)
    escapes_b = count_escapes(text_b, escape_char)
    escaped_a = escape(text_a, escapes_a, escape_char) if escapes_a else text_a
    escaped_b = escape(text_b, escapes_b, escape_char) if escapes_b else text_b

    units_a = split_units(escaped_a, escape_char)
    units_b = split_units(escaped_b, escape_char)

    prefix = common_prefix(units_a, units_b)
    suffix = common_suffix(units_a, units_b, prefix)
    core_a = units_a[prefix:len(units_a) - suffix]
    core_b = units_b[prefix:len(units_b) - suffix]

    writer = _PairWriter(style)
    writer.extend_both(units_a[:prefix])

    for unit_a, unit_b in zip(core_a, core_b):
        if unit_a == unit_b:
            writer.match(unit_a)
        else:
            writer.mismatch(unit_a, unit_b)

    aligned = min(len(core_a), len(core_b))
    writer.finish(core_a[aligned:], core_b[aligned:])
    writer.extend_both(units_a[len(units_a) - suffix:])

    highlighted_a, highlighted_b = writer.result()
    logger.debug(
        "Highlighted %r/%r: prefix=%d suffix=%d toggles=%d",
        text_a,
        text_b,
        prefix,
        suffix,
        writer.toggles,
    )

    for name, text, other, output in (
        ("A", text_a, text_b, highlighted_a),
        ("B", text_b, text_a, highlighted_b),
    ):
        capacity = output_capacity(text, other, style)
        if len(output) >= capacity:
            logger.warning(
                "Highlighted output %s is %d characters, estimated capacity was %d",
                name,
                len(output),
                capacity,
            )

    return highlighted_a, highlighted_b
