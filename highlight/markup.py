"""Markup styles understood by prompt renderers."""
from dataclasses import dataclass
from typing import Dict, Optional

DEFAULT_STYLE = "zsh"


@dataclass(frozen=True)
class MarkupStyle:
    """Fixed on/off marker pair for one target renderer."""

    name: str
    on: str
    off: str
    escape_char: Optional[str] = None  # Doubled in output; None disables escaping

    @property
    def marker_length(self) -> int:
        """Combined length of one on/off marker pair."""
        return len(self.on) + len(self.off)


# zsh prompt expansion: red foreground, bold
ZSH_STYLE = MarkupStyle(name="zsh", on="%F{red}%B", off="%b%f", escape_char="%")

# Raw terminal escape codes for shells without prompt expansion
ANSI_STYLE = MarkupStyle(name="ansi", on="\033[1m\033[31m", off="\033[0m")

STYLES: Dict[str, MarkupStyle] = {
    style.name: style for style in (ZSH_STYLE, ANSI_STYLE)
}


def get_style(name: str) -> MarkupStyle:
    """Look up a markup style by name.

    Args:
        name: Style name, e.g. "zsh" or "ansi"

    Returns:
        The matching MarkupStyle

    Raises:
        ValueError: If no style with that name exists
    """
    style = STYLES.get(name)
    if style is None:
        known = ", ".join(sorted(STYLES))
        raise ValueError(f"Unknown markup style '{name}'. Choose one of: {known}")
    return style
