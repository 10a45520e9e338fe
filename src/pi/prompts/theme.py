"""Text styles and the prompt theme."""

from __future__ import annotations

from dataclasses import dataclass, field

# SGR foreground colour codes
COLORS: dict[str, int] = {
    "black": 30,
    "red": 31,
    "green": 32,
    "yellow": 33,
    "blue": 34,
    "magenta": 35,
    "cyan": 36,
    "grey": 37,
    "dark_grey": 90,
}

_RESET = "\x1b[0m"


@dataclass(frozen=True)
class TextStyle:
    """Foreground colour plus attributes applied to one printed span."""

    color: str | None = None
    bold: bool = False
    italic: bool = False

    def __post_init__(self) -> None:
        if self.color is not None and self.color not in COLORS:
            raise ValueError(f"Unknown color: {self.color!r}")

    @property
    def is_plain(self) -> bool:
        return self.color is None and not self.bold and not self.italic

    def apply(self, text: str) -> str:
        """Wrap *text* in SGR sequences for this style."""
        if self.is_plain or not text:
            return text
        codes: list[str] = []
        if self.bold:
            codes.append("1")
        if self.italic:
            codes.append("3")
        if self.color is not None:
            codes.append(str(COLORS[self.color]))
        return f"\x1b[{';'.join(codes)}m{text}{_RESET}"


PLAIN = TextStyle()


@dataclass(frozen=True)
class PromptTheme:
    """Styles used by the renderer, one per visual role."""

    pending_icon: TextStyle = field(default_factory=lambda: TextStyle("magenta"))
    success_icon: TextStyle = field(default_factory=lambda: TextStyle("green"))
    aborted_icon: TextStyle = field(default_factory=lambda: TextStyle("red"))
    message: TextStyle = field(default_factory=lambda: TextStyle(bold=True))
    input_icon: TextStyle = field(default_factory=lambda: TextStyle("grey"))
    pointer: TextStyle = field(default_factory=lambda: TextStyle("cyan"))
    highlighted: TextStyle = field(default_factory=lambda: TextStyle("cyan", bold=True))
    checked: TextStyle = field(default_factory=lambda: TextStyle("yellow"))
    checked_item: TextStyle = field(default_factory=lambda: TextStyle(bold=True))
    no_match: TextStyle = field(default_factory=lambda: TextStyle("dark_grey"))
    hint: TextStyle = field(default_factory=lambda: TextStyle("dark_grey"))
    error: TextStyle = field(default_factory=lambda: TextStyle("red", italic=True))


def default_theme() -> PromptTheme:
    return PromptTheme()


def plain_theme() -> PromptTheme:
    """Theme without colours or attributes, for ``NO_COLOR`` terminals."""
    return PromptTheme(
        pending_icon=PLAIN,
        success_icon=PLAIN,
        aborted_icon=PLAIN,
        message=PLAIN,
        input_icon=PLAIN,
        pointer=PLAIN,
        highlighted=PLAIN,
        checked=PLAIN,
        checked_item=PLAIN,
        no_match=PLAIN,
        hint=PLAIN,
        error=PLAIN,
    )
