"""Keyboard input decoding for prompts.

Turns one complete raw terminal sequence (as split by
:class:`~pi.prompts.stdin_buffer.StdinBuffer`) into a :class:`KeyEvent`.
Handles legacy CSI/SS3 sequences, xterm modifier parameters, the Kitty
``CSI u`` encoding, control bytes and plain printable characters.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

# ---------------------------------------------------------------------------
# Type alias
# ---------------------------------------------------------------------------

KeyId = str

# ---------------------------------------------------------------------------
# Key helper object
# ---------------------------------------------------------------------------


class Key:
    """Named key constants and modifier combinators."""

    escape = "escape"
    enter = "enter"
    tab = "tab"
    space = "space"
    backspace = "backspace"
    delete = "delete"
    insert = "insert"
    home = "home"
    end = "end"
    page_up = "pageUp"
    page_down = "pageDown"
    up = "up"
    down = "down"
    left = "left"
    right = "right"

    @staticmethod
    def ctrl(key: str) -> str:
        return f"ctrl+{key}"

    @staticmethod
    def alt(key: str) -> str:
        return f"alt+{key}"

    @staticmethod
    def shift(key: str) -> str:
        return f"shift+{key}"


# Canonical order used when building key ids ("ctrl+shift+alt+x")
MODIFIER_ORDER: tuple[str, ...] = ("ctrl", "shift", "alt")

# xterm / kitty modifier parameter is 1 + bitmask
MODIFIER_BITS: dict[str, int] = {
    "shift": 1,
    "alt": 2,
    "ctrl": 4,
}

LOCK_MASK = 64 + 128

# ---------------------------------------------------------------------------
# Key event
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class KeyEvent:
    """A decoded key press.

    *code* is a key name from :class:`Key` or a single printable character.
    Printable characters carry no ``shift`` modifier; the case of the
    character already encodes it.
    """

    code: str
    modifiers: frozenset[str] = field(default_factory=frozenset)

    @property
    def id(self) -> KeyId:
        mods = [m for m in MODIFIER_ORDER if m in self.modifiers]
        code = "space" if self.code == " " else self.code
        return "+".join([*mods, code])

    @property
    def char(self) -> str | None:
        """The printable character, if this is an unmodified character key."""
        if self.modifiers:
            return None
        if self.code == Key.space:
            return " "
        if len(self.code) == 1 and self.code.isprintable():
            return self.code
        return None


def key(code: str, *modifiers: str) -> KeyEvent:
    """Shorthand constructor, mostly for tests: ``key("c", "ctrl")``."""
    return KeyEvent(code, frozenset(modifiers))


# ---------------------------------------------------------------------------
# Sequence tables
# ---------------------------------------------------------------------------

LEGACY_KEY_SEQUENCES: dict[str, str] = {
    "\x1b[A": Key.up,
    "\x1b[B": Key.down,
    "\x1b[C": Key.right,
    "\x1b[D": Key.left,
    "\x1b[H": Key.home,
    "\x1b[F": Key.end,
    "\x1bOA": Key.up,
    "\x1bOB": Key.down,
    "\x1bOC": Key.right,
    "\x1bOD": Key.left,
    "\x1bOH": Key.home,
    "\x1bOF": Key.end,
    "\x1b[1~": Key.home,
    "\x1b[2~": Key.insert,
    "\x1b[3~": Key.delete,
    "\x1b[4~": Key.end,
    "\x1b[5~": Key.page_up,
    "\x1b[6~": Key.page_down,
    "\x1b[7~": Key.home,
    "\x1b[8~": Key.end,
    "\x1b[Z": "shift+tab",
}

# Final byte of "CSI 1;<mod> X" sequences
_CSI_LETTER_KEYS: dict[str, str] = {
    "A": Key.up,
    "B": Key.down,
    "C": Key.right,
    "D": Key.left,
    "H": Key.home,
    "F": Key.end,
}

# Number of "CSI <n>;<mod> ~" sequences
_CSI_TILDE_KEYS: dict[int, str] = {
    1: Key.home,
    2: Key.insert,
    3: Key.delete,
    4: Key.end,
    5: Key.page_up,
    6: Key.page_down,
    7: Key.home,
    8: Key.end,
}

# Kitty CSI-u codepoints with a name
_KITTY_CODEPOINTS: dict[int, str] = {
    9: Key.tab,
    13: Key.enter,
    27: Key.escape,
    32: Key.space,
    127: Key.backspace,
    57414: Key.enter,  # keypad enter
}

_CSI_MODIFIED_RE = re.compile(r"^\x1b\[1;(\d+)(?::\d+)?([A-Z])$")
_CSI_TILDE_RE = re.compile(r"^\x1b\[(\d+)(?:;(\d+)(?::\d+)?)?~$")
_KITTY_CSI_U_RE = re.compile(r"^\x1b\[(\d+)(?::\d*)*(?:;(\d+)(?::(\d+))?)?u$")

# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def _decode_modifiers(param: str | None) -> frozenset[str]:
    if not param:
        return frozenset()
    bits = (int(param) - 1) & ~LOCK_MASK
    return frozenset(name for name, bit in MODIFIER_BITS.items() if bits & bit)


def _control_char(data: str) -> KeyEvent | None:
    code = ord(data)
    if data in ("\r", "\n"):
        return KeyEvent(Key.enter)
    if data == "\t":
        return KeyEvent(Key.tab)
    if data in ("\x7f", "\x08"):
        return KeyEvent(Key.backspace)
    if data == "\x1b":
        return KeyEvent(Key.escape)
    if data == "\x00":
        return key(Key.space, "ctrl")
    if 1 <= code <= 26:
        return key(chr(code + 96), "ctrl")
    if 28 <= code <= 31:
        return key("\\]^_"[code - 28], "ctrl")
    return None


def _parse_kitty(match: re.Match[str]) -> KeyEvent | None:
    codepoint = int(match.group(1))
    modifiers = _decode_modifiers(match.group(2))
    event_type = match.group(3)
    if event_type == "3":
        # Key release
        return None

    name = _KITTY_CODEPOINTS.get(codepoint)
    if name is not None:
        return KeyEvent(name, modifiers)

    char = chr(codepoint)
    if not char.isprintable():
        return None
    if "shift" in modifiers and not ({"ctrl", "alt"} & modifiers):
        return KeyEvent(char.upper())
    return KeyEvent(char, modifiers)


def parse_key(data: str) -> KeyEvent | None:  # noqa: C901
    """Decode a single complete input sequence.

    Returns ``None`` for sequences that are not key presses (mouse reports,
    terminal responses, key releases) or that are not recognized.
    """
    if not data:
        return None

    legacy = LEGACY_KEY_SEQUENCES.get(data)
    if legacy is not None:
        if "+" in legacy:
            mod, name = legacy.split("+")
            return key(name, mod)
        return KeyEvent(legacy)

    if len(data) == 1:
        control = _control_char(data)
        if control is not None:
            return control
        if data == " ":
            return KeyEvent(Key.space)
        if data.isprintable():
            return KeyEvent(data)
        return None

    if data.startswith("\x1b["):
        match = _CSI_MODIFIED_RE.match(data)
        if match:
            name = _CSI_LETTER_KEYS.get(match.group(2))
            if name is None:
                return None
            return KeyEvent(name, _decode_modifiers(match.group(1)))

        match = _CSI_TILDE_RE.match(data)
        if match:
            name = _CSI_TILDE_KEYS.get(int(match.group(1)))
            if name is None:
                return None
            return KeyEvent(name, _decode_modifiers(match.group(2)))

        match = _KITTY_CSI_U_RE.match(data)
        if match:
            return _parse_kitty(match)
        return None

    # Meta / alt: ESC followed by one key
    if data.startswith("\x1b") and len(data) == 2:
        inner = parse_key(data[1])
        if inner is None:
            return None
        return KeyEvent(inner.code, inner.modifiers | {"alt"})

    return None


def matches_key(event: KeyEvent, key_id: KeyId) -> bool:
    """Check whether *event* is the key identified by *key_id*.

    Ids are ``"+"``-joined, modifiers in any order: ``"ctrl+c"``,
    ``"alt+shift+up"``, ``"k"``.
    """
    parts = key_id.lower().split("+") if len(key_id) > 1 else [key_id]
    *mods, code = parts
    if code == "pageup":
        code = Key.page_up
    elif code == "pagedown":
        code = Key.page_down
    if len(code) == 1 and not mods:
        # Single characters are case-sensitive
        code = key_id
    event_code = "space" if event.code == " " else event.code
    return event_code == code and event.modifiers == frozenset(mods)
