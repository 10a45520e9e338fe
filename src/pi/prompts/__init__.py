"""pi-prompts: interactive terminal prompts with filtering and in-place redraw."""

# Errors
from pi.prompts.errors import PromptError

# Input events
from pi.prompts.events import ErrorEvent, Event, EventSource, ResizeEvent, StdinEventSource

# Glyphs
from pi.prompts.figures import ASCII_FIGURES, UNICODE_FIGURES, Figures, get_figures, set_figures

# Filtering
from pi.prompts.filters import (
    FilteredView,
    FilterPredicate,
    contains_filter,
    filter_items,
    fuzzy_filter,
    prefix_filter,
)

# Fuzzy matching
from pi.prompts.fuzzy import fuzzy_match, fuzzy_tokens_match

# Keybindings
from pi.prompts.keybindings import (
    DEFAULT_PROMPT_KEYBINDINGS,
    PromptAction,
    PromptKeybindingsManager,
    get_prompt_keybindings,
    set_prompt_keybindings,
)

# Keyboard input handling
from pi.prompts.keys import Key, KeyEvent, KeyId, key, matches_key, parse_key

# Prompts
from pi.prompts.prompts import (
    AutocompletePrompt,
    ConfirmPrompt,
    InputStyle,
    MultiSelectPrompt,
    Prompt,
    SelectPrompt,
    TextPrompt,
)

# Settings
from pi.prompts.settings import PromptSettings, get_settings, set_settings

# State
from pi.prompts.state import PromptState

# Input buffering
from pi.prompts.stdin_buffer import StdinBuffer

# Terminal interface and implementation
from pi.prompts.terminal import ProcessTerminal, Terminal

# Styles
from pi.prompts.theme import PromptTheme, TextStyle, default_theme, plain_theme

# Utilities
from pi.prompts.utils import truncate_to_width, visible_width

# Scroll window
from pi.prompts.window import calc_window

__all__ = [
    # Errors
    "PromptError",
    # Events
    "ErrorEvent",
    "Event",
    "EventSource",
    "ResizeEvent",
    "StdinEventSource",
    # Figures
    "ASCII_FIGURES",
    "UNICODE_FIGURES",
    "Figures",
    "get_figures",
    "set_figures",
    # Filters
    "FilteredView",
    "FilterPredicate",
    "contains_filter",
    "filter_items",
    "fuzzy_filter",
    "prefix_filter",
    # Fuzzy
    "fuzzy_match",
    "fuzzy_tokens_match",
    # Keybindings
    "DEFAULT_PROMPT_KEYBINDINGS",
    "PromptAction",
    "PromptKeybindingsManager",
    "get_prompt_keybindings",
    "set_prompt_keybindings",
    # Keys
    "Key",
    "KeyEvent",
    "KeyId",
    "key",
    "matches_key",
    "parse_key",
    # Prompts
    "AutocompletePrompt",
    "ConfirmPrompt",
    "InputStyle",
    "MultiSelectPrompt",
    "Prompt",
    "SelectPrompt",
    "TextPrompt",
    # Settings
    "PromptSettings",
    "get_settings",
    "set_settings",
    # State
    "PromptState",
    # Stdin buffer
    "StdinBuffer",
    # Terminal
    "ProcessTerminal",
    "Terminal",
    # Theme
    "PromptTheme",
    "TextStyle",
    "default_theme",
    "plain_theme",
    # Utilities
    "truncate_to_width",
    "visible_width",
    # Window
    "calc_window",
]
