"""Prompt keybindings manager."""

from __future__ import annotations

from typing import Literal

from pi.prompts.keys import KeyEvent, KeyId, matches_key

PromptAction = Literal[
    # Lifecycle
    "abort",
    "submit",
    # List navigation (plain select also accepts vi keys)
    "selectUp",
    "selectDown",
    "listUp",
    "listDown",
    "listFirst",
    "listLast",
    "toggle",
    # Line editing
    "cursorLeft",
    "cursorRight",
    "cursorLineStart",
    "cursorLineEnd",
    "deleteCharBackward",
    "deleteCharForward",
    # Confirm
    "confirmYes",
    "confirmNo",
]

PromptKeybindingsConfig = dict[PromptAction, KeyId | list[KeyId]]

DEFAULT_PROMPT_KEYBINDINGS: dict[PromptAction, KeyId | list[KeyId]] = {
    # Lifecycle
    "abort": ["ctrl+c", "ctrl+d", "escape"],
    "submit": "enter",
    # List navigation
    "selectUp": ["up", "k"],
    "selectDown": ["down", "j"],
    "listUp": "up",
    "listDown": "down",
    "listFirst": "home",
    "listLast": "end",
    "toggle": "space",
    # Line editing
    "cursorLeft": "left",
    "cursorRight": "right",
    "cursorLineStart": "home",
    "cursorLineEnd": "end",
    "deleteCharBackward": "backspace",
    "deleteCharForward": "delete",
    # Confirm
    "confirmYes": "y",
    "confirmNo": "n",
}


class PromptKeybindingsManager:
    """Maps prompt actions to the keys that trigger them."""

    def __init__(self, config: PromptKeybindingsConfig | None = None) -> None:
        self._action_to_keys: dict[PromptAction, list[KeyId]] = {}
        self._build_maps(config or {})

    def _build_maps(self, config: PromptKeybindingsConfig) -> None:
        self._action_to_keys.clear()

        for action, keys in DEFAULT_PROMPT_KEYBINDINGS.items():
            key_array = keys if isinstance(keys, list) else [keys]
            self._action_to_keys[action] = list(key_array)

        # Override with user config
        for action, keys in config.items():
            if action not in DEFAULT_PROMPT_KEYBINDINGS:
                raise ValueError(f"Unknown prompt action: {action!r}")
            key_array = keys if isinstance(keys, list) else [keys]
            self._action_to_keys[action] = list(key_array)

    def matches(self, event: KeyEvent, action: PromptAction) -> bool:
        """Check if *event* triggers *action*."""
        return any(matches_key(event, key) for key in self._action_to_keys.get(action, []))

    def get_keys(self, action: PromptAction) -> list[KeyId]:
        return self._action_to_keys.get(action, [])

    def set_config(self, config: PromptKeybindingsConfig) -> None:
        self._build_maps(config)


_global_prompt_keybindings: PromptKeybindingsManager | None = None


def get_prompt_keybindings() -> PromptKeybindingsManager:
    global _global_prompt_keybindings
    if _global_prompt_keybindings is None:
        _global_prompt_keybindings = PromptKeybindingsManager()
    return _global_prompt_keybindings


def set_prompt_keybindings(manager: PromptKeybindingsManager | None) -> None:
    global _global_prompt_keybindings
    _global_prompt_keybindings = manager
