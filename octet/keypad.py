"""Host-side keypad helpers.

The core never infers key state: the host maps its own key symbols to hex keys
with :data:`KEY_MAP` and writes the keypad between cycles.
"""

from typing import Optional

from octet.constants import KEY_MAP, NUM_KEYS
from octet.state import EmulatorState


def key_for_symbol(symbol: str) -> Optional[int]:
    """Return the hex key bound to a keyboard symbol, or None if unbound."""
    return KEY_MAP.get(symbol.lower())


def set_key(state: EmulatorState, key: int, pressed: bool) -> EmulatorState:
    """Set the pressed flag of one hex key."""
    if not 0 <= key < NUM_KEYS:
        raise ValueError(f"Key index must be in [0, {NUM_KEYS}), got {key}")
    return state.replace(keypad=state.keypad.at[key].set(pressed))


def press_key(state: EmulatorState, key: int) -> EmulatorState:
    """Mark a hex key as held down."""
    return set_key(state, key, True)


def release_key(state: EmulatorState, key: int) -> EmulatorState:
    """Mark a hex key as released."""
    return set_key(state, key, False)


def handle_key_event(state: EmulatorState, symbol: str, pressed: bool) -> EmulatorState:
    """Apply a keyboard event; symbols outside the key map are ignored."""
    key = key_for_symbol(symbol)
    if key is None:
        return state
    return set_key(state, key, pressed)
