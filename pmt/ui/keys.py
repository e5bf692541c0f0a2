from PySide6.QtCore import Qt


# Key enums and QKeyEvent.key() ints both reduce to the same plain int.
def _code(key):
    return key.value if hasattr(key, "value") else int(key)


# Keyboard shortcuts, mapped to the CountdownTimer method they trigger.
KEY_ACTIONS = {
    _code(Qt.Key_Escape): "reset",
    _code(Qt.Key_Delete): "reset",
    _code(Qt.Key_Backspace): "reset",  # the Mac "delete" key
    _code(Qt.Key_Space): "start_or_stop",
    _code(Qt.Key_Return): "start_or_stop",
    _code(Qt.Key_Enter): "start_or_stop",
}


# Returns the timer method name bound to the key, or None if the key isn't a shortcut.
def action_for_key(key):
    return KEY_ACTIONS.get(_code(key))
