import json
from pmt.common.logger import log
from pmt.common.setup import PATHS
from pmt.core.countdown import DEFAULT_DURATION
from pmt.util import now_iso


_SCHEMA_VERSION = 1

#region === Helpers and Paths ===

PREFS_PATH = PATHS.current / "prefs.json"

# Key the last configured countdown duration is stored under.
DURATION_KEY = "Countdown duration"

# Default values just for the settings section of the prefs dict.
_SETTINGS_DEFAULTS = {
    DURATION_KEY: DEFAULT_DURATION,
    "start_fullscreen": True,
    "always_on_top": False,
}
# Helper to return a truly fresh, default prefs dict.
def build_default_prefs():
    return {
        "meta": {
            "schema_version": _SCHEMA_VERSION,
            "saved_at": now_iso(),
        },
        "settings": dict(_SETTINGS_DEFAULTS),
    }

#endregion === Helpers and Paths ===

#region === Saving and Loading Prefs ===

# Loads prefs from PATHS.current / prefs.json, filling in defaults for anything missing. Never raises; a broken file
# just means starting over from defaults.
def load_prefs():
    try:
        if not PREFS_PATH.exists():
            log.info("No existing prefs.json found in `current`, loading fresh prefs dict.")
            return build_default_prefs()

        with open(PREFS_PATH, "r", encoding="utf-8") as f:
            prefs = json.load(f)
        defaulted_values = set()

        # Validate the meta dict
        if "meta" not in prefs or not isinstance(prefs["meta"], dict):
            defaulted_values.add("meta")
            prefs["meta"] = {}
        if "schema_version" not in prefs["meta"] or not isinstance(prefs["meta"]["schema_version"], int):
            defaulted_values.add("meta.schema_version")
            prefs["meta"]["schema_version"] = _SCHEMA_VERSION

        # Validate the settings dict, fill in any necessary defaults
        if "settings" not in prefs or not isinstance(prefs["settings"], dict):
            defaulted_values.add("settings")
            prefs["settings"] = dict(_SETTINGS_DEFAULTS)
        else:
            for key, default in _SETTINGS_DEFAULTS.items():
                if key not in prefs["settings"]:
                    defaulted_values.add(f"settings.{key}")
                    prefs["settings"][key] = default

        # Log results
        if defaulted_values:
            log.warning(f"Loaded prefs from '{PREFS_PATH}', but with missing values that were defaulted: {', '.join(sorted(defaulted_values))}")
        else:
            log.info(f"Successfully loaded prefs from '{PREFS_PATH}'.")
        return prefs
    # Fall back to fresh prefs in case of error, but warn in log
    except (FileNotFoundError, json.JSONDecodeError, UnicodeDecodeError, OSError, TypeError):
        log.warning("Ran into an error while trying to load prefs.json, falling back to a fresh prefs dict.", exc_info=True)
        return build_default_prefs()
# Write the given prefs to disk under PATHS.current / prefs.json
def save_prefs(prefs):
    prefs["meta"]["saved_at"] = now_iso()
    with open(PREFS_PATH, "w", encoding="utf-8") as f:
        json.dump(prefs, f, indent=2)
    log.info(f"Successfully saved prefs to '{PREFS_PATH}'")

#endregion === Saving and Loading Prefs ===

#region === Countdown Duration ===

# The remembered duration, or the default when nothing usable is stored. Zero counts as nothing stored.
def load_duration():
    stored = load_prefs()["settings"].get(DURATION_KEY)
    if isinstance(stored, bool) or not isinstance(stored, int) or stored <= 0:
        log.warning(f"Stored duration {stored!r} is unusable, using default of {DEFAULT_DURATION} seconds")
        return DEFAULT_DURATION
    return stored

def save_duration(seconds):
    prefs = load_prefs()
    prefs["settings"][DURATION_KEY] = int(seconds)
    save_prefs(prefs)


# Timer listener that writes the duration to prefs whenever it differs from what was last saved. Ticks and
# pauses leave the duration alone, so they never touch the disk. A failed write is logged and retried on the next
# notification.
class DurationSaver:

    def __init__(self, saved_duration):
        self.saved_duration = saved_duration

    def __call__(self, timer):
        if timer.duration == self.saved_duration:
            return
        try:
            save_duration(timer.duration)
            self.saved_duration = timer.duration
        except OSError:
            log.warning(f"Failed to save duration of {timer.duration} seconds, it will not survive a restart.", exc_info=True)

#endregion === Countdown Duration ===
