import json
from sw.common.logger import log
from sw.common.setup import PATHS
from sw.core.clock import MILLISEC

#region === Helpers and Paths ===

SETTINGS_PATH = PATHS.current / "settings.json"

# Default values for every setting. The type of each default is also the only type accepted when loading.
_SETTINGS_DEFAULTS = {
    "fps": 30,
    "window_width": 400,
    "window_height": 120,
    "window_title": "DEMO",
    "font_file": "",
    "font_family": "",
    "time_font_size": 60,
    "button_min_width": 80,
    "spacing": 10,
    "padding": 10,
    "always_on_top": False,
}
# Numeric settings that have to be strictly positive to make any sense.
_POSITIVE_KEYS = {"fps", "window_width", "window_height", "time_font_size", "button_min_width"}

# Helper to return a truly fresh, default settings dict.
def build_default_settings():
    return dict(_SETTINGS_DEFAULTS)

# Checks a single loaded value against its default. bool is a subclass of int, so it has to be ruled out explicitly.
def _is_valid(key, value):
    default = _SETTINGS_DEFAULTS[key]
    if isinstance(default, bool):
        return isinstance(value, bool)
    if isinstance(default, int):
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        # The tick source works in whole milliseconds, anything faster than 1000 fps rounds to a zero period.
        if key == "fps":
            return 0 < value and MILLISEC // value > 0
        if key in _POSITIVE_KEYS:
            return value > 0
        return value >= 0
    return isinstance(value, type(default))

#endregion === Helpers and Paths ===

#region === Saving and Loading Settings ===

# Loads settings from PATHS.current / settings.json, filling in defaults for anything missing or malformed.
def load_settings():
    try:
        # No settings yet, so write out the defaults for the user to tweak.
        if not SETTINGS_PATH.exists():
            settings = build_default_settings()
            save_settings(settings)
            log.info(f"No existing settings.json found, wrote fresh defaults to '{SETTINGS_PATH}'.")
            return settings

        with open(SETTINGS_PATH, "r", encoding="utf-8") as f:
            settings = json.load(f)
        if not isinstance(settings, dict):
            raise TypeError(f"Expected a JSON object in settings.json, got {type(settings).__name__}")

        defaulted_values = set()
        for key, default in _SETTINGS_DEFAULTS.items():
            if key not in settings or not _is_valid(key, settings[key]):
                defaulted_values.add(key)
                settings[key] = default

        if defaulted_values:
            log.warning(f"Loaded settings from '{SETTINGS_PATH}', but with missing or invalid values that were defaulted: {', '.join(sorted(defaulted_values))}")
        else:
            log.info(f"Successfully loaded settings from '{SETTINGS_PATH}'.")
        return settings
    # Fall back to fresh settings in case of error, but warn in log
    except (json.JSONDecodeError, OSError, TypeError):
        log.warning("Ran into an error while trying to load settings.json, falling back to default settings.",exc_info=True)
        return build_default_settings()
# Write the given settings to disk under PATHS.current / settings.json
def save_settings(settings):
    with open(SETTINGS_PATH, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)
    log.info(f"Successfully saved settings to '{SETTINGS_PATH}'")

#endregion === Saving and Loading Settings ===
