from datetime import datetime

# Characters a duration field will accept. Anything else is dropped before parsing.
DURATION_CHARS = "0123456789:"


# Simply returns the current local time as an ISO8601 string with timezone offset.
def now_iso():
    return datetime.now().astimezone().isoformat()


# Strips everything that isn't a digit or a colon, i.e. "3m:05s" -> "3:05".
def filter_duration_text(text):
    return "".join(ch for ch in text if ch in DURATION_CHARS)


# Parses a single non-negative integer segment, treating junk (or nothing) as 0.
def _segment(text):
    try:
        value = int(text)
    except ValueError:
        return 0
    return max(0, value)


# Turns "M:SS" or "SS" into total seconds. Splits on the first colon only, so "1:2:3" reads seconds from "2:3" and
# falls back to 0 for that half. Never raises.
def parse_duration(text):
    text = filter_duration_text(text or "")
    if ":" in text:
        minutes, seconds = text.split(":", 1)
        return _segment(minutes) * 60 + _segment(seconds)
    return _segment(text)


# Renders total seconds as M:SS, e.g. 185 -> "3:05". Negative values clamp to zero.
def format_duration(seconds):
    seconds = max(0, int(seconds))
    minutes, secs = divmod(seconds, 60)
    return f"{minutes}:{secs:02d}"
