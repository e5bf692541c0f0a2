COLORS = {
    "background": "#000000",
    "face": "#FFFFFF",
    "text": "#000000",
    "button_text": "#FFFFFF",
    "track_running": "#000000",
    "track_stopped": "#808080",
    "green": "#34C759",
    "orange": "#FF9500",
    "red": "#FF3B30",
}

# Progress at which the arc turns orange, then red.
WARN_AT = 3 / 4
ALERT_AT = 7 / 8


# Arc color for the given progress ratio. Red once finished or in the last eighth, orange in the quarter before
# that, green otherwise.
def progress_color(progress, complete=False):
    if complete or progress >= ALERT_AT:
        return COLORS["red"]
    if progress >= WARN_AT:
        return COLORS["orange"]
    return COLORS["green"]


def track_color(running):
    return COLORS["track_running"] if running else COLORS["track_stopped"]
