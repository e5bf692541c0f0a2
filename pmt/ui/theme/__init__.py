"""Theme system: ring colors, geometry and the progress color bands."""
from .colors import COLORS, progress_color, track_color
from .sizes import RING, FONT_FAMILY

__all__ = ["COLORS", "progress_color", "track_color", "RING", "FONT_FAMILY"]
