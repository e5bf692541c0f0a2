from .misc import now_iso, filter_duration_text, parse_duration, format_duration

__all__ = ["now_iso", "filter_duration_text", "parse_duration", "format_duration"]
