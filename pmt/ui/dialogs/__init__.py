from .settings import DurationDialog

__all__ = ["DurationDialog"]
