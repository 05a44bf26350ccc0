from . import sidebar_callbacks

__all__ = ["sidebar_callbacks"]
