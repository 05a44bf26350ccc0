from .app_main import AppMain

__all__ = ["AppMain"]
