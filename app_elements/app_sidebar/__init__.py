from .app_sidebar import AppSidebar

__all__ = ["AppSidebar"]
