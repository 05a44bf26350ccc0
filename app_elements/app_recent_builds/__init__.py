from .app_recent_builds import AppRecentBuilds

__all__ = ["AppRecentBuilds"]
