"""
Shared utilities module to avoid circular imports and ensure a single
AppUtils instance (and so a single cached build history) per process
"""

from app_utils import AppUtils

app_utils = AppUtils()


def get_app_utils():
    """Get the shared app_utils instance"""
    return app_utils
