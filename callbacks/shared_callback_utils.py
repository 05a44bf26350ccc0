"""
Shared Callback Utilities Module

Centralized imports and shared component instances for the callback
modules, so every callback renders with the same AppUtils and sidebar.

Usage:
    from callbacks.shared_callback_utils import (
        Input, Output, callback, html, dbc,
        app_utils, app_sidebar,
    )
"""

import dash_bootstrap_components as dbc
from dash import Input, Output, callback, html

from app_elements.app_sidebar import AppSidebar
from shared_utils import app_utils

app_sidebar = AppSidebar()

__all__ = [
    "Input",
    "Output",
    "callback",
    "html",
    "dbc",
    "app_utils",
    "app_sidebar",
]
