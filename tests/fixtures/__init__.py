"""
Test fixtures package for the Build Farm Dashboard

Sample build history records and helpers for inspecting Dash component trees.
"""

from .sample_data import (
    SAMPLE_BUILD_RECORDS,
    find_anchors,
    get_sample_build_history,
    walk_components,
)

__all__ = [
    "SAMPLE_BUILD_RECORDS",
    "find_anchors",
    "get_sample_build_history",
    "walk_components",
]
