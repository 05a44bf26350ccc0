"""
Environment configuration for the Build Farm Dashboard

    DASHBOARD_BASE_URL       base page for generated links (default "/")
    DASHBOARD_BUILD_HISTORY  CSV file or build log directory (default: none)
    DASHBOARD_RECENT_BUILDS  builds listed in the recent builds panel (default 10)
    DASHBOARD_BUILD_PLUGINS  "Description:Action" pairs separated by commas
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from .plugin_links import DEFAULT_BUILD_PLUGINS, BuildPlugin

DEFAULT_BASE_URL = "/"
DEFAULT_RECENT_BUILDS = 10


def parse_build_plugins(value: str) -> Tuple[BuildPlugin, ...]:
    """Parse "View Build Log:ViewBuildLog,FxCop Report:ViewFxCopReport" """
    plugins = []
    for entry in value.split(","):
        entry = entry.strip()
        if not entry:
            continue
        description, separator, action_name = entry.rpartition(":")
        if not separator or not description.strip() or not action_name.strip():
            raise ValueError(f"Invalid build plugin entry '{entry}', expected Description:Action")
        plugins.append(BuildPlugin(description.strip(), action_name.strip()))
    return tuple(plugins)


@dataclass(frozen=True)
class DashboardConfig:
    base_url: str = DEFAULT_BASE_URL
    build_history_source: Optional[str] = None
    recent_builds_count: int = DEFAULT_RECENT_BUILDS
    build_plugins: Tuple[BuildPlugin, ...] = DEFAULT_BUILD_PLUGINS

    def __post_init__(self):
        if self.recent_builds_count < 1:
            raise ValueError(
                f"recent_builds_count must be positive, got {self.recent_builds_count}"
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = None) -> "DashboardConfig":
        environ = os.environ if environ is None else environ

        recent_builds = environ.get("DASHBOARD_RECENT_BUILDS", str(DEFAULT_RECENT_BUILDS))
        try:
            recent_builds_count = int(recent_builds)
        except ValueError:
            raise ValueError(f"DASHBOARD_RECENT_BUILDS must be an integer, got '{recent_builds}'")

        plugins_value = environ.get("DASHBOARD_BUILD_PLUGINS")
        build_plugins = (
            parse_build_plugins(plugins_value) if plugins_value else DEFAULT_BUILD_PLUGINS
        )

        return cls(
            base_url=environ.get("DASHBOARD_BASE_URL", DEFAULT_BASE_URL) or DEFAULT_BASE_URL,
            build_history_source=environ.get("DASHBOARD_BUILD_HISTORY") or None,
            recent_builds_count=recent_builds_count,
            build_plugins=build_plugins,
        )
