"""
Report plugin links for the build sidebar

Each configured build plugin contributes one link to the build sidebar,
pointing at the plugin's action for the build being viewed.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional


@dataclass(frozen=True)
class AbsoluteLink:
    description: str
    absolute_url: str


@dataclass(frozen=True)
class BuildPlugin:
    description: str
    action_name: str


# Link order in the sidebar follows this list
DEFAULT_BUILD_PLUGINS = (
    BuildPlugin("View Build Log", "ViewBuildLog"),
    BuildPlugin("NUnit Details", "ViewNUnitReport"),
    BuildPlugin("NUnit Timings", "ViewNUnitTimings"),
    BuildPlugin("FxCop Report", "ViewFxCopReport"),
)


class BuildPluginLinkCalculator:
    """Computes the plugin links shown for a single build"""

    def __init__(self, url_builder, plugins: Optional[Iterable[BuildPlugin]] = None):
        self.url_builder = url_builder
        self.plugins = list(DEFAULT_BUILD_PLUGINS if plugins is None else plugins)

    def get_links(
        self, server_name: str, project_name: str, build_name: str
    ) -> List[AbsoluteLink]:
        return [
            AbsoluteLink(
                plugin.description,
                self.url_builder.build_for_build(
                    plugin.action_name, server_name, project_name, build_name
                ),
            )
            for plugin in self.plugins
        ]
