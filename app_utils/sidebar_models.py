"""
Navigation contexts and sidebar items

A sidebar result is a plain list of LinkItem values and opaque panels. Panels
are produced by other components (the recent builds table) and are never
inspected here.
"""

from dataclasses import dataclass
from typing import Any, List, Union

from .errors import InvalidContextError


def require_identifier(value: str, field_name: str) -> str:
    """Return value unchanged, or raise InvalidContextError when it is empty"""
    if value is None or not str(value).strip():
        raise InvalidContextError(f"A non-empty {field_name} is required")
    return value


@dataclass(frozen=True)
class FarmContext:
    """The whole build farm"""


@dataclass(frozen=True)
class ServerContext:
    server_name: str

    def __post_init__(self):
        require_identifier(self.server_name, "server name")


@dataclass(frozen=True)
class ProjectContext:
    server_name: str
    project_name: str

    def __post_init__(self):
        require_identifier(self.server_name, "server name")
        require_identifier(self.project_name, "project name")


@dataclass(frozen=True)
class BuildContext:
    server_name: str
    project_name: str
    build_name: str

    def __post_init__(self):
        require_identifier(self.server_name, "server name")
        require_identifier(self.project_name, "project name")
        require_identifier(self.build_name, "build name")


NavigationContext = Union[FarmContext, ServerContext, ProjectContext, BuildContext]


@dataclass(frozen=True)
class LinkItem:
    url: str
    label: str


# Anything that is not a LinkItem is a pre-rendered panel
SideBarItem = Union[LinkItem, Any]
SideBarResult = List[SideBarItem]


def sidebar_contains(result: SideBarResult, expected: SideBarItem) -> bool:
    """
    Check whether a sidebar result holds the expected item

    Links match by url and label, panels only by identity.
    """
    for item in result:
        if isinstance(expected, LinkItem):
            if isinstance(item, LinkItem) and item == expected:
                return True
        elif item is expected:
            return True
    return False
