"""
Dashboard action names and URL construction

URLs are query strings on the dashboard page, e.g.

    /?_action_ViewBuildReport=true&server=local&project=app&build=log20240101120000Lbuild.1.xml

The sidebar callback reads server/project/build back from the same
parameters to decide which sidebar to show.
"""

from typing import List, Tuple
from urllib.parse import urlencode

from .errors import UrlBuildError

ADD_PROJECT_ACTION = "DisplayAddProjectPage"
VIEW_SERVER_LOG_ACTION = "ViewServerLog"
EDIT_PROJECT_ACTION = "DisplayEditProjectPage"
DELETE_PROJECT_ACTION = "ShowDeleteProject"
VIEW_BUILD_REPORT_ACTION = "ViewBuildReport"

ACTION_PARAMETER_PREFIX = "_action_"


class DefaultUrlBuilder:
    """Builds dashboard URLs relative to a configured base URL"""

    def __init__(self, base_url: str = "/"):
        self.base_url = base_url or "/"

    def build(self, action_name: str) -> str:
        return self._build_url(action_name, [])

    def build_for_server(self, action_name: str, server_name: str) -> str:
        return self._build_url(action_name, [("server", server_name)])

    def build_for_project(
        self, action_name: str, server_name: str, project_name: str
    ) -> str:
        return self._build_url(
            action_name, [("server", server_name), ("project", project_name)]
        )

    def build_for_build(
        self, action_name: str, server_name: str, project_name: str, build_name: str
    ) -> str:
        return self._build_url(
            action_name,
            [("server", server_name), ("project", project_name), ("build", build_name)],
        )

    def _build_url(self, action_name: str, parameters: List[Tuple[str, str]]) -> str:
        if not action_name:
            raise UrlBuildError("Cannot build a URL without an action name")

        for name, value in parameters:
            if value is None or value == "":
                raise UrlBuildError(
                    f"Cannot build a URL for {action_name}: missing {name}"
                )

        query = urlencode([(ACTION_PARAMETER_PREFIX + action_name, "true")] + parameters)
        return f"{self.base_url}?{query}"
