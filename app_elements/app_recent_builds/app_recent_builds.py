from dash import html

from app_utils.app_data_load import BuildHistory, parse_build_name
from app_utils.url_builder import VIEW_BUILD_REPORT_ACTION

DISPLAY_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class AppRecentBuilds:
    def __init__(self, url_builder, history: BuildHistory, count: int = 10):
        """
        Initialize the recent builds panel

        Parameters:
            url_builder: builds the build report links
            history: BuildHistory the builds are read from
            count: maximum number of builds listed
        """
        if count < 1:
            raise ValueError(f"count must be positive, got {count}")

        self.url_builder = url_builder
        self.history = history
        self.count = count

    def build(self, server_name: str, project_name: str) -> html.Table:
        """
        Build the recent builds table for a project, newest build first
        """
        build_names = self.history.build_names(server_name, project_name)
        recent = list(reversed(build_names[-self.count:]))

        rows = [html.Tr(html.Th("Recent Builds", className="recent-builds-title"))]
        for build_name in recent:
            rows.append(html.Tr(html.Td(self._build_link(server_name, project_name, build_name))))

        if not recent:
            rows.append(html.Tr(html.Td("No builds yet", className="text-muted")))

        return html.Table(
            html.Tbody(rows),
            className="recent-builds",
        )

    def _build_link(self, server_name, project_name, build_name) -> html.A:
        info = parse_build_name(build_name)
        label = info.label if info.succeeded else "Failed"
        status_class = "build-passed" if info.succeeded else "build-failed"

        return html.A(
            f"{info.built_at.strftime(DISPLAY_TIMESTAMP_FORMAT)} ({label})",
            href=self.url_builder.build_for_build(
                VIEW_BUILD_REPORT_ACTION, server_name, project_name, build_name
            ),
            className=f"recent-build-link {status_class}",
        )
