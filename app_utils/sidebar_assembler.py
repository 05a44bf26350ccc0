"""
Sidebar assembly for the Build Farm Dashboard

Maps a navigation context (farm, server, project or build) to the ordered
list of links and panels shown next to the page content. All lookups are
delegated to the injected collaborators; their failures propagate to the
caller untouched.
"""

from typing import List

from app_utils.simple_logger import get_logger

from .errors import InvalidContextError
from .sidebar_models import (
    BuildContext,
    FarmContext,
    LinkItem,
    NavigationContext,
    ProjectContext,
    ServerContext,
    SideBarResult,
    require_identifier,
)
from .url_builder import (
    ADD_PROJECT_ACTION,
    DELETE_PROJECT_ACTION,
    EDIT_PROJECT_ACTION,
    VIEW_BUILD_REPORT_ACTION,
    VIEW_SERVER_LOG_ACTION,
)

logger = get_logger("sidebar_assembler")


class SideBarAssembler:
    """
    Builds sidebar content for each navigation context

    Parameters:
        url_builder: builds URLs for dashboard actions
        build_name_retriever: resolves latest/next/previous build names
        recent_builds_builder: builds the recent builds panel of a project
        plugin_link_calculator: lists report plugin links for a build
    """

    def __init__(
        self,
        url_builder,
        build_name_retriever,
        recent_builds_builder,
        plugin_link_calculator,
    ):
        self.url_builder = url_builder
        self.build_name_retriever = build_name_retriever
        self.recent_builds_builder = recent_builds_builder
        self.plugin_link_calculator = plugin_link_calculator

    def assemble(self, context: NavigationContext) -> SideBarResult:
        """Dispatch to the assembly rule matching the context variant"""
        if isinstance(context, BuildContext):
            return self.assemble_build(
                context.server_name, context.project_name, context.build_name
            )
        if isinstance(context, ProjectContext):
            return self.assemble_project(context.server_name, context.project_name)
        if isinstance(context, ServerContext):
            return self.assemble_server(context.server_name)
        if isinstance(context, FarmContext):
            return self.assemble_farm()

        raise InvalidContextError(
            f"Unsupported navigation context: {type(context).__name__}"
        )

    def assemble_farm(self) -> SideBarResult:
        url = self.url_builder.build(ADD_PROJECT_ACTION)
        return [LinkItem(url, "Add Project")]

    def assemble_server(self, server_name: str) -> SideBarResult:
        require_identifier(server_name, "server name")

        server_log_url = self.url_builder.build_for_server(
            VIEW_SERVER_LOG_ACTION, server_name
        )
        add_project_url = self.url_builder.build_for_server(
            ADD_PROJECT_ACTION, server_name
        )

        return [
            LinkItem(server_log_url, "View Server Log"),
            LinkItem(add_project_url, "Add Project"),
        ]

    def assemble_project(self, server_name: str, project_name: str) -> SideBarResult:
        require_identifier(server_name, "server name")
        require_identifier(project_name, "project name")

        edit_url = self.url_builder.build_for_project(
            EDIT_PROJECT_ACTION, server_name, project_name
        )
        delete_url = self.url_builder.build_for_project(
            DELETE_PROJECT_ACTION, server_name, project_name
        )
        recent_builds = self.recent_builds_builder.build(server_name, project_name)

        return [
            LinkItem(edit_url, "Edit Project"),
            LinkItem(delete_url, "Delete Project"),
            recent_builds,
        ]

    def assemble_build(
        self, server_name: str, project_name: str, build_name: str
    ) -> SideBarResult:
        """
        Assemble the sidebar for a single build

        Returns Latest/Next/Previous report links, one link per report
        plugin (in calculator order) and the recent builds panel.
        """
        require_identifier(server_name, "server name")
        require_identifier(project_name, "project name")
        require_identifier(build_name, "build name")

        retriever = self.build_name_retriever
        latest = retriever.get_latest(server_name, project_name)
        next_build = retriever.get_next(server_name, project_name, build_name)
        previous = retriever.get_previous(server_name, project_name, build_name)

        plugin_links = self.plugin_link_calculator.get_links(
            server_name, project_name, build_name
        )

        items: List = [
            LinkItem(self._build_report_url(server_name, project_name, latest), "Latest"),
            LinkItem(self._build_report_url(server_name, project_name, next_build), "Next"),
            LinkItem(self._build_report_url(server_name, project_name, previous), "Previous"),
        ]
        items.extend(LinkItem(link.absolute_url, link.description) for link in plugin_links)
        items.append(self.recent_builds_builder.build(server_name, project_name))

        logger.info(
            "Assembled build sidebar",
            server=server_name,
            project=project_name,
            build=build_name,
            plugin_links=len(plugin_links),
        )
        return items

    def _build_report_url(self, server_name, project_name, build_name):
        return self.url_builder.build_for_build(
            VIEW_BUILD_REPORT_ACTION, server_name, project_name, build_name
        )
