"""
Unit tests for SideBarAssembler

Collaborators are mocks; each test checks the exact collaborator calls and
the links and panels that end up in the sidebar.
"""
from unittest.mock import Mock, call

import pytest

from app_utils.errors import InvalidContextError, UnknownBuildError, UrlBuildError
from app_utils.sidebar_assembler import SideBarAssembler
from app_utils.sidebar_models import (
    BuildContext,
    FarmContext,
    LinkItem,
    ProjectContext,
    ServerContext,
    sidebar_contains,
)
from app_utils.url_builder import (
    ADD_PROJECT_ACTION,
    DELETE_PROJECT_ACTION,
    EDIT_PROJECT_ACTION,
    VIEW_BUILD_REPORT_ACTION,
    VIEW_SERVER_LOG_ACTION,
)

pytestmark = pytest.mark.unit


@pytest.fixture
def assembler(mock_collaborators):
    return SideBarAssembler(
        url_builder=mock_collaborators["url_builder"],
        build_name_retriever=mock_collaborators["build_name_retriever"],
        recent_builds_builder=mock_collaborators["recent_builds_builder"],
        plugin_link_calculator=mock_collaborators["plugin_link_calculator"],
    )


def lookup(responses):
    """side_effect returning the response registered for the exact call arguments"""
    return lambda *args: responses[args]


@pytest.fixture
def build_view(mock_collaborators):
    """Collaborator responses for myServer/myProject/myCurrentBuild"""
    retriever = mock_collaborators["build_name_retriever"]
    retriever.get_latest.side_effect = lookup(
        {("myServer", "myProject"): "returnedLatestBuildName"}
    )
    retriever.get_next.side_effect = lookup(
        {("myServer", "myProject", "myCurrentBuild"): "returnedNextBuildName"}
    )
    retriever.get_previous.side_effect = lookup(
        {("myServer", "myProject", "myCurrentBuild"): "returnedPreviousBuildName"}
    )

    plugin_links = [
        Mock(description="my link 1", absolute_url="myurl1"),
        Mock(description="my link 2", absolute_url="myurl2"),
    ]
    mock_collaborators["plugin_link_calculator"].get_links.side_effect = lookup(
        {("myServer", "myProject", "myCurrentBuild"): plugin_links}
    )

    report_urls = {
        "returnedLatestBuildName": "latestUrl",
        "returnedNextBuildName": "nextUrl",
        "returnedPreviousBuildName": "previousUrl",
    }
    mock_collaborators["url_builder"].build_for_build.side_effect = lookup(
        {
            (VIEW_BUILD_REPORT_ACTION, "myServer", "myProject", build_name): url
            for build_name, url in report_urls.items()
        }
    )

    panel = Mock(name="recent builds panel")
    mock_collaborators["recent_builds_builder"].build.side_effect = lookup(
        {("myServer", "myProject"): panel}
    )
    return panel


class TestFarmSideBar:
    def test_returns_add_project_link(self, assembler, mock_collaborators):
        url_builder = mock_collaborators["url_builder"]
        url_builder.build.return_value = "returnedurl"

        result = assembler.assemble_farm()

        assert result == [LinkItem("returnedurl", "Add Project")]
        url_builder.build.assert_called_once_with(ADD_PROJECT_ACTION)

    def test_makes_no_other_collaborator_calls(self, assembler, mock_collaborators):
        assembler.assemble_farm()

        assert len(mock_collaborators["recorder"].mock_calls) == 1


class TestServerSideBar:
    def test_returns_server_log_and_add_project_links(self, assembler, mock_collaborators):
        url_builder = mock_collaborators["url_builder"]
        url_builder.build_for_server.side_effect = lookup(
            {
                (VIEW_SERVER_LOG_ACTION, "myServer"): "returnedurl1",
                (ADD_PROJECT_ACTION, "myServer"): "returnedurl2",
            }
        )

        result = assembler.assemble_server("myServer")

        assert sidebar_contains(result, LinkItem("returnedurl1", "View Server Log"))
        assert sidebar_contains(result, LinkItem("returnedurl2", "Add Project"))
        assert len(result) == 2
        assert url_builder.build_for_server.call_count == 2

    @pytest.mark.parametrize("server_name", ["", "   ", None])
    def test_rejects_missing_server_name(self, assembler, mock_collaborators, server_name):
        with pytest.raises(InvalidContextError):
            assembler.assemble_server(server_name)

        assert mock_collaborators["recorder"].mock_calls == []


class TestProjectSideBar:
    def test_returns_edit_delete_links_and_recent_builds(self, assembler, mock_collaborators):
        mock_collaborators["url_builder"].build_for_project.side_effect = lookup(
            {
                (EDIT_PROJECT_ACTION, "myServer", "myProject"): "editUrl",
                (DELETE_PROJECT_ACTION, "myServer", "myProject"): "deleteUrl",
            }
        )
        panel = Mock(name="recent builds panel")
        mock_collaborators["recent_builds_builder"].build.return_value = panel

        result = assembler.assemble_project("myServer", "myProject")

        assert sidebar_contains(result, LinkItem("editUrl", "Edit Project"))
        assert sidebar_contains(result, LinkItem("deleteUrl", "Delete Project"))
        assert sidebar_contains(result, panel)
        assert len(result) == 3
        mock_collaborators["recent_builds_builder"].build.assert_called_once_with(
            "myServer", "myProject"
        )

    def test_panel_is_matched_by_identity(self, assembler, mock_collaborators):
        mock_collaborators["recent_builds_builder"].build.return_value = Mock()

        result = assembler.assemble_project("myServer", "myProject")

        assert not sidebar_contains(result, Mock())

    def test_rejects_missing_project_name(self, assembler):
        with pytest.raises(InvalidContextError, match="project name"):
            assembler.assemble_project("myServer", "")


class TestBuildSideBar:
    def test_returns_navigation_plugin_links_and_panel(self, assembler, build_view):
        result = assembler.assemble_build("myServer", "myProject", "myCurrentBuild")

        assert result == [
            LinkItem("latestUrl", "Latest"),
            LinkItem("nextUrl", "Next"),
            LinkItem("previousUrl", "Previous"),
            LinkItem("myurl1", "my link 1"),
            LinkItem("myurl2", "my link 2"),
            build_view,
        ]

    def test_collaborators_are_called_in_order(self, assembler, mock_collaborators, build_view):
        assembler.assemble_build("myServer", "myProject", "myCurrentBuild")

        assert mock_collaborators["recorder"].mock_calls == [
            call.build_name_retriever.get_latest("myServer", "myProject"),
            call.build_name_retriever.get_next("myServer", "myProject", "myCurrentBuild"),
            call.build_name_retriever.get_previous("myServer", "myProject", "myCurrentBuild"),
            call.plugin_link_calculator.get_links("myServer", "myProject", "myCurrentBuild"),
            call.url_builder.build_for_build(
                VIEW_BUILD_REPORT_ACTION, "myServer", "myProject", "returnedLatestBuildName"
            ),
            call.url_builder.build_for_build(
                VIEW_BUILD_REPORT_ACTION, "myServer", "myProject", "returnedNextBuildName"
            ),
            call.url_builder.build_for_build(
                VIEW_BUILD_REPORT_ACTION, "myServer", "myProject", "returnedPreviousBuildName"
            ),
            call.recent_builds_builder.build("myServer", "myProject"),
        ]

    def test_without_plugin_links(self, assembler, mock_collaborators, build_view):
        mock_collaborators["plugin_link_calculator"].get_links.side_effect = None
        mock_collaborators["plugin_link_calculator"].get_links.return_value = []

        result = assembler.assemble_build("myServer", "myProject", "myCurrentBuild")

        assert [item.label for item in result[:-1]] == ["Latest", "Next", "Previous"]
        assert result[-1] is build_view

    def test_same_inputs_give_equal_results(self, assembler, build_view):
        first = assembler.assemble_build("myServer", "myProject", "myCurrentBuild")
        second = assembler.assemble_build("myServer", "myProject", "myCurrentBuild")

        assert first == second

    def test_unresolved_build_name_propagates(self, assembler, mock_collaborators, build_view):
        error = UnknownBuildError("myServer", "myProject", "myCurrentBuild")
        mock_collaborators["build_name_retriever"].get_next.side_effect = error

        with pytest.raises(UnknownBuildError) as excinfo:
            assembler.assemble_build("myServer", "myProject", "myCurrentBuild")

        assert excinfo.value is error
        mock_collaborators["url_builder"].build_for_build.assert_not_called()
        mock_collaborators["recent_builds_builder"].build.assert_not_called()

    def test_url_build_failure_propagates(self, assembler, mock_collaborators, build_view):
        mock_collaborators["url_builder"].build_for_build.side_effect = UrlBuildError("boom")

        with pytest.raises(UrlBuildError, match="boom"):
            assembler.assemble_build("myServer", "myProject", "myCurrentBuild")

    def test_rejects_missing_build_name(self, assembler, mock_collaborators):
        with pytest.raises(InvalidContextError, match="build name"):
            assembler.assemble_build("myServer", "myProject", "")

        assert mock_collaborators["recorder"].mock_calls == []


class TestAssembleDispatch:
    def test_farm_context(self, assembler, mock_collaborators):
        mock_collaborators["url_builder"].build.return_value = "addUrl"

        assert assembler.assemble(FarmContext()) == [LinkItem("addUrl", "Add Project")]

    def test_server_context(self, assembler, mock_collaborators):
        mock_collaborators["url_builder"].build_for_server.return_value = "serverUrl"

        result = assembler.assemble(ServerContext("myServer"))

        assert [item.label for item in result] == ["View Server Log", "Add Project"]

    def test_project_context(self, assembler, mock_collaborators):
        assembler.assemble(ProjectContext("myServer", "myProject"))

        mock_collaborators["recent_builds_builder"].build.assert_called_once_with(
            "myServer", "myProject"
        )

    def test_build_context(self, assembler, build_view):
        result = assembler.assemble(BuildContext("myServer", "myProject", "myCurrentBuild"))

        assert len(result) == 6

    def test_unknown_context_is_rejected(self, assembler):
        with pytest.raises(InvalidContextError, match="str"):
            assembler.assemble("myServer")
