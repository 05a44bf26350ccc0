"""
Exception hierarchy for the Build Farm Dashboard

InvalidContextError is raised for bad navigation identifiers. Everything a
collaborator (URL builder, build history, retriever) can fail with derives
from CollaboratorFailure so the callback layer can present it to the user.
"""


class DashboardError(Exception):
    """Base class for all dashboard errors"""


class InvalidContextError(DashboardError, ValueError):
    """A navigation context is missing a required identifier"""


class CollaboratorFailure(DashboardError):
    """A lookup or URL build performed on behalf of the sidebar failed"""


class UrlBuildError(CollaboratorFailure):
    """A URL could not be built for the requested action"""


class BuildHistoryError(CollaboratorFailure):
    """The build history could not be loaded"""


class InvalidBuildNameError(CollaboratorFailure):
    """A build log name does not follow the log naming convention"""


class NoBuildsError(CollaboratorFailure):
    """A project has no builds in the history"""

    def __init__(self, server_name: str, project_name: str):
        super().__init__(
            f"No builds found for project '{project_name}' on server '{server_name}'"
        )
        self.server_name = server_name
        self.project_name = project_name


class UnknownBuildError(CollaboratorFailure):
    """A build name is not part of the project's history"""

    def __init__(self, server_name: str, project_name: str, build_name: str):
        super().__init__(
            f"Build '{build_name}' not found for project '{project_name}' on server '{server_name}'"
        )
        self.server_name = server_name
        self.project_name = project_name
        self.build_name = build_name
