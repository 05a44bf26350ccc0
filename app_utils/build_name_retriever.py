from typing import List

from .app_data_load import BuildHistory
from .errors import NoBuildsError, UnknownBuildError


class DefaultBuildNameRetriever:
    """
    Resolves latest, next and previous build names from the build history

    The newest build is its own next build and the oldest build is its own
    previous build, so navigation links never point outside the history.
    """

    def __init__(self, history: BuildHistory):
        self.history = history

    def get_latest(self, server_name: str, project_name: str) -> str:
        return self._build_names(server_name, project_name)[-1]

    def get_next(self, server_name: str, project_name: str, current_build: str) -> str:
        names = self._build_names(server_name, project_name)
        index = self._index_of(names, server_name, project_name, current_build)
        return names[min(index + 1, len(names) - 1)]

    def get_previous(self, server_name: str, project_name: str, current_build: str) -> str:
        names = self._build_names(server_name, project_name)
        index = self._index_of(names, server_name, project_name, current_build)
        return names[max(index - 1, 0)]

    def _build_names(self, server_name: str, project_name: str) -> List[str]:
        names = self.history.build_names(server_name, project_name)
        if not names:
            raise NoBuildsError(server_name, project_name)
        return names

    @staticmethod
    def _index_of(names, server_name, project_name, build_name) -> int:
        try:
            return names.index(build_name)
        except ValueError:
            raise UnknownBuildError(server_name, project_name, build_name)
