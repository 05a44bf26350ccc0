"""
Build history table and loaders

The history is a pandas DataFrame with one row per build log:

    server | project | build_name

Build names follow the build log convention ``log<yyyyMMddHHmmss>.xml`` for
failed builds and ``log<yyyyMMddHHmmss>Lbuild.<label>.xml`` for successful
ones, so sorting names lexically sorts builds chronologically.
"""

import re
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Union

import pandas as pd

from app_utils.errors import BuildHistoryError, InvalidBuildNameError
from app_utils.simple_logger import get_logger

logger = get_logger("build_history")

HISTORY_COLUMNS = ["server", "project", "build_name"]

BUILD_NAME_PATTERN = re.compile(r"^log(?P<timestamp>\d{14})(?:Lbuild\.(?P<label>.+))?\.xml$")
BUILD_TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"


@dataclass(frozen=True)
class BuildLogInfo:
    build_name: str
    built_at: datetime
    label: Optional[str]

    @property
    def succeeded(self) -> bool:
        return self.label is not None


def parse_build_name(build_name: str) -> BuildLogInfo:
    """
    Parse a build log name into its timestamp and label

    Parameters:
        build_name: str
            Log file name, e.g. log20240131093000Lbuild.42.xml

    Returns:
        BuildLogInfo: parsed timestamp, label (None for failed builds)
    """
    match = BUILD_NAME_PATTERN.match(build_name or "")
    if not match:
        raise InvalidBuildNameError(f"Not a build log name: '{build_name}'")

    try:
        built_at = datetime.strptime(match.group("timestamp"), BUILD_TIMESTAMP_FORMAT)
    except ValueError as e:
        raise InvalidBuildNameError(f"Invalid timestamp in build log name '{build_name}': {e}")

    return BuildLogInfo(build_name=build_name, built_at=built_at, label=match.group("label"))


def is_build_name(build_name: str) -> bool:
    try:
        parse_build_name(build_name)
    except InvalidBuildNameError:
        return False
    return True


class BuildHistory:
    """Read-only view over the build history table"""

    def __init__(self, frame: Optional[pd.DataFrame] = None):
        if frame is None:
            frame = pd.DataFrame(columns=HISTORY_COLUMNS)

        missing = [column for column in HISTORY_COLUMNS if column not in frame.columns]
        if missing:
            raise BuildHistoryError(f"Build history is missing columns: {missing}")

        frame = frame[HISTORY_COLUMNS].dropna().astype(str)
        valid = frame["build_name"].map(is_build_name).astype(bool)
        if not valid.all():
            logger.warning(
                f"Dropped {int((~valid).sum())} rows not matching the build log name format",
                build_names=frame.loc[~valid, "build_name"].tolist(),
            )

        self.frame = (
            frame[valid]
            .drop_duplicates()
            .sort_values(HISTORY_COLUMNS)
            .reset_index(drop=True)
        )

    def __len__(self):
        return len(self.frame)

    @property
    def empty(self) -> bool:
        return self.frame.empty

    def servers(self) -> List[str]:
        return sorted(self.frame["server"].unique().tolist())

    def projects(self, server_name: str) -> List[str]:
        rows = self.frame[self.frame["server"] == server_name]
        return sorted(rows["project"].unique().tolist())

    def build_names(self, server_name: str, project_name: str) -> List[str]:
        """Build names for a project, oldest first"""
        rows = self.frame[
            (self.frame["server"] == server_name) & (self.frame["project"] == project_name)
        ]
        return rows["build_name"].tolist()


class BuildHistoryLoader:
    """Creates BuildHistory instances from CSV files, log directories or records"""

    @staticmethod
    def from_records(records: Iterable[Mapping[str, str]]) -> BuildHistory:
        return BuildHistory(pd.DataFrame(list(records), columns=HISTORY_COLUMNS))

    @staticmethod
    def from_csv(path: Union[str, Path]) -> BuildHistory:
        try:
            frame = pd.read_csv(path, dtype=str)
        except (
            OSError,
            UnicodeDecodeError,
            pd.errors.ParserError,
            pd.errors.EmptyDataError,
        ) as e:
            raise BuildHistoryError(f"Failed to read build history from {path}: {e}")

        history = BuildHistory(frame)
        logger.info(f"Loaded {len(history)} builds from {path}")
        return history

    @staticmethod
    def from_log_directory(root: Union[str, Path]) -> BuildHistory:
        """
        Scan ``<root>/<server>/<project>/log*.xml`` for build logs

        Files that do not follow the build log naming convention are skipped.
        """
        root = Path(root)
        if not root.is_dir():
            raise BuildHistoryError(f"Build log directory not found: {root}")

        records = []
        skipped = 0
        for log_file in sorted(root.glob("*/*/log*.xml")):
            if not BUILD_NAME_PATTERN.match(log_file.name):
                skipped += 1
                continue
            records.append(
                {
                    "server": log_file.parent.parent.name,
                    "project": log_file.parent.name,
                    "build_name": log_file.name,
                }
            )

        if skipped:
            logger.warning(f"Skipped {skipped} files not matching the build log name format")

        history = BuildHistoryLoader.from_records(records)
        logger.info(f"Loaded {len(history)} builds from {root}")
        return history

    @staticmethod
    def load(source: Optional[Union[str, Path]]) -> BuildHistory:
        """Load from a CSV file or a log directory; no source gives an empty history"""
        if not source:
            logger.warning("No build history configured, starting with an empty history")
            return BuildHistory()

        path = Path(source)
        if path.is_dir():
            return BuildHistoryLoader.from_log_directory(path)
        return BuildHistoryLoader.from_csv(path)
