from .build_history import (
    BuildHistory,
    BuildHistoryLoader,
    BuildLogInfo,
    parse_build_name,
)

__all__ = ["BuildHistory", "BuildHistoryLoader", "BuildLogInfo", "parse_build_name"]
