"""
Cache utilities for the Build Farm Dashboard

Holds the loaded build history so every sidebar request reuses the same
table instead of rereading the CSV file or log directory.
"""

import hashlib
from datetime import datetime
from typing import Any

import pandas as pd

from app_utils.simple_logger import get_logger

logger = get_logger("cache_utils")


class CacheManager:
    """Key/value cache with build history bookkeeping"""

    def __init__(self):
        self._cache = {
            "build_history": None,
            "build_history_hash": None,
            "last_load_time": None,
        }

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get cached value by key

        Parameters:
            key: str
                Cache key to retrieve
            default: Any
                Default value if key not found

        Returns:
            Any: Cached value or default
        """
        return self._cache.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._cache[key] = value

    def has(self, key: str) -> bool:
        """True if key exists and its value is not None"""
        return key in self._cache and self._cache[key] is not None

    def invalidate(self) -> None:
        """Drop the build history and everything derived from it"""
        for key in self._cache:
            self._cache[key] = None
        logger.info("Build history cache invalidated")

    def calculate_data_hash(self, df: pd.DataFrame) -> str:
        """Short content hash of a history frame, used to detect reloads that changed nothing"""
        row_hashes = pd.util.hash_pandas_object(df, index=False).values
        return hashlib.md5(row_hashes.tobytes()).hexdigest()[:8]

    def set_timestamp(self, key: str = "last_load_time") -> None:
        self.set(key, datetime.now())
