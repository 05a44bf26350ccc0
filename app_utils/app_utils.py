from typing import Optional

from app_utils.simple_logger import get_logger

from .app_data_load import BuildHistory, BuildHistoryLoader
from .build_name_retriever import DefaultBuildNameRetriever
from .cache_utils import CacheManager
from .dashboard_config import DashboardConfig
from .plugin_links import BuildPluginLinkCalculator
from .sidebar_assembler import SideBarAssembler
from .sidebar_models import NavigationContext, SideBarResult
from .url_builder import DefaultUrlBuilder

logger = get_logger("app_utils")


class AppUtils:
    """
    Central access point for the dashboard's build data and sidebar assembly

    Owns the configuration, the cached build history and the collaborators
    the sidebar assembler is built from.
    """

    def __init__(self, config: Optional[DashboardConfig] = None, cache_manager=None):
        """
        Initialize AppUtils

        Parameters:
            config: DashboardConfig, read from the environment when omitted
            cache_manager: CacheManager instance holding the build history
        """
        self.config = config or DashboardConfig.from_env()
        self.cache_manager = cache_manager or CacheManager()

        self.url_builder = DefaultUrlBuilder(self.config.base_url)
        self.plugin_link_calculator = BuildPluginLinkCalculator(
            self.url_builder, self.config.build_plugins
        )

    def get_build_history(self, use_cache: bool = True) -> BuildHistory:
        """Get the build history, loading it from the configured source if needed"""
        if use_cache and self.cache_manager.has("build_history"):
            return self.cache_manager.get("build_history")

        logger.info(f"Loading build history from {self.config.build_history_source}")
        history = BuildHistoryLoader.load(self.config.build_history_source)
        self.set_build_history(history)
        return history

    def set_build_history(self, history: BuildHistory) -> None:
        """Replace the cached build history"""
        data_hash = self.cache_manager.calculate_data_hash(history.frame)
        if data_hash == self.cache_manager.get("build_history_hash"):
            logger.info("Build history unchanged", builds=len(history))
        else:
            logger.info("Build history updated", builds=len(history), hash=data_hash)

        self.cache_manager.set("build_history", history)
        self.cache_manager.set("build_history_hash", data_hash)
        self.cache_manager.set_timestamp()

    def reload_build_history(self) -> BuildHistory:
        return self.get_build_history(use_cache=False)

    def create_assembler(self, history: Optional[BuildHistory] = None) -> SideBarAssembler:
        """Wire a SideBarAssembler over the given (or cached) build history"""
        # Local import, app_elements depends on app_utils
        from app_elements.app_recent_builds import AppRecentBuilds

        history = history if history is not None else self.get_build_history()

        return SideBarAssembler(
            url_builder=self.url_builder,
            build_name_retriever=DefaultBuildNameRetriever(history),
            recent_builds_builder=AppRecentBuilds(
                self.url_builder, history, self.config.recent_builds_count
            ),
            plugin_link_calculator=self.plugin_link_calculator,
        )

    def get_sidebar(self, context: NavigationContext) -> SideBarResult:
        return self.create_assembler().assemble(context)
