"""
Shared pytest configuration and fixtures for the Build Farm Dashboard tests
"""
import os
import sys
from unittest.mock import Mock

import pytest

# Add the project root to Python path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app_utils import AppUtils, DashboardConfig
from app_utils.url_builder import DefaultUrlBuilder
from tests.fixtures import get_sample_build_history


@pytest.fixture
def build_history():
    """Build history with the sample farm (local and remote servers)"""
    return get_sample_build_history()


@pytest.fixture
def url_builder():
    return DefaultUrlBuilder("/")


@pytest.fixture
def sample_app_utils(build_history):
    """
    AppUtils over the sample history, independent of the process environment
    """
    utils = AppUtils(config=DashboardConfig(recent_builds_count=3))
    utils.set_build_history(build_history)
    return utils


@pytest.fixture
def mock_collaborators():
    """
    Mock sidebar collaborators attached to one parent mock

    The parent's mock_calls records calls across all four collaborators in
    the order they happened.
    """
    recorder = Mock()
    collaborators = {
        "url_builder": Mock(),
        "build_name_retriever": Mock(),
        "recent_builds_builder": Mock(),
        "plugin_link_calculator": Mock(),
    }
    for name, collaborator in collaborators.items():
        recorder.attach_mock(collaborator, name)
    collaborators["recorder"] = recorder
    return collaborators
