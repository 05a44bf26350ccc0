from .app_utils import AppUtils
from .dashboard_config import DashboardConfig
from .errors import (
    CollaboratorFailure,
    DashboardError,
    InvalidContextError,
)
from .sidebar_assembler import SideBarAssembler
from .sidebar_models import (
    BuildContext,
    FarmContext,
    LinkItem,
    ProjectContext,
    ServerContext,
    sidebar_contains,
)
