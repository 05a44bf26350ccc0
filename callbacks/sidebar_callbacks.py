from urllib.parse import parse_qs

from app_utils.errors import CollaboratorFailure, InvalidContextError
from app_utils.simple_logger import get_logger
from app_utils.sidebar_models import (
    BuildContext,
    FarmContext,
    ProjectContext,
    ServerContext,
)
from callbacks.shared_callback_utils import (
    Input,
    Output,
    app_sidebar,
    app_utils,
    callback,
    dbc,
    html,
)

logger = get_logger("sidebar_callbacks")


def parse_navigation_context(search):
    """
    Resolve the navigation context from a page query string

    Parameters:
        search: str
            Query string such as "?server=local&project=app", may be empty

    Returns:
        The deepest context the server/project/build parameters describe
    """
    params = parse_qs((search or "").lstrip("?"))
    server = params.get("server", [None])[0]
    project = params.get("project", [None])[0]
    build = params.get("build", [None])[0]

    if build is not None:
        if server is None or project is None:
            raise InvalidContextError("A build link needs both a server and a project")
        return BuildContext(server, project, build)
    if project is not None:
        if server is None:
            raise InvalidContextError("A project link needs a server")
        return ProjectContext(server, project)
    if server is not None:
        return ServerContext(server)
    return FarmContext()


def describe_context(context) -> str:
    if isinstance(context, BuildContext):
        return f"{context.project_name} - {context.build_name}"
    if isinstance(context, ProjectContext):
        return f"{context.project_name} ({context.server_name})"
    if isinstance(context, ServerContext):
        return f"Server: {context.server_name}"
    return "Build Farm"


def build_sidebar_content(search):
    """
    Build the sidebar and page title for a query string

    Dashboard errors are shown as an alert in place of the sidebar.
    """
    try:
        context = parse_navigation_context(search)
        items = app_utils.get_sidebar(context)
    except InvalidContextError as e:
        logger.warning(f"Invalid navigation context '{search}': {e}")
        return _error_alert("Invalid link", str(e), "warning"), "Build Farm"
    except CollaboratorFailure as e:
        logger.error(f"Failed to build sidebar for '{search}': {e}")
        return _error_alert("Sidebar unavailable", str(e), "danger"), "Build Farm"

    return app_sidebar.render(items), describe_context(context)


def _error_alert(title, message, color):
    return dbc.Alert(
        [html.H5(title, className="alert-heading"), html.P(message)],
        color=color,
        className="sidebar-error",
    )


@callback(
    [Output("sidebar-content", "children"), Output("page-title", "children")],
    [Input("url", "search")],
)
def update_sidebar(search):
    """Rebuild the sidebar whenever the page location changes"""
    return build_sidebar_content(search)
