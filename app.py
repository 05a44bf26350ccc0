import os

import dash
import dash_bootstrap_components as dbc

from app_elements import AppMain
from app_utils.simple_logger import get_logger
from shared_utils import app_utils

logger = get_logger("startup")

# Load the build history once at startup
history = app_utils.get_build_history(use_cache=True)
logger.info(
    f"App initialized: {len(history)} builds across {len(history.servers())} servers"
)

from callbacks import sidebar_callbacks  # noqa: F401, E402

app = dash.Dash(
    __name__,
    external_stylesheets=[dbc.themes.BOOTSTRAP],
)
app.title = "Build Farm Dashboard"
app.layout = AppMain().build()

# Make server accessible for gunicorn
application = app.server

if __name__ == "__main__":
    app.run(debug=False, host="0.0.0.0", port=int(os.environ.get("PORT", 8080)))
