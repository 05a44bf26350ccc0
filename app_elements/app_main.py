import dash_bootstrap_components as dbc
from dash import dcc, html

from .app_sidebar import AppSidebar


class AppMain:
    def __init__(self):
        """Initialize main app components"""
        self.app_sidebar = AppSidebar()

    def build(self):
        """
        Build app main with the sidebar and the page header
        """
        return html.Div(
            [
                # Navigation context comes from the page query string
                dcc.Location(id="url", refresh=True),
                # Top app bar
                dbc.Row([html.Div("BUILD FARM", className="top-bar")], className="g-0"),
                dbc.Row(
                    [
                        dbc.Col(
                            [self.app_sidebar.build()],
                            width=3,
                            className="sidebar-col",
                        ),
                        dbc.Col(
                            [
                                html.H3(id="page-title", className="page-title"),
                                html.Div(id="page-content", className="page-content"),
                            ],
                            width=9,
                            className="content-col",
                        ),
                    ],
                    className="g-0 main-content-row",
                ),
            ],
            className="app-main",
        )
