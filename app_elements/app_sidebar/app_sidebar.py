from dash import html

from app_utils.sidebar_models import LinkItem, SideBarResult


class AppSidebar:
    def build(self):
        """
        Build the empty sidebar container, filled in by the sidebar callback
        """
        return html.Div([], id="sidebar-content", className="sidebar")

    def render(self, items: SideBarResult) -> html.Table:
        """
        Render sidebar items as a single-column table

        Links become anchors; panels are placed in their cell unchanged.
        """
        return html.Table(
            html.Tbody([html.Tr(html.Td(self._render_item(item))) for item in items]),
            className="sidebar-table",
        )

    def _render_item(self, item):
        if isinstance(item, LinkItem):
            return html.A(item.label, href=item.url, className="sidebar-link")
        return item
