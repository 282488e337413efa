"""
Built-in dashboard screens.
"""
from core.platform.container import get_container
from core.platform.dashboard import Dashboard
from core.screen.layouts import Table, TD
from core.screen.screen import Screen


class MenuLayout(Table):
    target = 'menu'

    def columns(self):
        return [
            TD.make('label', 'Section'),
            TD.make('url', 'Link'),
        ]


class MainScreen(Screen):
    """Dashboard home: the main menu entries available to the user."""
    name = 'Dashboard'
    description = 'Welcome to the dashboard'
    permission = 'platform.index'

    def query(self, request, **kwargs):
        dashboard = get_container().make(Dashboard)
        return {'menu': dashboard.menu.items('Main', request.user)}

    def layout(self):
        return [MenuLayout()]
