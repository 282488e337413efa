"""
Named extension tables.

Route helpers and preset installers are plain functions registered by name
when the platform boots. A name is registered once; later registrations of
the same name are ignored.
"""
import logging

from django.urls import path

logger = logging.getLogger(__name__)

ROUTE_MACROS = 'router.macros'
PRESET_MACROS = 'preset.macros'


class MacroRegistry:
    """
    Lookup table of named callables.

    Usage:
        presets = MacroRegistry('preset')
        presets.register('platform', install_platform)
        presets.call('platform', command)
    """

    def __init__(self, kind):
        self.kind = kind
        self._macros = {}

    def register(self, name, func):
        """
        Register `func` under `name`.

        Returns:
            True when registered, False when the name already existed
        """
        if name in self._macros:
            logger.debug(f"{self.kind} macro '{name}' already registered, keeping the existing one")
            return False
        self._macros[name] = func
        return True

    def has(self, name):
        return name in self._macros

    def get(self, name):
        return self._macros[name]

    def call(self, name, *args, **kwargs):
        return self._macros[name](*args, **kwargs)

    def names(self):
        return sorted(self._macros)

    def __len__(self):
        return len(self._macros)

    def __contains__(self, name):
        return name in self._macros


class Router:
    """
    Collects urlpatterns and exposes the registered route macros as methods:

        router = Router(macros)
        router.screen('roles', RoleListScreen, 'platform.systems.roles')
        urlpatterns = router.urlpatterns
    """

    def __init__(self, macros):
        self.macros = macros
        self.urlpatterns = []

    def add(self, patterns):
        self.urlpatterns.extend(patterns)
        return patterns

    def __getattr__(self, name):
        macros = self.__dict__.get('macros')
        if macros is None or not macros.has(name):
            raise AttributeError(f"Router has no macro '{name}'")

        def macro(*args, **kwargs):
            return self.add(macros.call(name, *args, **kwargs))

        return macro


def screen_route(url, screen, name=None):
    """
    URL patterns for a screen: `url`, `url/<method>` and
    `url/<method>/<argument>`, all handled by the screen view under one name.
    """
    view = screen.as_view()
    url = url.strip('/')
    base = f'{url}/' if url else ''
    return [
        path(base, view, name=name),
        path(f'{base}<str:method>/', view, name=name),
        path(f'{base}<str:method>/<str:argument>/', view, name=name),
    ]
