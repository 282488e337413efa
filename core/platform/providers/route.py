import logging
from importlib import import_module

from django.urls import path
from django.views.generic import RedirectView

from core.platform.conf import platform_settings
from core.platform.macros import ROUTE_MACROS, Router
from core.platform.providers.base import ServiceProvider

logger = logging.getLogger(__name__)


class RouteProvider(ServiceProvider):
    """
    Binds the dashboard Router. Its urlpatterns are built on first use, when
    core.platform.urls is loaded.
    """

    def register(self):
        self.container.singleton(Router, self.build_router)

    def build_router(self):
        from core.platform.screens import MainScreen
        from core.screen.views import relation_search

        router = Router(self.container.make(ROUTE_MACROS))
        router.add([
            path('', RedirectView.as_view(pattern_name=platform_settings.index), name='platform.index'),
            path('systems/relation/', relation_search, name='platform.systems.relation'),
        ])
        router.screen('main', MainScreen, 'platform.main')

        self.load_host_routes(router, platform_settings.routes)
        return router

    def load_host_routes(self, router, module_path):
        """Call `register(router)` of the host route module, if there is one."""
        if not module_path:
            return
        try:
            module = import_module(module_path)
        except ModuleNotFoundError as exc:
            # Only a missing route module is optional; its own import errors propagate.
            if exc.name is None or not (module_path == exc.name or module_path.startswith(f'{exc.name}.')):
                raise
            logger.debug(f"No dashboard route module '{module_path}'")
            return
        module.register(router)
