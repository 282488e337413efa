"""
Foundation provider.

After an upgrade, refresh the published files with:
    python manage.py platform_publish --force
"""
import logging
from pathlib import Path

from core.platform.conf import platform_settings
from core.platform.dashboard import Dashboard
from core.platform.macros import MacroRegistry, PRESET_MACROS, ROUTE_MACROS, screen_route
from core.platform.presets import install_platform, install_source
from core.platform.providers.base import ServiceProvider
from core.platform.providers.event import EventProvider
from core.platform.providers.platform import PlatformProvider
from core.platform.providers.route import RouteProvider
from core.platform.publishing import Publisher

logger = logging.getLogger(__name__)

PLATFORM_PATH = Path(__file__).resolve().parent.parent


class FoundationProvider(ServiceProvider):

    def __init__(self, container):
        super().__init__(container)
        self.providers = []
        self.translation_paths = []
        self.view_namespaces = {}
        self.migration_paths = []

    def register(self):
        """Bind the shared services. Runs once per container."""
        self.container.singleton(Publisher, Publisher)
        self.container.singleton(Dashboard, lambda: Dashboard(options=platform_settings.merged))
        self.container.singleton(ROUTE_MACROS, lambda: MacroRegistry('route'))
        self.container.singleton(PRESET_MACROS, lambda: MacroRegistry('preset'))

        self.container.make(ROUTE_MACROS).register('screen', screen_route)

        presets = self.container.make(PRESET_MACROS)
        presets.register('platform-source', install_source)
        presets.register('platform', install_platform)

    def boot(self):
        (
            self.register_platform()
            .register_assets()
            .register_database()
            .register_config()
            .register_translations()
            .register_views()
            .register_providers()
        )

    def register_database(self):
        path = PLATFORM_PATH / 'migrations'
        self.migration_paths.append(path)

        self.publishes({
            path: Path('migrations') / 'platform',
        }, 'migrations')

        return self

    def register_translations(self):
        # Django reads <app>/locale on its own; kept for introspection.
        self.translation_paths.append(PLATFORM_PATH / 'locale')
        return self

    def register_config(self):
        self.publishes({
            PLATFORM_PATH / 'config' / 'platform.py': Path('config') / 'platform.py',
        }, 'config')

        return self

    def register_platform(self):
        self.publishes({
            PLATFORM_PATH / 'install_stubs' / 'routes': Path('routes'),
            PLATFORM_PATH / 'install_stubs' / 'dashboard': Path('dashboard'),
        }, 'platform-stubs')

        return self

    def register_assets(self):
        self.publishes({
            PLATFORM_PATH / 'resources' / 'js': Path('resources') / 'js' / 'platform',
            PLATFORM_PATH / 'resources' / 'sass': Path('resources') / 'sass' / 'platform',
        }, 'platform-assets')

        return self

    def register_views(self):
        path = PLATFORM_PATH / 'templates' / 'platform'
        self.view_namespaces['platform'] = path

        # Templates under BASE_DIR/templates/platform override the app's.
        self.publishes({
            path: Path('templates') / 'platform',
        }, 'views')

        return self

    def register_providers(self):
        for provider_class in self.provides():
            provider = provider_class(self.container)
            provider.register()
            provider.boot()
            self.providers.append(provider)
            logger.debug(f"Registered {provider_class.__name__}")

        return self

    def provides(self):
        """Sub-providers, registered in this order."""
        return [
            RouteProvider,
            EventProvider,
            PlatformProvider,
        ]
