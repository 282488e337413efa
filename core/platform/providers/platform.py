from core.platform.conf import platform_settings
from core.platform.dashboard import Dashboard, ItemPermission
from core.platform.providers.base import ServiceProvider


class PlatformProvider(ServiceProvider):
    """Fills the Dashboard with the system permissions, resources and menu."""

    def boot(self):
        dashboard = self.container.make(Dashboard)

        dashboard.register_permissions(self.system_permissions())

        for key, resources in platform_settings.get('resource', {}).items():
            dashboard.register_resource(key, resources)

        for key, model in platform_settings.get('models', {}).items():
            dashboard.use_model(key, model)

        dashboard.menu.add('Main', 'Dashboard', dashboard.prefix('main/'), sort=0, permission='platform.index')
        dashboard.menu.add('Main', 'Roles', '/admin/platform/role/', sort=1000, permission='platform.systems.roles')

    @staticmethod
    def system_permissions():
        return (
            ItemPermission.group('System')
            .add_permission('platform.index', 'Main')
            .add_permission('platform.systems.roles', 'Roles')
            .add_permission('platform.systems.users', 'Users')
        )
