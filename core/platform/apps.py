from django.apps import AppConfig


class PlatformConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'core.platform'
    label = 'platform'
    verbose_name = 'Dashboard Platform'

    def ready(self):
        """Build the service container and boot the foundation provider."""
        from core.platform.container import Container
        from core.platform.providers import FoundationProvider

        self.container = Container()
        self.provider = FoundationProvider(self.container)
        self.provider.register()
        self.provider.boot()
