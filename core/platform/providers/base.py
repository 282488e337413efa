from core.platform.publishing import Publisher


class ServiceProvider:
    """
    Base provider: `register()` binds services, `boot()` uses them.
    Both run once, in that order, when the platform app is ready.
    """

    def __init__(self, container):
        self.container = container

    def register(self):
        pass

    def boot(self):
        pass

    def publishes(self, paths, group):
        self.container.make(Publisher).publishes(paths, group)
