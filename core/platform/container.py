"""
Service container for the dashboard platform.

Holds the objects the providers construct at boot (the Dashboard registry,
macro tables, the publisher) so views, commands and templates receive them
explicitly instead of reaching for module globals.
"""
import logging

from django.core.exceptions import ImproperlyConfigured

logger = logging.getLogger(__name__)


class Container:
    """
    Binding table keyed by class or string.

    Usage:
        container = Container()
        container.singleton(Dashboard, Dashboard)
        dashboard = container.make(Dashboard)
    """

    def __init__(self):
        self._factories = {}
        self._instances = {}

    def singleton(self, abstract, factory):
        """
        Bind `abstract` to a factory that is called at most once.

        Raises:
            ImproperlyConfigured: `abstract` is already bound
        """
        if self.bound(abstract):
            raise ImproperlyConfigured(f"'{self._label(abstract)}' is already bound in the container")
        self._factories[abstract] = factory
        logger.debug(f"Bound singleton {self._label(abstract)}")

    def bound(self, abstract):
        return abstract in self._factories or abstract in self._instances

    def make(self, abstract):
        if abstract in self._instances:
            return self._instances[abstract]
        try:
            factory = self._factories[abstract]
        except KeyError:
            raise ImproperlyConfigured(f"'{self._label(abstract)}' is not bound in the container") from None
        self._instances[abstract] = factory()
        return self._instances[abstract]

    @staticmethod
    def _label(abstract):
        return getattr(abstract, '__qualname__', str(abstract))


def get_container():
    """The container built by the platform app at startup."""
    from django.apps import apps

    return apps.get_app_config('platform').container
