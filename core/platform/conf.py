"""
Dashboard settings access.

Values come from the PLATFORM Django setting merged over the defaults in
core/platform/config/platform.py, e.g.:

    from core.platform.conf import platform_settings
    platform_settings.prefix
    platform_settings.get('relation.search_limit')
"""
import copy

from django.conf import settings
from django.core.signals import setting_changed

from core.platform.config.platform import PLATFORM as DEFAULTS


def merge_config(defaults, overrides):
    """
    Merge host overrides into a copy of the defaults.

    Nested dictionaries are merged one level at a time, any other value in
    `overrides` replaces the default.
    """
    merged = copy.deepcopy(defaults)
    for key, value in (overrides or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value
    return merged


class PlatformSettings:
    """Lazy view of the merged dashboard configuration."""

    def __init__(self, defaults=None):
        self.defaults = defaults or DEFAULTS
        self._merged = None

    @property
    def merged(self):
        if self._merged is None:
            self._merged = merge_config(self.defaults, getattr(settings, 'PLATFORM', {}))
        return self._merged

    def __getattr__(self, attr):
        if attr.startswith('_') or attr not in self.defaults and attr not in self.merged:
            raise AttributeError(f"Invalid platform setting: '{attr}'")
        return self.merged[attr]

    def get(self, key, default=None):
        """Dotted-path lookup, e.g. get('resource.scripts')."""
        value = self.merged
        for part in key.split('.'):
            if not isinstance(value, dict) or part not in value:
                return default
            value = value[part]
        return value

    def reload(self):
        self._merged = None


platform_settings = PlatformSettings()


def reload_platform_settings(*args, **kwargs):
    if kwargs['setting'] == 'PLATFORM':
        platform_settings.reload()


setting_changed.connect(reload_platform_settings)
