"""
Dashboard registry.

One Dashboard instance is created by FoundationProvider at application boot
and bound in the platform container. It collects what the rendering layer
needs: asset resources, menu items, permission groups and model overrides.
"""
import logging

from django.apps import apps as django_apps
from django.utils.module_loading import import_string

logger = logging.getLogger(__name__)


class ItemPermission:
    """
    A named group of permission slugs shown together in role forms.

    Usage:
        ItemPermission.group('Systems').add_permission('platform.systems.roles', 'Roles')
    """

    def __init__(self, group):
        self.group = group
        self.items = []

    @classmethod
    def group(cls, name):
        return cls(name)

    def add_permission(self, slug, description):
        self.items.append({'slug': slug, 'description': description})
        return self


class Menu:
    """Menu entries grouped by place (e.g. 'Main', 'Profile')."""

    def __init__(self):
        self._places = {}

    def add(self, place, label, url, sort=0, permission=None, icon=None):
        self._places.setdefault(place, []).append({
            'label': label,
            'url': url,
            'sort': sort,
            'permission': permission,
            'icon': icon,
        })
        return self

    def items(self, place, user=None):
        """
        Entries of a place sorted by `sort`. With a user, entries guarded by a
        permission the user lacks are left out.
        """
        from core.platform.access import has_access

        entries = sorted(self._places.get(place, []), key=lambda item: item['sort'])
        if user is None:
            return entries
        return [item for item in entries if not item['permission'] or has_access(user, item['permission'])]

    def places(self):
        return list(self._places)


class Dashboard:
    VERSION = '1.0.0'

    def __init__(self, options=None):
        self.options = dict(options or {})
        self.resources = {
            'stylesheets': [],
            'scripts': [],
        }
        self.permission = {
            'all': {},
            'removed': set(),
        }
        self.models = {}
        self.menu = Menu()

    def configure(self, options):
        self.options.update(options)
        return self

    def option(self, key, default=None):
        return self.options.get(key, default)

    def prefix(self, path=''):
        prefix = str(self.option('prefix', 'dashboard')).strip('/')
        path = path.lstrip('/')
        return f'/{prefix}/{path}' if path else f'/{prefix}'

    def register_resource(self, key, value):
        """
        Add one asset or a list of assets under `key` ('scripts' or
        'stylesheets'). Already registered assets keep their position.
        """
        values = [value] if isinstance(value, str) else list(value)
        registered = self.resources.setdefault(key, [])
        for item in values:
            if item not in registered:
                registered.append(item)
        return self

    def get_resource(self, key=None):
        if key is None:
            return self.resources
        return self.resources.get(key, [])

    def register_permissions(self, permission):
        self.permission['all'].setdefault(permission.group, []).extend(permission.items)
        return self

    def remove_permission(self, slug):
        self.permission['removed'].add(slug)
        return self

    def get_permission(self):
        """Registered permissions per group, without removed slugs or empty groups."""
        removed = self.permission['removed']
        groups = {}
        for group, items in self.permission['all'].items():
            visible = [item for item in items if item['slug'] not in removed]
            if visible:
                groups[group] = visible
        return groups

    def permission_slugs(self):
        return [item['slug'] for items in self.get_permission().values() for item in items]

    def use_model(self, key, model):
        """Override a model used by the platform ('role', ...)."""
        self.models[key] = model
        return self

    def model(self, key, default=None):
        """
        Resolve a model override. Strings are read as 'app_label.ModelName'
        or as a dotted import path.
        """
        model = self.models.get(key, default)
        if isinstance(model, str):
            if model.count('.') == 1:
                return django_apps.get_model(model)
            return import_string(model)
        return model
