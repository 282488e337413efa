"""
Data sources for the Relation field.

A source turns record keys into (key, label) options. ModelSource queries a
Django model, ClassSource asks a plain class whose `handler(key)` returns
a record. Both are described by a signed descriptor so the AJAX search
endpoint can rebuild them.
"""
import logging
from abc import ABC, abstractmethod
from collections import namedtuple
from collections.abc import Mapping

from django.apps import apps
from django.core.exceptions import ImproperlyConfigured, ValidationError
from django.db import models
from django.utils.module_loading import import_string

logger = logging.getLogger(__name__)

Option = namedtuple('Option', ['key', 'label'])


def unique(keys):
    """Keys without duplicates, first occurrence wins."""
    seen = set()
    result = []
    for key in keys:
        marker = str(key)
        if marker not in seen:
            seen.add(marker)
            result.append(key)
    return result


class RelationSource(ABC):
    """Interface shared by the Relation field data sources."""

    def __init__(self, name, key):
        self.name = name
        self.key = key

    @abstractmethod
    def is_record(self, value):
        """Whether `value` is a record of this source rather than a key."""

    @abstractmethod
    def resolve(self, keys):
        """Options for `keys`, in the order the source returns them. Unknown keys are dropped."""

    @abstractmethod
    def search(self, term, limit):
        """Options whose label matches `term`."""

    @abstractmethod
    def descriptor(self):
        """JSON-serializable description used to rebuild the source."""

    def read(self, record, attribute):
        if isinstance(record, Mapping):
            return record.get(attribute)
        return getattr(record, attribute, None)

    def key_of(self, value):
        return self.read(value, self.key) if self.is_record(value) else value

    def option_for(self, record):
        return Option(self.key_of(record), self.read(record, self.name))

    def _log_missing(self, keys, options):
        found = {str(option.key) for option in options}
        missing = [key for key in keys if str(key) not in found]
        if missing:
            logger.debug(f"{self} has no records for keys {missing}")


class ModelSource(RelationSource):
    """
    Options read from a Django model.

    Args:
        model: model class or 'app_label.ModelName'
        name: attribute used as the option label
        key: attribute used as the option key, primary key by default
        scope: optional name of a queryset method applied to every lookup
    """

    def __init__(self, model, name, key=None, scope=None):
        if isinstance(model, str):
            model = apps.get_model(model)
        super().__init__(name, key or model._meta.pk.attname)
        self.model = model
        self.scope = scope

    def __str__(self):
        return f"ModelSource({self.model._meta.label}.{self.name})"

    def get_queryset(self):
        queryset = self.model._default_manager.all()
        if self.scope:
            queryset = getattr(queryset, self.scope)()
        return queryset

    def is_record(self, value):
        return isinstance(value, self.model)

    def to_key(self, key):
        """
        Coerce `key` to the key field's Python type ('7' -> 7 for an integer pk).

        Raises:
            ValidationError, ValueError, TypeError: `key` can't be a value of the field
        """
        return self.model._meta.get_field(self.key).to_python(key)

    def resolve(self, keys):
        keys = unique(keys)
        valid = []
        for key in keys:
            try:
                valid.append(self.to_key(key))
            except (ValidationError, ValueError, TypeError):
                continue
        valid = unique(valid)
        if not valid:
            self._log_missing(keys, [])
            return []
        records = self.get_queryset().filter(**{f'{self.key}__in': valid})
        options = [self.option_for(record) for record in records]
        self._log_missing(keys, options)
        return options

    def search(self, term, limit):
        queryset = self.get_queryset()
        if term:
            queryset = queryset.filter(**{f'{self.name}__icontains': term})
        return [self.option_for(record) for record in queryset[:limit]]

    def descriptor(self):
        return {
            'type': 'model',
            'target': self.model._meta.label,
            'name': self.name,
            'key': self.key,
            'scope': self.scope,
        }


class ClassSource(RelationSource):
    """
    Options read from a plain class.

    The class is instantiated without arguments and must provide
    `handler(key)`, returning a record (mapping or object) or None. An
    optional `search(term, limit)` returning records enables AJAX search.
    """

    def __init__(self, klass, name, key='id'):
        if isinstance(klass, str):
            klass = import_string(klass)
        if not callable(getattr(klass, 'handler', None)):
            raise ImproperlyConfigured(f"{klass.__qualname__} must define handler(key) to be used as a relation source")
        super().__init__(name, key)
        self.klass = klass

    def __str__(self):
        return f"ClassSource({self.klass.__qualname__}.{self.name})"

    def is_record(self, value):
        """Mappings, and objects carrying the key attribute. Anything else (UUID, Decimal, ...) is a key."""
        if isinstance(value, Mapping):
            return True
        return not isinstance(value, (str, bytes)) and hasattr(value, self.key)

    def key_of(self, value):
        if not self.is_record(value):
            return value
        key = self.read(value, self.key)
        return value if key is None else key

    def resolve(self, keys):
        keys = unique(keys)
        handler = self.klass()
        options = []
        for key in keys:
            record = handler.handler(key)
            if record is None:
                continue
            option = self.option_for(record)
            options.append(Option(key if option.key is None else option.key, option.label))
        self._log_missing(keys, options)
        return options

    def search(self, term, limit):
        handler = self.klass()
        if not hasattr(handler, 'search'):
            return []
        return [self.option_for(record) for record in list(handler.search(term, limit))[:limit]]

    def descriptor(self):
        return {
            'type': 'class',
            'target': f'{self.klass.__module__}.{self.klass.__qualname__}',
            'name': self.name,
            'key': self.key,
        }


def source_from_descriptor(descriptor):
    """Rebuild a source from `RelationSource.descriptor()` output."""
    kind = descriptor.get('type')
    if kind == 'model':
        return ModelSource(descriptor['target'], descriptor['name'], descriptor.get('key'), descriptor.get('scope'))
    if kind == 'class':
        return ClassSource(descriptor['target'], descriptor['name'], descriptor.get('key') or 'id')
    raise ImproperlyConfigured(f"Unknown relation source type '{kind}'")


def is_collection(value):
    return isinstance(value, (list, tuple, set, frozenset, models.QuerySet))
