"""
Relation field: a select input whose options come from a model or a class.

    Relation.make('role').title('Role').from_model(Role, 'name').value(role)
    Relation.make('roles.').from_model(Role, 'name').value([1, 2])
    Relation.make('record').from_class(RecordSource, 'text').value(1)
"""
from django.core import signing
from django.urls import NoReverseMatch, reverse

from core.screen.field import Field
from core.screen.sources import ClassSource, ModelSource, is_collection

SIGNING_SALT = 'platform.relation'


class Relation(Field):
    view = 'platform/fields/relation.html'
    required_attributes = ['name', 'source']

    def __init__(self, name=None):
        super().__init__(name)
        self.attributes['source'] = None

    @property
    def source(self):
        return self.attributes['source']

    def from_model(self, model, name, key=None):
        return self.set('source', ModelSource(model, name, key))

    def from_class(self, klass, name, key='id'):
        return self.set('source', ClassSource(klass, name, key))

    def apply_scope(self, scope):
        """Name of a queryset method applied to every lookup of a model source."""
        if not isinstance(self.source, ModelSource):
            raise TypeError('apply_scope() needs a model source, call from_model() first')
        self.source.scope = scope
        return self

    def resolve_options(self):
        """
        Options for the current value.

        A record gives one option without a query, a key or a list of keys is
        looked up in one batch (source order, unknown keys dropped), a
        collection of records gives one option per distinct record.
        """
        value = self.attributes.get('value')
        source = self.source

        if value is None or value == '':
            return []

        if not is_collection(value):
            if source.is_record(value):
                return [source.option_for(value)]
            return source.resolve([value])

        items = list(value)
        if items and all(source.is_record(item) for item in items):
            options = []
            seen = set()
            for item in items:
                option = source.option_for(item)
                if str(option.key) not in seen:
                    seen.add(str(option.key))
                    options.append(option)
            return options

        return source.resolve([source.key_of(item) for item in items])

    def signed_source(self):
        return signing.dumps(self.source.descriptor(), salt=SIGNING_SALT)

    def search_url(self):
        try:
            return reverse('platform.systems.relation')
        except NoReverseMatch:
            return None

    def get_context(self):
        context = super().get_context()
        context.update({
            'options': self.resolve_options(),
            'relation_source': self.signed_source(),
            'relation_url': self.search_url(),
        })
        return context
