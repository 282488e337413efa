"""
Layouts arrange screen content. A Screen's `layout()` returns instances of
these classes; each renders itself with the screen's query data.

The scaffolding commands (platform_rows, platform_table, ...) generate
subclasses of them.
"""
import json
from collections.abc import Mapping

from django.template.loader import render_to_string


def data_get(data, path, default=None):
    """Read a dotted path from nested mappings and objects."""
    value = data
    for part in path.split('.'):
        if value is None:
            return default
        if isinstance(value, Mapping):
            value = value.get(part)
        else:
            value = getattr(value, part, None)
    return default if value is None else value


class Layout:
    template = None

    def get_context(self, query):
        return {'layout': self}

    def build(self, query, request=None):
        return render_to_string(self.template, self.get_context(query), request=request)


class Rows(Layout):
    """A column of fields filled from the query data by field name."""
    template = 'platform/layouts/rows.html'
    title = None

    def fields(self):
        return []

    def get_context(self, query):
        fields = []
        for field in self.fields():
            if not field.has_value():
                value = data_get(query, field.get_path())
                if value is not None:
                    field.value(value)
            fields.append(field)
        return {'layout': self, 'title': self.title, 'fields': fields}

    def build(self, query, request=None):
        context = self.get_context(query)
        context['rendered'] = [field.render(request=request) for field in context['fields']]
        return render_to_string(self.template, context, request=request)


class TD:
    """Table column."""

    def __init__(self, name, title=None):
        self.name = name
        self.title = title or name.replace('_', ' ').capitalize()
        self.callback = None

    @classmethod
    def make(cls, name, title=None):
        return cls(name, title)

    def render(self, callback):
        """Compute the cell from the row with `callback(row)`."""
        self.callback = callback
        return self

    def value(self, row):
        if self.callback is not None:
            return self.callback(row)
        return data_get(row, self.name, '')


class Table(Layout):
    """Rows of `query[target]`, one cell per column."""
    template = 'platform/layouts/table.html'
    target = None

    def columns(self):
        return []

    def get_context(self, query):
        columns = self.columns()
        rows = data_get(query, self.target, []) if self.target else []
        return {
            'layout': self,
            'columns': columns,
            'rows': [[column.value(row) for column in columns] for row in rows],
        }


class Filter:
    """
    Narrows a queryset from request parameters.

    `run()` is only applied when one of `parameters` is present in the
    request's query string.
    """
    parameters = []
    permission = None

    def __init__(self, request=None):
        self.request = request

    def name(self):
        return type(self).__name__

    def run(self, queryset):
        raise NotImplementedError('Filters must implement run()')

    def display(self):
        """Fields rendered in the filter form."""
        return []

    def is_applicable(self):
        if self.request is None:
            return False
        return any(self.request.GET.get(parameter) not in (None, '') for parameter in self.parameters)

    def filter(self, queryset):
        return self.run(queryset) if self.is_applicable() else queryset


class Selection(Layout):
    """A group of filters rendered above a table."""
    template = 'platform/layouts/selection.html'

    def filters(self):
        return []

    def apply(self, queryset, request):
        for filter_class in self.filters():
            queryset = filter_class(request).filter(queryset)
        return queryset

    @staticmethod
    def submitted_value(request, field):
        """Value of `field` in the query string, read under its HTML name ('roles[]', 'a[b]')."""
        name = field.get_html_name()
        if field.is_multiple():
            return request.GET.getlist(name)
        return request.GET.get(name)

    def build(self, query, request=None):
        filters = [filter_class(request) for filter_class in self.filters()]
        forms = []
        for item in filters:
            fields = []
            for field in item.display():
                if not field.has_value() and request is not None:
                    value = self.submitted_value(request, field)
                    if value:
                        field.value(value)
                fields.append(field.render(request=request))
            forms.append({'name': item.name(), 'fields': fields})
        return render_to_string(self.template, {'layout': self, 'forms': forms}, request=request)


class Chart(Layout):
    """
    Chart of `query[target]`, a list of {'name': ..., 'values': [...]}
    datasets sharing `labels`.
    """
    template = 'platform/layouts/chart.html'
    title = None
    type = 'line'
    target = None
    labels = []
    height = 250

    def get_context(self, query):
        datasets = data_get(query, self.target, []) if self.target else []
        return {
            'layout': self,
            'title': self.title,
            'config': json.dumps({
                'type': self.type,
                'labels': list(self.labels),
                'datasets': list(datasets),
            }),
        }


class Metric(Layout):
    """
    Key figures: `labels` paired with `query[target]` entries, each a
    {'value': ..., 'diff': ...} mapping.
    """
    template = 'platform/layouts/metric.html'
    title = None
    target = None
    labels = []

    def get_context(self, query):
        values = data_get(query, self.target, []) if self.target else []
        metrics = [
            {'label': label, 'value': data_get(value, 'value', value), 'diff': data_get(value, 'diff')}
            for label, value in zip(self.labels, values)
        ]
        return {'layout': self, 'title': self.title, 'metrics': metrics}
