"""
Screen fields.

A field is a named input rendered through a Django template. Attributes are
set fluently:

    Input.make('user.email').title('Email').required()

Dotted names map to nested form names: `user.email` renders as
`user[email]`, and a trailing dot (`roles.`) marks a multi-value field
rendered as `roles[]`.
"""
from django.template.loader import render_to_string
from django.utils.crypto import get_random_string


class FieldRequiredAttributeError(Exception):
    """A field was rendered without one of its required attributes."""

    def __init__(self, field, attribute):
        self.field = field
        self.attribute = attribute
        super().__init__(f"Field {type(field).__name__} must have the '{attribute}' attribute")


class Field:
    view = None
    required_attributes = ['name']

    def __init__(self, name=None):
        self.attributes = {
            'name': name,
            'value': None,
            'title': None,
            'help': None,
            'placeholder': None,
            'required': False,
        }

    @classmethod
    def make(cls, name=None):
        return cls(name)

    def set(self, key, value=True):
        self.attributes[key] = value
        return self

    def get(self, key, default=None):
        value = self.attributes.get(key)
        return default if value is None else value

    def name(self, name):
        return self.set('name', name)

    def title(self, title):
        return self.set('title', title)

    def help(self, text):
        return self.set('help', text)

    def placeholder(self, text):
        return self.set('placeholder', text)

    def required(self, required=True):
        return self.set('required', required)

    def value(self, value):
        return self.set('value', value)

    def has_value(self):
        return self.attributes.get('value') is not None

    def is_multiple(self):
        return str(self.get('name', '')).endswith('.')

    def get_path(self):
        """Dotted name without the multi-value marker, e.g. 'roles' for 'roles.'."""
        return str(self.get('name', '')).rstrip('.')

    def get_html_name(self):
        name = str(self.get('name', ''))
        parts = name.split('.')
        html_name = parts[0] + ''.join(f'[{part}]' for part in parts[1:])
        return html_name

    def get_id(self):
        if not self.attributes.get('id'):
            slug = self.get_path().replace('.', '-') or 'field'
            self.attributes['id'] = f'field-{slug}-{get_random_string(6).lower()}'
        return self.attributes['id']

    def check_required_attributes(self):
        for attribute in self.required_attributes:
            if self.attributes.get(attribute) in (None, ''):
                raise FieldRequiredAttributeError(self, attribute)

    def get_context(self):
        return {
            'field': self,
            'attributes': self.attributes,
            'id': self.get_id(),
            'html_name': self.get_html_name(),
            'multiple': self.is_multiple(),
        }

    def render(self, context=None, request=None):
        self.check_required_attributes()
        data = dict(context or {})
        data.update(self.get_context())
        return render_to_string(self.view, data, request=request)

    def __str__(self):
        return self.render()
