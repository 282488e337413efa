"""
Screens, layouts and relation sources used by the screen tests.
"""
from uuid import UUID

from core.platform.models import Role
from core.screen.fields import Relation
from core.screen.layouts import Rows, Table, TD
from core.screen.screen import Screen


class AjaxRecord:
    """Class relation source: records 1..5 labelled 'Record <n>'."""
    records = {n: {'id': n, 'text': f'Record {n}'} for n in range(1, 6)}

    def handler(self, key):
        return self.records.get(int(key))

    def search(self, term, limit):
        term = term.lower()
        return [record for record in self.records.values() if term in record['text'].lower()][:limit]


RECORD_UUID = UUID('5f0c2a1e-8d3b-4c6a-9e21-7b4d0f3a9c11')


class UuidRecord:
    """Class relation source keyed by UUID."""

    def handler(self, key):
        if key == RECORD_UUID:
            return {'id': key, 'text': 'Uuid record'}
        return None


class PlainRecord:
    """Class relation source without search support."""

    def handler(self, key):
        return {'id': key, 'text': f'Plain {key}'}


class RoleRows(Rows):
    title = 'Role settings'

    def fields(self):
        return [
            Relation.make('role').title('Default role').from_model(Role, 'name'),
        ]


class RoleTable(Table):
    target = 'roles'

    def columns(self):
        return [
            TD.make('name'),
            TD.make('slug').render(lambda role: role.slug.upper()),
        ]


class RoleScreen(Screen):
    name = 'Roles'
    description = 'Manage roles'

    def query(self, request, **kwargs):
        roles = Role.objects.all()
        return {'roles': roles, 'role': roles.first()}

    def layout(self):
        return [RoleRows(), RoleTable()]

    def rename(self, request, argument=None):
        role = Role.objects.get(pk=argument)
        role.name = request.POST['name']
        role.save()


class SecretScreen(Screen):
    name = 'Secret'
    permission = 'platform.secret'
