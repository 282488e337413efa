from django.contrib.auth import get_user_model

from core.platform.models import Role
from core.screen.fields import Relation
from core.screen.layouts import Rows, Table, TD
from core.screen.screen import Screen


class ExampleRows(Rows):
    title = 'Roles'

    def fields(self):
        return [
            Relation.make('roles.')
            .title('Roles')
            .from_model(Role, 'name')
            .help('Start typing to search roles'),
        ]


class ExampleTable(Table):
    target = 'users'

    def columns(self):
        return [
            TD.make('pk', 'ID'),
            TD.make('username'),
            TD.make('email'),
        ]


class ExampleScreen(Screen):
    name = 'Example screen'
    description = 'Sample screen generated by platform_install'

    def query(self, request, **kwargs):
        return {
            'roles': Role.objects.all()[:5],
            'users': get_user_model().objects.order_by('-pk')[:10],
        }

    def layout(self):
        return [
            ExampleRows(),
            ExampleTable(),
        ]
