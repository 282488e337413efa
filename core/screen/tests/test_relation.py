from decimal import Decimal
from types import SimpleNamespace

from django.core import signing
from django.core.exceptions import ImproperlyConfigured
from django.test import TestCase

from core.platform.models import Role
from core.screen.field import FieldRequiredAttributeError
from core.screen.fields import Relation
from core.screen.fields.relation import SIGNING_SALT
from core.screen.sources import Option
from core.screen.tests.exemplar import RECORD_UUID, AjaxRecord, PlainRecord, UuidRecord


class RelationModelSourceTests(TestCase):
    """Relation field backed by a model"""

    @classmethod
    def setUpTestData(cls):
        cls.roles = [Role.objects.create(name=f'Role {i}', slug=f'role-{i}') for i in range(10)]

    def test_instance(self):
        """A model instance resolves to one option labelled with its attribute"""
        current = self.roles[3]

        select = (
            Relation.make('role')
            .title('Select role')
            .from_model(Role, 'name')
            .value(current)
        )

        with self.assertNumQueries(0):
            options = select.resolve_options()
        self.assertEqual(options, [Option(current.pk, current.name)])

        view = select.render()
        self.assertIn(current.name, view)
        self.assertIn('Select role', view)
        self.assertIn('name="role"', view)
        self.assertFalse(select.is_multiple())

    def test_instance_key(self):
        """A primary key is looked up in the data source"""
        current = self.roles[6]

        select = (
            Relation.make('role')
            .title('Select roles')
            .from_model(Role, 'name')
            .value(current.id)
        )

        with self.assertNumQueries(1):
            options = select.resolve_options()
        self.assertEqual(options, [Option(current.pk, current.name)])

        view = select.render()
        self.assertIn(current.name, view)
        self.assertIn('Select roles', view)

    def test_multiple_instances(self):
        """A collection of models gives one option per model"""
        current = [self.roles[2], self.roles[5]]

        select = Relation.make('role.').from_model(Role, 'name').value(current)

        self.assertTrue(select.is_multiple())
        self.assertEqual(
            select.resolve_options(),
            [Option(current[0].pk, current[0].name), Option(current[1].pk, current[1].name)]
        )

        view = select.render()
        self.assertIn(current[0].name, view)
        self.assertIn(current[1].name, view)
        self.assertIn('name="role[]"', view)
        self.assertIn('multiple', view)

    def test_multiple_instances_queryset(self):
        """A queryset value is treated as a collection of models"""
        queryset = Role.objects.filter(pk__in=[self.roles[1].pk, self.roles[4].pk])

        select = Relation.make('role.').from_model(Role, 'name').value(queryset)

        self.assertEqual(
            [option.label for option in select.resolve_options()],
            ['Role 1', 'Role 4']
        )

    def test_multiple_keys(self):
        """A list of keys resolves in one query, in data source order"""
        current = [self.roles[7], self.roles[1]]

        select = Relation.make('role.').from_model(Role, 'name').value([current[0].id, current[1].id])

        with self.assertNumQueries(1):
            options = select.resolve_options()

        # Role ordering is by name, not by input order
        self.assertEqual(options, [Option(current[1].pk, 'Role 1'), Option(current[0].pk, 'Role 7')])

        view = select.render()
        self.assertIn(current[0].name, view)
        self.assertIn(current[1].name, view)

    def test_multiple_keys_equal_independent_lookups(self):
        """Batch resolution gives the same options as resolving each key"""
        keys = [self.roles[8].id, self.roles[0].id]

        batch = Relation.make('role.').from_model(Role, 'name').value(keys).resolve_options()
        single = [
            option
            for key in keys
            for option in Relation.make('role').from_model(Role, 'name').value(key).resolve_options()
        ]

        self.assertEqual(sorted(batch), sorted(single))
        self.assertEqual(len(batch), 2)

    def test_duplicate_keys_resolve_once(self):
        """One option per distinct key"""
        current = self.roles[2]

        select = Relation.make('role.').from_model(Role, 'name').value([current.id, current.id, str(current.id)])

        self.assertEqual(select.resolve_options(), [Option(current.pk, current.name)])

    def test_duplicate_instances_resolve_once(self):
        current = self.roles[2]

        select = Relation.make('role.').from_model(Role, 'name').value([current, current])

        self.assertEqual(select.resolve_options(), [Option(current.pk, current.name)])

    def test_missing_key_is_dropped(self):
        """Unknown keys give no option and no error"""
        select = Relation.make('role').from_model(Role, 'name').value(999999)
        self.assertEqual(select.resolve_options(), [])

        select = Relation.make('role.').from_model(Role, 'name').value([self.roles[0].id, 999999])
        self.assertEqual(select.resolve_options(), [Option(self.roles[0].pk, 'Role 0')])

    def test_invalid_key_is_dropped(self):
        """A key the key field can't hold gives no option and no error"""
        select = Relation.make('role.').from_model(Role, 'name').value(['abc', self.roles[0].id])
        self.assertEqual(select.resolve_options(), [Option(self.roles[0].pk, 'Role 0')])

        select = Relation.make('role').from_model(Role, 'name').value('abc')
        with self.assertNumQueries(0):
            self.assertEqual(select.resolve_options(), [])

    def test_string_key(self):
        """Submitted form values arrive as strings"""
        current = self.roles[3]

        select = Relation.make('role.').from_model(Role, 'name').value([str(current.id)])

        self.assertEqual(select.resolve_options(), [Option(current.pk, current.name)])

    def test_empty_value(self):
        for value in (None, '', []):
            select = Relation.make('role').title('Role').from_model(Role, 'name').value(value)
            self.assertEqual(select.resolve_options(), [])

        view = Relation.make('role').title('Role').from_model(Role, 'name').render()
        self.assertIn('Select...', view)

    def test_custom_key(self):
        """Options can be keyed by another attribute than the primary key"""
        current = self.roles[4]

        select = Relation.make('role').from_model(Role, 'name', key='slug').value('role-4')

        self.assertEqual(select.resolve_options(), [Option('role-4', current.name)])

    def test_model_label_string(self):
        select = Relation.make('role').from_model('platform.Role', 'name').value(self.roles[5].id)

        self.assertEqual(select.resolve_options(), [Option(self.roles[5].pk, 'Role 5')])

    def test_apply_scope(self):
        """The scope names a queryset method applied to the lookup"""
        select = (
            Relation.make('role')
            .from_model(Role, 'name')
            .apply_scope('none')
            .value(self.roles[0].id)
        )

        self.assertEqual(select.resolve_options(), [])

    def test_signed_source(self):
        select = Relation.make('role').from_model(Role, 'name')

        descriptor = signing.loads(select.signed_source(), salt=SIGNING_SALT)

        self.assertEqual(descriptor, {
            'type': 'model',
            'target': 'platform.Role',
            'name': 'name',
            'key': 'id',
            'scope': None,
        })
        self.assertIn('data-relation-source="', select.render())

    def test_render_without_source(self):
        with self.assertRaises(FieldRequiredAttributeError):
            Relation.make('role').render()

    def test_render_without_name(self):
        with self.assertRaises(FieldRequiredAttributeError) as ctx:
            Relation.make().from_model(Role, 'name').render()
        self.assertEqual(ctx.exception.attribute, 'name')


class RelationClassSourceTests(TestCase):
    """Relation field backed by a remote class"""

    def test_ajax_class(self):
        select = Relation.make('role.').from_class(AjaxRecord, 'text').value(1)

        self.assertEqual(select.resolve_options(), [Option(1, 'Record 1')])
        self.assertIn('Record 1', select.render())

    def test_ajax_class_keys(self):
        select = Relation.make('role.').from_class(AjaxRecord, 'text').value([3, 1, 3])

        self.assertEqual(select.resolve_options(), [Option(3, 'Record 3'), Option(1, 'Record 1')])

    def test_ajax_class_record(self):
        """A record value needs no lookup"""
        select = Relation.make('record').from_class(AjaxRecord, 'text').value({'id': 42, 'text': 'Record 42'})

        self.assertEqual(select.resolve_options(), [Option(42, 'Record 42')])

    def test_ajax_class_missing_record(self):
        select = Relation.make('role.').from_class(AjaxRecord, 'text').value([2, 100])

        self.assertEqual(select.resolve_options(), [Option(2, 'Record 2')])

    def test_ajax_class_import_path(self):
        select = Relation.make('role').from_class('core.screen.tests.exemplar.AjaxRecord', 'text').value(4)

        self.assertEqual(select.resolve_options(), [Option(4, 'Record 4')])

    def test_class_without_handler(self):
        class NotASource:
            pass

        with self.assertRaises(ImproperlyConfigured):
            Relation.make('role').from_class(NotASource, 'text')

    def test_apply_scope_needs_model_source(self):
        with self.assertRaises(TypeError):
            Relation.make('role').from_class(AjaxRecord, 'text').apply_scope('active')

    def test_uuid_key(self):
        """A UUID is a key passed to the handler, not a record"""
        select = Relation.make('record').from_class(UuidRecord, 'text').value(RECORD_UUID)

        self.assertEqual(select.resolve_options(), [Option(RECORD_UUID, 'Uuid record')])

    def test_decimal_key(self):
        select = Relation.make('record').from_class(PlainRecord, 'text').value(Decimal('3'))

        self.assertEqual(select.resolve_options(), [Option(Decimal('3'), 'Plain 3')])

    def test_object_record(self):
        """An object with the key attribute is a record"""
        record = SimpleNamespace(id=9, text='Record 9')

        select = Relation.make('record').from_class(AjaxRecord, 'text').value(record)

        self.assertEqual(select.resolve_options(), [Option(9, 'Record 9')])
