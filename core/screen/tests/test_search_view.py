from django.contrib.auth import get_user_model
from django.test import TestCase, override_settings
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from core.platform.models import Role
from core.screen.fields import Relation
from core.screen.tests.exemplar import AjaxRecord, PlainRecord

User = get_user_model()


class RelationSearchViewTests(TestCase):
    """Tests for the relation AJAX search endpoint"""

    @classmethod
    def setUpTestData(cls):
        cls.user = User.objects.create_user(username='staff', password='testpass123')
        cls.roles = [Role.objects.create(name=f'Role {i}', slug=f'role-{i}') for i in range(6)]
        Role.objects.create(name='Accountant', slug='accountant')

    def setUp(self):
        self.client = APIClient()
        self.client.force_authenticate(user=self.user)
        self.url = reverse('platform.systems.relation')

    def test_search_model_source(self):
        source = Relation.make('role').from_model(Role, 'name').signed_source()

        response = self.client.post(self.url, {'source': source, 'search': 'count'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        body = response.json()
        self.assertEqual(body['status'], 'success')
        self.assertEqual(body['data'], [{'id': Role.objects.get(slug='accountant').pk, 'text': 'Accountant'}])

    def test_search_form_encoded(self):
        source = Relation.make('role').from_model(Role, 'name').signed_source()

        response = self.client.post(self.url, {'source': source, 'search': 'Role 3'})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([item['text'] for item in response.json()['data']], ['Role 3'])

    @override_settings(PLATFORM={'relation': {'search_limit': 3}})
    def test_search_limit(self):
        source = Relation.make('role').from_model(Role, 'name').signed_source()

        response = self.client.post(self.url, {'source': source, 'search': 'Role'}, format='json')

        self.assertEqual(len(response.json()['data']), 3)

    def test_search_scope(self):
        source = Relation.make('role').from_model(Role, 'name').apply_scope('none').signed_source()

        response = self.client.post(self.url, {'source': source, 'search': ''}, format='json')

        self.assertEqual(response.json()['data'], [])

    def test_search_class_source(self):
        source = Relation.make('record').from_class(AjaxRecord, 'text').signed_source()

        response = self.client.post(self.url, {'source': source, 'search': 'record 2'}, format='json')

        self.assertEqual(response.json()['data'], [{'id': 2, 'text': 'Record 2'}])

    def test_search_class_without_search(self):
        source = Relation.make('record').from_class(PlainRecord, 'text').signed_source()

        response = self.client.post(self.url, {'source': source, 'search': 'x'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json()['data'], [])

    def test_tampered_source(self):
        source = Relation.make('role').from_model(Role, 'name').signed_source()

        with self.assertLogs('core.screen.views', 'WARNING'):
            response = self.client.post(self.url, {'source': source + 'x', 'search': ''}, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        body = response.json()
        self.assertEqual(body['status'], 'error')
        self.assertIn('Invalid relation source', body['message'])

    def test_missing_source(self):
        with self.assertLogs('core.screen.views', 'WARNING'):
            response = self.client.post(self.url, {'search': 'Role'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_requires_authentication(self):
        source = Relation.make('role').from_model(Role, 'name').signed_source()

        response = APIClient().post(self.url, {'source': source, 'search': ''}, format='json')

        self.assertIn(response.status_code, (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN))
        self.assertEqual(response.json()['status'], 'error')

    def test_search_on_non_field_attribute(self):
        """A display attribute that is not a database field can't be searched"""
        source = Relation.make('role').from_model(Role, 'display_label').signed_source()

        with self.assertLogs('core.screen.views', 'WARNING'):
            response = self.client.post(self.url, {'source': source, 'search': 'Role'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('display_label', response.json()['message'])
