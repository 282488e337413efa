"""
Create a dashboard administrator.

Usage: python manage.py platform_admin admin admin@example.com secret
"""
from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError
from django.db import IntegrityError, transaction

from core.platform.container import get_container
from core.platform.dashboard import Dashboard
from core.platform.models import Role


class Command(BaseCommand):
    help = 'Create a superuser holding every registered dashboard permission'

    def add_arguments(self, parser):
        parser.add_argument('name', help='Username')
        parser.add_argument('email', help='Email address')
        parser.add_argument('password', help='Password')

    def handle(self, *args, **options):
        User = get_user_model()
        dashboard = get_container().make(Dashboard)

        try:
            with transaction.atomic():
                user = User.objects.create_superuser(
                    options['name'],
                    email=options['email'],
                    password=options['password'],
                )
                role, _ = Role.objects.get_or_create(slug='admin', defaults={'name': 'Admin'})
                role.grant(*dashboard.permission_slugs())
                role.users.add(user)
        except IntegrityError as e:
            raise CommandError(f"User '{options['name']}' already exists") from e

        self.stdout.write(self.style.SUCCESS(f"User '{user.get_username()}' created successfully."))
