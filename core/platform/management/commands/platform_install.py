"""
Install the dashboard into the project.

Usage: python manage.py platform_install
"""
from django.core.management import call_command
from django.core.management.base import BaseCommand


class Command(BaseCommand):
    help = 'Publish the dashboard files, run migrations and link the static files'

    def add_arguments(self, parser):
        parser.add_argument(
            '--force',
            action='store_true',
            help='Overwrite published files that already exist',
        )

    def handle(self, *args, **options):
        self.stdout.write(self.style.WARNING('Installing the dashboard...'))

        self.stdout.write('Publishing files...')
        call_command('platform_publish', force=options['force'], stdout=self.stdout)

        self.stdout.write('Running migrations...')
        call_command('migrate', interactive=False, verbosity=0, stdout=self.stdout)

        self.stdout.write('Linking static files...')
        call_command('platform_link', stdout=self.stdout)

        self.stdout.write(self.style.SUCCESS('Dashboard installed.'))
        self.stdout.write('Create an administrator with: python manage.py platform_admin <name> <email> <password>')
