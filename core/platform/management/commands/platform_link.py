"""
Link the dashboard static files into STATIC_ROOT.

Usage: python manage.py platform_link
"""
from pathlib import Path

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

PLATFORM_STATIC = Path(__file__).resolve().parents[2] / 'static' / 'platform'


class Command(BaseCommand):
    help = 'Create a symbolic link from STATIC_ROOT/platform to the dashboard static files'

    def handle(self, *args, **options):
        static_root = getattr(settings, 'STATIC_ROOT', None)
        if not static_root:
            raise CommandError('STATIC_ROOT is not set')

        link = Path(static_root) / 'platform'
        if link.is_symlink() or link.exists():
            self.stdout.write(self.style.WARNING(f'The "{link}" directory already exists.'))
            return

        link.parent.mkdir(parents=True, exist_ok=True)
        link.symlink_to(PLATFORM_STATIC, target_is_directory=True)
        self.stdout.write(self.style.SUCCESS(f'The [{link}] directory has been linked.'))
