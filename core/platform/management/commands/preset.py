"""
Install a frontend preset.

Usage: python manage.py preset platform
       python manage.py preset platform-source
"""
from django.core.management.base import BaseCommand, CommandError

from core.platform.container import get_container
from core.platform.macros import PRESET_MACROS


class Command(BaseCommand):
    help = 'Swap the frontend scaffolding for the dashboard one'

    def add_arguments(self, parser):
        parser.add_argument('type', help='Preset name')

    def handle(self, *args, **options):
        presets = get_container().make(PRESET_MACROS)
        name = options['type']

        if not presets.has(name):
            raise CommandError(f"Invalid preset '{name}'. Available: {', '.join(presets.names())}")

        presets.call(name, self)
