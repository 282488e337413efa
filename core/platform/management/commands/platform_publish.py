"""
Publish dashboard files into the project.

Usage:
    python manage.py platform_publish
    python manage.py platform_publish --tag config --tag views
    python manage.py platform_publish --tag platform-assets --force
"""
from django.core.management.base import BaseCommand, CommandError

from core.platform.container import get_container
from core.platform.publishing import Publisher


class Command(BaseCommand):
    help = 'Publish the dashboard migrations, config, views, assets and stubs'

    def add_arguments(self, parser):
        parser.add_argument(
            '--tag',
            action='append',
            dest='tag',
            help='Publish only this group (repeatable)',
        )
        parser.add_argument(
            '--force',
            action='store_true',
            help='Overwrite files that already exist',
        )

    def handle(self, *args, **options):
        publisher = get_container().make(Publisher)
        groups = options['tag']

        unknown = sorted(set(groups or []) - set(publisher.groups))
        if unknown:
            raise CommandError(
                f"Unknown group(s): {', '.join(unknown)}. Available: {', '.join(sorted(publisher.groups))}"
            )

        written = publisher.publish(groups, force=options['force'])

        for path in written:
            self.stdout.write(f'  Copied {path}')
        if written:
            self.stdout.write(self.style.SUCCESS(f'Publishing complete, {len(written)} file(s) copied.'))
        else:
            self.stdout.write(self.style.WARNING('Nothing to publish (use --force to overwrite).'))
