"""
Base for the scaffolding commands (platform_screen, platform_table, ...).

A generator renders a stub from core/platform/stubs with the Django
template engine and writes it to <BASE_DIR>/<package path>/<snake_name>.py.
"""
import re
from pathlib import Path

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from django.template import Context, Engine

PLATFORM_PATH = Path(__file__).resolve().parent


def class_name_from(name):
    """'role_list' / 'role-list' / 'RoleList' -> 'RoleList'"""
    parts = [part for part in re.split(r'[^0-9A-Za-z]+', name) if part]
    if not parts:
        raise CommandError(f"'{name}' is not a valid class name")
    class_name = ''.join(part[:1].upper() + part[1:] for part in parts)
    if not class_name.isidentifier():
        raise CommandError(f"'{name}' is not a valid class name")
    return class_name


def snake_case(class_name):
    return re.sub(r'(?<=[a-z0-9])(?=[A-Z])', '_', class_name).lower()


class GeneratorCommand(BaseCommand):
    # Human name of what is generated, e.g. 'Screen'
    type = None
    # Stub file name under core/platform/stubs
    stub = None
    # Dotted package the class is written to, relative to BASE_DIR
    default_package = None

    def add_arguments(self, parser):
        parser.add_argument('name', help=f'Class name of the {self.type}')
        parser.add_argument(
            '--package',
            default=self.default_package,
            help=f'Dotted package to write into (default: {self.default_package})',
        )
        parser.add_argument(
            '--force',
            action='store_true',
            help='Overwrite the file if it already exists',
        )

    def handle(self, *args, **options):
        class_name = class_name_from(options['name'])
        target = self.get_path(options['package'], class_name)

        if target.exists() and not options['force']:
            raise CommandError(f'{self.type} already exists: {target}')

        self.make_package(target.parent)
        target.write_text(self.build_class(class_name), encoding='utf-8')

        self.stdout.write(self.style.SUCCESS(f'{self.type} created successfully: {target}'))
        return None

    def get_path(self, package, class_name):
        return Path(settings.BASE_DIR).joinpath(*package.split('.')) / f'{snake_case(class_name)}.py'

    def make_package(self, directory):
        """Create `directory` and every missing __init__.py up to BASE_DIR."""
        base_dir = Path(settings.BASE_DIR)
        directory.mkdir(parents=True, exist_ok=True)
        current = directory
        while current != base_dir and base_dir in current.parents:
            (current / '__init__.py').touch(exist_ok=True)
            current = current.parent

    def build_class(self, class_name):
        stub = (PLATFORM_PATH / 'stubs' / self.stub).read_text(encoding='utf-8')
        template = Engine().from_string(stub)
        context = Context({
            'class_name': class_name,
            'title': re.sub(r'(?<=[a-z0-9])(?=[A-Z])', ' ', class_name),
        }, autoescape=False)
        return template.render(context)
