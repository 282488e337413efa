"""
Frontend presets, run with `python manage.py preset <name>`.

- platform: adds the dashboard build dependencies to package.json and a
  webpack config compiling the published assets.
- platform-source: publishes the asset sources (overwriting) first, then
  does the same.
"""
import json
import logging
import shutil
from pathlib import Path

from django.conf import settings
from django.core.management import call_command

logger = logging.getLogger(__name__)

PLATFORM_PATH = Path(__file__).resolve().parent

DEV_DEPENDENCIES = {
    'css-loader': '^6.8.1',
    'sass': '^1.69.5',
    'sass-loader': '^13.3.2',
    'style-loader': '^3.3.3',
    'webpack': '^5.89.0',
    'webpack-cli': '^5.1.4',
}


def update_packages(base_dir, packages=None, section='devDependencies'):
    """
    Merge `packages` into the `section` of base_dir/package.json, creating the
    file when missing. Entries are kept sorted by name.
    """
    package_file = Path(base_dir) / 'package.json'
    content = {}
    if package_file.exists():
        content = json.loads(package_file.read_text(encoding='utf-8'))

    merged = dict(content.get(section, {}))
    merged.update(packages or DEV_DEPENDENCIES)
    content[section] = dict(sorted(merged.items()))

    package_file.write_text(json.dumps(content, indent=4) + '\n', encoding='utf-8')
    logger.info(f"Updated {section} in {package_file}")
    return content


def update_webpack_configuration(base_dir):
    shutil.copyfile(PLATFORM_PATH / 'stubs' / 'webpack.config.stub', Path(base_dir) / 'webpack.config.js')


def install_platform(command):
    base_dir = settings.BASE_DIR
    update_packages(base_dir)
    update_webpack_configuration(base_dir)

    command.stdout.write(command.style.WARNING('Please run "npm install && npx webpack" to compile your fresh scaffolding.'))
    command.stdout.write(command.style.WARNING('After that, register the bundle in your AppConfig.ready():'))
    command.stdout.write(command.style.WARNING(
        "get_container().make(Dashboard).register_resource('scripts', '/static/js/dashboard.js')"
    ))
    command.stdout.write(command.style.SUCCESS('Dashboard scaffolding installed successfully.'))


def install_source(command):
    call_command('platform_publish', tag=['platform-assets'], force=True, stdout=command.stdout)

    base_dir = settings.BASE_DIR
    update_packages(base_dir)
    update_webpack_configuration(base_dir)

    command.stdout.write(command.style.WARNING('Please run "npm install && npx webpack" to compile your fresh scaffolding.'))
    command.stdout.write(command.style.SUCCESS('Dashboard source scaffolding installed successfully.'))
