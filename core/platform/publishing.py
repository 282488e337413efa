"""
File publishing.

Providers register groups of (source, destination) paths; `platform_publish`
copies them into the host project. Relative destinations are resolved
against settings.BASE_DIR when publishing.
"""
import logging
import shutil
from pathlib import Path

from django.conf import settings

logger = logging.getLogger(__name__)


def resolve_destination(destination):
    destination = Path(destination)
    if destination.is_absolute():
        return destination
    return Path(settings.BASE_DIR) / destination


class Publisher:
    """
    Publishable path groups.

    Usage:
        publisher.publishes({PACKAGE_DIR / 'config' / 'platform.py': 'config/platform.py'}, 'config')
        publisher.publish(['config'])
    """

    def __init__(self):
        self.groups = {}

    def publishes(self, paths, group):
        """Register `paths` (source -> destination) under `group`."""
        mapping = self.groups.setdefault(group, {})
        for source, destination in paths.items():
            mapping[Path(source)] = Path(destination)
        return self

    def paths_for(self, groups=None):
        """(source, destination) pairs of the given groups, all groups when None."""
        names = list(self.groups) if groups is None else groups
        pairs = []
        for name in names:
            if name not in self.groups:
                raise KeyError(f"Unknown publish group '{name}'")
            pairs.extend(self.groups[name].items())
        return pairs

    def publish(self, groups=None, force=False):
        """
        Copy the registered files into the host project.

        Existing destination files are kept unless `force`. A missing source
        raises FileNotFoundError.

        Returns:
            List of destination paths written
        """
        written = []
        for source, destination in self.paths_for(groups):
            target = resolve_destination(destination)
            if source.is_dir():
                written.extend(self._publish_directory(source, target, force))
            elif source.is_file():
                if self._copy(source, target, force):
                    written.append(target)
            else:
                raise FileNotFoundError(f"Can't publish '{source}': no such file or directory")
        return written

    def _publish_directory(self, source, target, force):
        written = []
        for file in sorted(source.rglob('*')):
            if not file.is_file() or '__pycache__' in file.parts:
                continue
            destination = target / file.relative_to(source)
            if self._copy(file, destination, force):
                written.append(destination)
        return written

    def _copy(self, source, destination, force):
        if destination.exists() and not force:
            logger.debug(f"Skipped {destination}, already exists")
            return False
        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(source, destination)
        logger.info(f"Published {source} -> {destination}")
        return True
