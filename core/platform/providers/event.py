import logging

from django.contrib.auth.signals import user_logged_in
from django.db.models.signals import post_delete

from core.platform.providers.base import ServiceProvider

logger = logging.getLogger(__name__)


def log_login(sender, request, user, **kwargs):
    logger.info(f"User {user.pk} ({user.get_username()}) logged in")


def log_role_deleted(sender, instance, **kwargs):
    logger.warning(f"Role '{instance.slug}' deleted")


class EventProvider(ServiceProvider):
    """Connects the audit log receivers."""

    def boot(self):
        from core.platform.models import Role

        user_logged_in.connect(log_login, dispatch_uid='platform.log_login')
        post_delete.connect(log_role_deleted, sender=Role, dispatch_uid='platform.log_role_deleted')
