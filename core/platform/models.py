"""
Dashboard platform models.
"""
from django.conf import settings
from django.db import models
from django.utils.text import slugify


class Role(models.Model):
    """
    A named set of dashboard permissions assigned to users.

    `permissions` maps permission slugs (as registered on the Dashboard) to
    booleans, e.g. {'platform.systems.roles': True}.
    """
    name = models.CharField(max_length=100, unique=True, db_index=True)
    slug = models.SlugField(max_length=100, unique=True)
    permissions = models.JSONField(default=dict, blank=True)
    users = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        related_name='platform_roles',
        db_table='platform_role_users',
        blank=True,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'platform_roles'
        verbose_name = 'Role'
        verbose_name_plural = 'Roles'
        ordering = ['name']

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.name)
        super().save(*args, **kwargs)

    def has_access(self, permission):
        return bool(self.permissions.get(permission, False))

    def grant(self, *permissions):
        """Grant permission slugs and save."""
        for permission in permissions:
            self.permissions[permission] = True
        self.save(update_fields=['permissions', 'updated_at'])
        return self
