"""
Permission checks for dashboard users.

Superusers pass every check. Other users pass when one of their platform
roles grants the permission slug.
"""


def has_access(user, permission):
    if user is None or not user.is_authenticated or not user.is_active:
        return False
    if user.is_superuser:
        return True
    return any(role.has_access(permission) for role in user.platform_roles.all())
