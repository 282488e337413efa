"""
Service providers.

FoundationProvider is created by PlatformConfig.ready(); it binds the shared
services and registers the sub-providers listed in its `provides()`.
"""
from core.platform.providers.base import ServiceProvider
from core.platform.providers.foundation import FoundationProvider

__all__ = [
    'ServiceProvider',
    'FoundationProvider',
]
