"""
URL configuration for dashboard_project project.

The dashboard is mounted under the PLATFORM['prefix'] path; its routes are
assembled by core.platform.providers.route.RouteProvider.
"""
from django.contrib import admin
from django.urls import path, include

from core.platform.conf import platform_settings

urlpatterns = [
    path('admin/', admin.site.urls),
    path(f"{platform_settings.prefix.strip('/')}/", include('core.platform.urls')),
]
