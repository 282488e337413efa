"""
Dashboard URL configuration.

Routes are collected by RouteProvider: the system routes plus the host route
module named by PLATFORM['routes'].
"""
from core.platform.container import get_container
from core.platform.macros import Router

urlpatterns = get_container().make(Router).urlpatterns
