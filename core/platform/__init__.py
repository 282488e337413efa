"""
Dashboard platform foundation.

Add 'core.platform' to INSTALLED_APPS and mount 'core.platform.urls' under
PLATFORM['prefix']. Shared services are bound in the app's container:

    from core.platform.container import get_container
    from core.platform.dashboard import Dashboard

    dashboard = get_container().make(Dashboard)
    dashboard.register_resource('scripts', '/static/js/dashboard.js')
"""
