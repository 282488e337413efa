from core.platform.conf import platform_settings
from core.platform.container import get_container
from core.platform.dashboard import Dashboard


def dashboard(request):
    """
    Expose the Dashboard registry as `dashboard` and the configured header
    and footer partials as `platform_template`.
    """
    return {
        'dashboard': get_container().make(Dashboard),
        'platform_template': platform_settings.get('template') or {},
    }
