"""
Screen: a dashboard page built from layouts.

    class RoleScreen(Screen):
        name = 'Roles'
        permission = 'platform.systems.roles'

        def query(self, request, **kwargs):
            return {'roles': Role.objects.all()}

        def layout(self):
            return [RoleListLayout()]

        def save(self, request, argument=None):
            ...
            return redirect(request.path)

Mount it with the `screen` route macro:

    router.screen('roles', RoleScreen, 'platform.systems.roles')

GET renders the layouts. POST to `<url>/<method>/` (or `<url>/<method>/<argument>/`)
calls the public screen method `<method>(request, argument)`.
"""
import logging

from django.contrib.auth.views import redirect_to_login
from django.core.exceptions import PermissionDenied
from django.http import Http404, HttpResponseRedirect
from django.shortcuts import render
from django.views import View

from core.platform.access import has_access
from core.platform.conf import platform_settings
from core.platform.container import get_container
from core.platform.dashboard import Dashboard

logger = logging.getLogger(__name__)


class Screen(View):
    name = None
    description = None
    permission = None
    template_name = 'platform/screen.html'

    # View methods that can never be called through the <method> segment.
    reserved_methods = {
        'query', 'layout', 'dispatch', 'setup', 'get', 'post', 'options', 'http_method_not_allowed',
        'as_view', 'check_access', 'build', 'get_context_data', 'call_method',
    }

    def query(self, request, **kwargs):
        return {}

    def layout(self):
        return []

    def dispatch(self, request, *args, **kwargs):
        if platform_settings.auth and not request.user.is_authenticated:
            return redirect_to_login(request.get_full_path())
        self.check_access(request)
        return super().dispatch(request, *args, **kwargs)

    def check_access(self, request):
        if self.permission and not has_access(request.user, self.permission):
            raise PermissionDenied(f"Missing permission '{self.permission}'")

    def build(self, request, query):
        return [layout.build(query, request=request) for layout in self.layout()]

    def get_context_data(self, request, **kwargs):
        query = self.query(request, **kwargs)
        return {
            'screen': self,
            'name': self.name,
            'description': self.description,
            'layouts': self.build(request, query),
            'main_menu': get_container().make(Dashboard).menu.items('Main', request.user),
        }

    def get(self, request, method=None, argument=None):
        return render(request, self.template_name, self.get_context_data(request, method=method, argument=argument))

    def post(self, request, method=None, argument=None):
        if not method:
            return HttpResponseRedirect(request.path)
        return self.call_method(request, method, argument)

    def call_method(self, request, method, argument=None):
        handler = getattr(self, method, None)
        if method.startswith('_') or method in self.reserved_methods or not callable(handler):
            raise Http404(f"Screen {type(self).__name__} has no method '{method}'")
        logger.debug(f"Calling {type(self).__name__}.{method}({argument!r})")
        response = handler(request, argument)
        if response is None:
            return HttpResponseRedirect(request.META.get('HTTP_REFERER') or request.path)
        return response
