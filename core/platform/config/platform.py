"""
Dashboard platform configuration.

Publish this file with `python manage.py platform_publish --tag config` and
copy the keys you want to change into the PLATFORM setting of your project.
Keys missing from PLATFORM fall back to the values below.
"""

PLATFORM = {
    # URL prefix the dashboard routes are mounted under.
    'prefix': 'dashboard',

    # Require an authenticated user for every screen.
    'auth': True,

    # Route name the dashboard root URL redirects to.
    'index': 'platform.main',

    # Python module holding the host's dashboard routes. The module must
    # expose `register(router)`; it is skipped when it can't be imported.
    'routes': 'routes.platform',

    # Extra assets injected into every dashboard page.
    'resource': {
        'stylesheets': [],
        'scripts': [],
    },

    # Partial templates included at the top and bottom of every screen
    # (None leaves it out).
    'template': {
        'header': 'platform/partials/header.html',
        'footer': 'platform/partials/footer.html',
    },

    # Relation field AJAX search.
    'relation': {
        'search_limit': 10,
    },

    # Model overrides, e.g. {'role': 'myapp.CustomRole'}.
    'models': {},
}
