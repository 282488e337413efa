"""
Dashboard routes.

Every route registered here is mounted under PLATFORM['prefix'] and handled
by a Screen. Generate new screens with `python manage.py platform_screen`.
"""
from dashboard.screens.example_screen import ExampleScreen


def register(router):
    router.screen('example', ExampleScreen, 'platform.example')
