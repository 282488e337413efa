from core.platform.macros import MacroRegistry, Router, screen_route
from core.screen.tests.exemplar import RoleScreen, SecretScreen

macros = MacroRegistry('route')
macros.register('screen', screen_route)

router = Router(macros)
router.screen('roles', RoleScreen, 'test.roles')
router.screen('secret', SecretScreen, 'test.secret')

urlpatterns = router.urlpatterns
