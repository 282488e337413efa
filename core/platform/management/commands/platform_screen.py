from core.platform.generators import GeneratorCommand


class Command(GeneratorCommand):
    help = 'Create a new screen class'
    type = 'Screen'
    stub = 'screen.stub'
    default_package = 'dashboard.screens'
