from core.platform.generators import GeneratorCommand


class Command(GeneratorCommand):
    help = 'Create a new selection layout class'
    type = 'Selection'
    stub = 'selection.stub'
    default_package = 'dashboard.layouts'
