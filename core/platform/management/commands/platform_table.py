from core.platform.generators import GeneratorCommand


class Command(GeneratorCommand):
    help = 'Create a new table layout class'
    type = 'Table'
    stub = 'table.stub'
    default_package = 'dashboard.layouts'
