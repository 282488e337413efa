from core.platform.generators import GeneratorCommand


class Command(GeneratorCommand):
    help = 'Create a new rows layout class'
    type = 'Rows'
    stub = 'rows.stub'
    default_package = 'dashboard.layouts'
