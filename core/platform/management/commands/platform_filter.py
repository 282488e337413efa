from core.platform.generators import GeneratorCommand


class Command(GeneratorCommand):
    help = 'Create a new filter class'
    type = 'Filter'
    stub = 'filter.stub'
    default_package = 'dashboard.filters'
