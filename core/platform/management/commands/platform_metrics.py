from core.platform.generators import GeneratorCommand


class Command(GeneratorCommand):
    help = 'Create a new metrics layout class'
    type = 'Metric'
    stub = 'metrics.stub'
    default_package = 'dashboard.layouts'
