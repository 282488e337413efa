from core.platform.generators import GeneratorCommand


class Command(GeneratorCommand):
    help = 'Create a new chart layout class'
    type = 'Chart'
    stub = 'chart.stub'
    default_package = 'dashboard.layouts'
