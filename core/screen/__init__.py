"""
Screen building blocks: fields, layouts and the Screen view.

Don't import views or models here; import from the submodules:
    from core.screen.fields import Relation
    from core.screen.screen import Screen
"""
