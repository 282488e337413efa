from core.screen.fields.relation import Relation

__all__ = [
    'Relation',
]
