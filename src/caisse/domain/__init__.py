"""Domain layer base classes: Entity, ValueObject."""
from caisse.domain.entity import Entity
from caisse.domain.value_object import ValueObject

__all__ = [
    "Entity",
    "ValueObject",
]
