"""
Scaffolding Property Metadata
Per-property metadata (keys, enums, store generation, scaffold flag) for
code generation over SQLAlchemy models and plain Python classes.
"""

from .models import (
    PreconditionViolation,
    PropertyMetadata,
    ReflectedProperty,
    ScaffoldColumn,
    reflect_property,
)

__all__ = [
    'PreconditionViolation',
    'PropertyMetadata',
    'ReflectedProperty',
    'ScaffoldColumn',
    'reflect_property',
]
