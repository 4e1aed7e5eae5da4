# Scaffolding Property Metadata - Models Package

# Import order matters: reflection depends on markers and errors,
# property_metadata depends on all three
from .errors import PreconditionViolation
from .markers import ScaffoldColumn, find_marker
from .reflection import ReflectedProperty, reflect_property
from .property_metadata import PropertyMetadata

__all__ = [
    'PreconditionViolation',
    'ScaffoldColumn',
    'find_marker',
    'ReflectedProperty',
    'reflect_property',
    'PropertyMetadata',
]
