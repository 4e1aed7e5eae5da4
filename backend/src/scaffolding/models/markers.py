"""
Scaffolding Property Metadata - Property Markers
Markers attached to class attributes to steer code generation.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Type, TypeVar

M = TypeVar('M')


@dataclass(frozen=True)
class ScaffoldColumn:
    """
    Controls whether a property is scaffolded into generated views/forms.

    Usage:
        class Customer:
            internal_notes: Annotated[str, ScaffoldColumn(False)]

        class Order(Base):
            audit_token: Mapped[str] = mapped_column(info={"scaffold": False})
    """
    scaffold: bool = True


def find_marker(markers: Iterable[object], marker_type: Type[M]) -> Optional[M]:
    """Return the first marker of marker_type, or None."""
    for marker in markers:
        if isinstance(marker, marker_type):
            return marker
    return None
