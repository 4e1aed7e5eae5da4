"""
Scaffolding Property Metadata - Reflected Class Properties
Describes an attribute of a plain Python class (or the class behind a mapped
entity) from its type annotation and any markers attached to it.

Markers are collected from three places, in this order:
- Annotated extras: ``age: Annotated[int, ScaffoldColumn(False)]``
- Dataclass field metadata: ``field(metadata={"scaffold": False})``
- SQLAlchemy attribute info: ``mapped_column(info={"scaffold": False})``
"""

import dataclasses
import inspect
import sys
import typing
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Annotated, List, Optional, Tuple, Type, TypeVar

from sqlalchemy.orm import DynamicMapped, Mapped, WriteOnlyMapped

from scaffolding.utils.config import SCAFFOLD_MARKER_KEY
from scaffolding.utils.logger import logger, log_precondition_violation
from .errors import PreconditionViolation
from .markers import ScaffoldColumn, find_marker

M = TypeVar('M')

_MAPPED_WRAPPERS = (Mapped, WriteOnlyMapped, DynamicMapped)


@dataclass
class ReflectedProperty:
    """
    A named attribute of a class with its value type and markers.

    Attributes:
        name: Attribute name
        value_type: Annotated value type with Mapped[]/Annotated[] removed,
            or None when the attribute carries no annotation
        markers: Marker objects attached to the attribute
    """
    name: str
    value_type: Any
    markers: Tuple[object, ...] = field(default_factory=tuple)

    def get_marker(self, marker_type: Type[M]) -> Optional[M]:
        """Return the first marker of marker_type, or None."""
        return find_marker(self.markers, marker_type)


def _evaluate_annotation(annotation: Any, klass: type) -> Any:
    """Evaluate one string annotation in the namespace of its declaring class."""
    if not isinstance(annotation, str):
        return annotation
    module = sys.modules.get(klass.__module__)
    globalns = dict(vars(module)) if module is not None else {}
    try:
        # same namespaces inspect.get_annotations(eval_str=True) uses
        return eval(annotation, globalns, dict(vars(klass)))
    except (NameError, SyntaxError, TypeError, AttributeError) as e:
        logger.debug("Keeping raw annotation", extra={
            "event_type": "annotation_eval_fallback",
            "owner": klass.__qualname__,
            "annotation": annotation,
            "error_type": type(e).__name__,
        })
        return annotation


def _declared_annotation(owner: type, name: str):
    """
    Find the annotation for name along the MRO.

    An unresolvable sibling annotation (e.g. a TYPE_CHECKING-only import)
    does not affect name: when the class cannot be evaluated as a whole,
    only the requested annotation is evaluated.

    Returns:
        (found, annotation); string annotations that cannot be evaluated
        are returned unevaluated
    """
    for klass in owner.__mro__:
        try:
            annotations = inspect.get_annotations(klass, eval_str=True)
        except (NameError, SyntaxError, TypeError, AttributeError):
            raw = inspect.get_annotations(klass)
            if name in raw:
                return True, _evaluate_annotation(raw[name], klass)
            continue
        if name in annotations:
            return True, annotations[name]
    return False, None


def _unwrap_annotation(annotation: Any) -> Tuple[Any, List[object]]:
    """Strip Mapped[...] and Annotated[...] layers, collecting Annotated extras."""
    markers: List[object] = []
    while True:
        origin = typing.get_origin(annotation)
        if origin is Annotated:
            markers.extend(annotation.__metadata__)
            annotation = annotation.__origin__
        elif isinstance(origin, type) and issubclass(origin, _MAPPED_WRAPPERS):
            annotation = typing.get_args(annotation)[0]
        else:
            return annotation, markers


def _metadata_markers(owner: type, name: str) -> List[object]:
    """Markers expressed as a key in dataclass metadata or SQLAlchemy info."""
    markers: List[object] = []

    if dataclasses.is_dataclass(owner):
        for dc_field in dataclasses.fields(owner):
            if dc_field.name == name and SCAFFOLD_MARKER_KEY in dc_field.metadata:
                markers.append(ScaffoldColumn(bool(dc_field.metadata[SCAFFOLD_MARKER_KEY])))

    # Mapped attributes expose the Column's info dict
    info = getattr(getattr(owner, name, None), 'info', None)
    if isinstance(info, Mapping) and SCAFFOLD_MARKER_KEY in info:
        markers.append(ScaffoldColumn(bool(info[SCAFFOLD_MARKER_KEY])))

    return markers


def reflect_property(owner: type, name: str) -> Optional[ReflectedProperty]:
    """
    Reflect a single attribute of a class.

    Args:
        owner: Class declaring (or inheriting) the attribute
        name: Attribute name

    Returns:
        ReflectedProperty, or None if the class neither annotates nor
        defines an attribute with that name

    Raises:
        PreconditionViolation: If owner is None or name is empty
    """
    if owner is None or not name:
        reason = "owner is None" if owner is None else "name is empty"
        log_precondition_violation("reflection", reason)
        raise PreconditionViolation(f"Cannot reflect property: {reason}")

    found, annotation = _declared_annotation(owner, name)
    if not found and not hasattr(owner, name):
        return None

    value_type, markers = (None, []) if not found else _unwrap_annotation(annotation)
    markers.extend(_metadata_markers(owner, name))

    return ReflectedProperty(name=name, value_type=value_type, markers=tuple(markers))
