"""
Scaffolding Property Metadata - PropertyMetadata Record
Describes one property/column of a model for code generation.

Two factories build the record depending on how much metadata is available:
- from_model_property(): a SQLAlchemy mapped column (data context available)
- from_reflected_property(): a plain annotated class attribute (no data
  context), in which case every data-model flag is False
"""

import enum
from dataclasses import dataclass, asdict
from typing import Any, Optional

from sqlalchemy import Column
from sqlalchemy.orm import ColumnProperty
from sqlalchemy.orm.attributes import QueryableAttribute

from scaffolding.utils.logger import log_property_metadata_built, log_precondition_violation
from scaffolding.utils.type_names import get_full_type_name, get_short_type_name
from .errors import PreconditionViolation
from .markers import ScaffoldColumn
from .reflection import ReflectedProperty, reflect_property


def _violation(source: str, reason: str) -> PreconditionViolation:
    log_precondition_violation(source, reason)
    return PreconditionViolation(f"Cannot build property metadata: {reason}")


def _is_enum_type(value_type: Any) -> bool:
    return isinstance(value_type, type) and issubclass(value_type, enum.Enum)


@dataclass
class PropertyMetadata:
    """
    Code-generation metadata for a single model property.

    Fields stay mutable so callers can adjust them after construction,
    e.g. to force scaffold=False for a property.
    """
    property_name: str
    type_name: str
    short_type_name: str
    is_primary_key: bool = False
    is_foreign_key: bool = False
    is_enum: bool = False
    is_enum_flags: bool = False
    is_read_only: bool = False
    is_auto_generated: bool = False
    scaffold: bool = True

    @classmethod
    def from_reflected_property(cls, prop: Optional[ReflectedProperty]) -> 'PropertyMetadata':
        """
        Build metadata for a property of a plain class (no data context).

        Without model metadata nothing is known about keys, enums or store
        generation, so the property is treated as a writable, non-key,
        non-enum value.

        Args:
            prop: Reflected class attribute

        Returns:
            PropertyMetadata with all data-model flags False

        Raises:
            PreconditionViolation: If prop, its name or its value type is missing
        """
        if prop is None:
            raise _violation("reflection", "property descriptor is None")
        if not prop.name:
            raise _violation("reflection", "property name is empty")
        if prop.value_type is None:
            raise _violation("reflection", f"property '{prop.name}' has no value type")

        marker = prop.get_marker(ScaffoldColumn)
        metadata = cls(
            property_name=prop.name,
            type_name=get_full_type_name(prop.value_type),
            short_type_name=get_short_type_name(prop.value_type),
            scaffold=not (marker is not None and not marker.scaffold),
        )
        log_property_metadata_built(metadata, "reflection")
        return metadata

    @classmethod
    def from_attribute(cls, owner: type, name: str) -> 'PropertyMetadata':
        """Reflect owner.name and build metadata from it (no data context)."""
        return cls.from_reflected_property(reflect_property(owner, name))

    @classmethod
    def from_model_property(cls, prop, entity_type: Optional[type] = None) -> 'PropertyMetadata':
        """
        Build metadata for a column mapped by SQLAlchemy.

        Args:
            prop: ColumnProperty (e.g. inspect(Model).column_attrs["id"]) or
                the instrumented class attribute (Model.id)
            entity_type: Class consulted for markers; defaults to the class
                of the mapper declaring the property

        Returns:
            PropertyMetadata populated from the mapping

        Raises:
            PreconditionViolation: If prop is None, is not column-backed, or
                no value type can be determined for it
        """
        if prop is None:
            raise _violation("model", "property descriptor is None")
        if isinstance(prop, QueryableAttribute):
            # hybrids and other proxies raise AttributeError for .property
            prop = getattr(prop, "property", None)
            if prop is None:
                raise _violation("model", "attribute is not backed by a mapped property")
        if not isinstance(prop, ColumnProperty):
            raise _violation("model", f"{type(prop).__name__} is not a column-backed property")

        column = prop.columns[0]
        entity_type = entity_type or prop.parent.class_
        reflected = reflect_property(entity_type, prop.key)

        try:
            value_type = column.type.python_type
        except NotImplementedError:
            value_type = reflected.value_type if reflected is not None else None
        if value_type is None:
            raise _violation("model", f"property '{prop.key}' has no value type")

        is_enum = _is_enum_type(value_type)
        # column_property() expressions are not Columns: computed by the query,
        # never written, and without DDL options
        is_expression = not isinstance(column, Column)
        computed = getattr(column, "computed", None)
        identity = getattr(column, "identity", None)
        identity_always = identity is not None and bool(identity.always)
        server_generated = (
            getattr(column, "server_default", None) is not None
            and getattr(column, "server_onupdate", None) is not None
        )

        scaffold = True
        if reflected is not None:
            marker = reflected.get_marker(ScaffoldColumn)
            if marker is not None:
                scaffold = marker.scaffold

        metadata = cls(
            property_name=prop.key,
            type_name=get_full_type_name(value_type),
            short_type_name=get_short_type_name(value_type),
            is_primary_key=bool(column.primary_key),
            # only the column's own foreign keys count, composite edge cases are not special-cased
            is_foreign_key=bool(column.foreign_keys),
            is_enum=is_enum,
            is_enum_flags=is_enum and issubclass(value_type, enum.Flag),
            is_read_only=is_expression or computed is not None or identity_always,
            is_auto_generated=computed is not None or server_generated,
            scaffold=scaffold,
        )
        log_property_metadata_built(metadata, "model")
        return metadata

    def to_dict(self) -> dict:
        """
        Convert metadata to a dictionary for template rendering.

        Returns:
            Dictionary keyed by field name
        """
        return asdict(self)
