# -*- coding: utf-8 -*-
"""
shapes

Closed set of object shapes that form customization rules can target.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from tortoise import fields as orm_fields

from ..settings.choices import StrChoices
from .comparison import FieldKind


class ShapeId(StrChoices):
    """Shape tags, named after the resource classes they stand for."""

    RESOURCE = ("modResource", "Resource")
    DOCUMENT = ("modDocument", "Document")
    WEBLINK = ("modWebLink", "Weblink")
    SYMLINK = ("modSymLink", "Symlink")
    STATIC_RESOURCE = ("modStaticResource", "Static resource")

    @classmethod
    def resolve(cls, name: str | None) -> "ShapeId | None":
        """Return the shape called ``name`` or ``None`` when it is unknown."""
        if not name:
            return None
        return cls.lookup(name.strip())

    @property
    def parent(self) -> "ShapeId | None":
        return _PARENTS.get(self)

    def is_a(self, other: "ShapeId") -> bool:
        """Return ``True`` when this shape is ``other`` or derives from it."""
        current: ShapeId | None = self
        while current is not None:
            if current is other:
                return True
            current = current.parent
        return False


_PARENTS: dict[ShapeId, ShapeId] = {
    ShapeId.DOCUMENT: ShapeId.RESOURCE,
    ShapeId.WEBLINK: ShapeId.RESOURCE,
    ShapeId.SYMLINK: ShapeId.RESOURCE,
    ShapeId.STATIC_RESOURCE: ShapeId.RESOURCE,
}


@dataclass
class FormTarget:
    """In-memory record a form is rendered for.

    ``fields`` holds the record's values by name. ``field_kinds`` declares the
    semantic type of fields used in constraints; undeclared fields are typed
    from their current value.
    """

    shape: ShapeId
    fields: dict[str, Any] = field(default_factory=dict)
    field_kinds: dict[str, FieldKind] = field(default_factory=dict)

    @property
    def template(self) -> Any:
        return self.fields.get("template")

    def get(self, name: str, default: Any = None) -> Any:
        """Return the value of field ``name``."""
        return self.fields.get(name, default)

    def kind_of(self, name: str) -> FieldKind:
        """Return the declared or inferred kind of field ``name``."""
        declared = self.field_kinds.get(name)
        if declared is not None:
            return declared
        return FieldKind.infer(self.fields.get(name))

    @classmethod
    def from_model(
        cls,
        instance: Any,
        shape: ShapeId,
        *,
        field_kinds: Mapping[str, FieldKind] | None = None,
    ) -> "FormTarget":
        """Snapshot the data fields of a Tortoise model ``instance``."""

        meta = instance._meta
        values: dict[str, Any] = {}
        kinds: dict[str, FieldKind] = {}
        for name in meta.fields_db_projection:
            values[name] = getattr(instance, name, None)
            model_field = meta.fields_map.get(name)
            if isinstance(model_field, orm_fields.BooleanField):
                kinds[name] = FieldKind.BOOLEAN
            elif isinstance(
                model_field,
                (orm_fields.IntField, orm_fields.BigIntField, orm_fields.SmallIntField),
            ):
                kinds[name] = FieldKind.INTEGER
            elif isinstance(model_field, (orm_fields.FloatField, orm_fields.DecimalField)):
                kinds[name] = FieldKind.NUMBER
            else:
                kinds[name] = FieldKind.STRING
        kinds.update(field_kinds or {})
        return cls(shape=shape, fields=values, field_kinds=kinds)


__all__ = ["FormTarget", "ShapeId"]


# The End
