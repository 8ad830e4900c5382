from __future__ import annotations

from collections.abc import Mapping
from typing import Literal

from pydantic import BaseModel, ConfigDict
from sqlalchemy import Boolean, Date, DateTime, Integer, String, inspect
from sqlalchemy.orm import MANYTOONE, ONETOMANY
from sqlalchemy.types import TypeEngine

from pwadmin.db.base import Base
from pwadmin.db.naming import camelize, underscore

# First match wins.
_TYPE_NAMES: list[tuple[type[TypeEngine], str]] = [
    (Boolean, "boolean"),
    (DateTime, "datetime"),
    (Date, "date"),
    (Integer, "integer"),
    (String, "string"),
]

_KINDS = {MANYTOONE: "belongsTo", ONETOMANY: "hasMany"}


class FieldDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    column: str
    type: str
    nullable: bool


class AssociationDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    kind: Literal["belongsTo", "hasMany"]
    target: str
    foreign_key: str
    field: str


class EntityDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    model: str
    table_name: str
    underscored: bool
    primary_key: str
    fields: list[FieldDescriptor]
    associations: list[AssociationDescriptor]

    def field(self, name: str) -> FieldDescriptor:
        for f in self.fields:
            if f.name == name:
                return f
        raise KeyError(name)

    def association(self, name: str) -> AssociationDescriptor:
        for a in self.associations:
            if a.name == name:
                return a
        raise KeyError(name)


def column_type_name(type_: TypeEngine) -> str:
    for sa_type, label in _TYPE_NAMES:
        if isinstance(type_, sa_type):
            return label
    return type_.__class__.__name__.lower()


def describe_entity(
    model: type[Base], name: str, names_by_model: Mapping[type, str]
) -> EntityDescriptor:
    """Build the admin-facing descriptor of a configured mapped class.

    ``names_by_model`` maps every registered class to its entity name and is
    used to name association targets.
    """
    mapper = inspect(model)

    fields: list[FieldDescriptor] = []
    for attr in mapper.column_attrs:
        column = attr.columns[0]
        if column.primary_key or column.foreign_keys:
            continue
        fields.append(
            FieldDescriptor(
                name=camelize(attr.key),
                column=column.name,
                type=column_type_name(column.type),
                nullable=bool(column.nullable),
            )
        )

    associations: list[AssociationDescriptor] = []
    for rel in mapper.relationships:
        kind = _KINDS.get(rel.direction)
        if kind is None:
            continue
        local, remote = rel.local_remote_pairs[0]
        fk_column = local if rel.direction is MANYTOONE else remote
        associations.append(
            AssociationDescriptor(
                name=camelize(rel.key),
                kind=kind,
                target=names_by_model[rel.mapper.class_],
                foreign_key=camelize(fk_column.key),
                field=fk_column.name,
            )
        )

    column_names = {f.name: f.column for f in fields}
    column_names.update(
        (a.foreign_key, a.field) for a in associations if a.kind == "belongsTo"
    )
    return EntityDescriptor(
        name=name,
        model=model.__name__,
        table_name=mapper.local_table.name,
        underscored=all(column == underscore(attr) for attr, column in column_names.items()),
        primary_key=mapper.primary_key[0].key,
        fields=fields,
        associations=associations,
    )
