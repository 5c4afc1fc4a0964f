"""Look up field definitions in a schema"""

from __future__ import annotations

from typing import Any, Callable, Dict, NamedTuple, Optional

from graphql import (
    GraphQLArgument,
    GraphQLField,
    GraphQLOutputType,
    GraphQLSchema,
    get_named_type,
    get_nullable_type,
    is_interface_type,
    is_list_type,
    is_object_type,
)

__all__ = [
    "FieldDef",
    "FieldResolver",
    "get_field_names",
    "get_list_depth",
    "lookup_field",
]


# A field resolver gets the parent value, the argument record and the context.
FieldResolver = Callable[[Any, Dict[str, Any], Any], Any]


class FieldDef(NamedTuple):
    """Everything the executor needs to know about a field of an object type."""

    name: str
    return_type_name: str
    list_of: bool
    resolver: Optional[FieldResolver]
    args: Dict[str, GraphQLArgument]
    list_depth: int = 0


def lookup_field(
    schema: GraphQLSchema, type_name: str, field_name: str
) -> FieldDef | None:
    """Get the definition of the field with the given name on the given type.

    Returns None if the type has no such field or if it is not a type with fields.
    """
    type_ = schema.get_type(type_name)
    if not (is_object_type(type_) or is_interface_type(type_)):
        return None
    field: GraphQLField | None = type_.fields.get(field_name)  # type: ignore
    if field is None:
        return None
    list_depth = get_list_depth(field.type)
    return FieldDef(
        field_name,
        get_named_type(field.type).name,
        list_depth > 0,
        field.resolve,
        field.args,
        list_depth,
    )


def get_list_depth(type_: GraphQLOutputType) -> int:
    """Get the number of list types wrapped around the named type."""
    depth = 0
    nullable_type = get_nullable_type(type_)  # type: ignore
    while is_list_type(nullable_type):
        depth += 1
        nullable_type = get_nullable_type(nullable_type.of_type)  # type: ignore
    return depth


def get_field_names(schema: GraphQLSchema, type_name: str) -> list[str]:
    """Get the names of all fields of the given type in the order of declaration."""
    type_ = schema.get_type(type_name)
    if not (is_object_type(type_) or is_interface_type(type_)):
        return []
    return list(type_.fields)  # type: ignore
