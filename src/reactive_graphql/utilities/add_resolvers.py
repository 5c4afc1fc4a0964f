from __future__ import annotations

from typing import Any, Callable, Mapping

from graphql import (
    GraphQLSchema,
    is_abstract_type,
    is_interface_type,
    is_object_type,
)

__all__ = ["add_resolvers"]


def add_resolvers(
    schema: GraphQLSchema, resolvers: Mapping[str, Mapping[str, Callable[..., Any]]]
) -> GraphQLSchema:
    """Attach resolver functions to the types of a schema.

    The resolvers are given as a mapping from type names to mappings from field names
    to resolver functions, which are called with the parent value, the arguments and
    the context. The special key ``__resolve_type`` sets the type resolver of an
    interface or union type, and ``__is_type_of`` sets the type check of an object
    type. The schema is changed in place and returned.
    """
    for type_name, type_resolvers in resolvers.items():
        type_ = schema.get_type(type_name)
        if type_ is None:
            raise TypeError(f"Cannot add resolvers to unknown type '{type_name}'.")
        for field_name, resolver in type_resolvers.items():
            if field_name == "__resolve_type":
                if not is_abstract_type(type_):
                    raise TypeError(
                        f"Cannot add a type resolver to non-abstract type '{type_}'."
                    )
                type_.resolve_type = resolver  # type: ignore
            elif field_name == "__is_type_of":
                if not is_object_type(type_):
                    raise TypeError(
                        f"Cannot add a type check to non-object type '{type_}'."
                    )
                type_.is_type_of = resolver  # type: ignore
            else:
                if not (is_object_type(type_) or is_interface_type(type_)):
                    raise TypeError(f"Type '{type_}' has no fields.")
                field = type_.fields.get(field_name)  # type: ignore
                if field is None:
                    raise TypeError(
                        f"Cannot add a resolver to unknown field"
                        f" '{type_name}.{field_name}'."
                    )
                field.resolve = resolver
    return schema
