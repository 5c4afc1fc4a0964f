from __future__ import annotations

from typing import Any, Callable, Mapping

from graphql import GraphQLSchema, Source, build_schema

from .add_resolvers import add_resolvers

__all__ = ["make_executable_schema"]


def make_executable_schema(
    type_defs: str | Source,
    resolvers: Mapping[str, Mapping[str, Callable[..., Any]]] | None = None,
) -> GraphQLSchema:
    """Build a schema from the SDL and attach the given resolvers.

    The SDL is parsed and the type graph is built by GraphQL-core. See
    :func:`~reactive_graphql.utilities.add_resolvers` for the shape of the resolvers.
    """
    schema = build_schema(type_defs)
    if resolvers:
        add_resolvers(schema, resolvers)
    return schema
