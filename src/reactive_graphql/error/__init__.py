"""Reactive GraphQL Errors

The :mod:`reactive_graphql.error` package is responsible for creating the errors
that terminate the result stream of an operation.
"""

from .reactive_graphql_error import (
    FieldNotFoundError,
    ReactiveGraphQLError,
    ResolverThrowError,
)

from .error_envelope import as_execution_error, field_not_found, resolver_throws

__all__ = [
    "FieldNotFoundError",
    "ReactiveGraphQLError",
    "ResolverThrowError",
    "as_execution_error",
    "field_not_found",
    "resolver_throws",
]
