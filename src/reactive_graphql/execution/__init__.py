"""Reactive GraphQL Execution

The :mod:`reactive_graphql.execution` package is responsible for the execution phase
of fulfilling a GraphQL request, producing a stream of results.
"""

from .field_def import (
    FieldDef,
    FieldResolver,
    get_field_names,
    get_list_depth,
    lookup_field,
)
from .values import get_default_values, materialize_arguments
from .execute import (
    execute,
    default_field_resolver,
    default_type_resolver,
    DefaultFieldResolver,
    ExecutionContext,
    TypeResolver,
)

__all__ = [
    "DefaultFieldResolver",
    "ExecutionContext",
    "FieldDef",
    "FieldResolver",
    "TypeResolver",
    "default_field_resolver",
    "default_type_resolver",
    "execute",
    "get_default_values",
    "get_field_names",
    "get_list_depth",
    "lookup_field",
    "materialize_arguments",
]
