"""Reactive GraphQL

Reactive execution of GraphQL operations: the result of an operation is an
observable which emits a new result whenever any of the data it depends on changes.

Parsing of documents and construction of schemas is left to GraphQL-core, and
observables are provided by ReactiveX for Python.

The :mod:`reactive_graphql` package contains the following sub-packages:

  - :mod:`reactive_graphql.error`: Creating errors terminating result streams.
  - :mod:`reactive_graphql.execution`: Executing operations as result streams.
  - :mod:`reactive_graphql.subscription`: Iterating over results asynchronously.
  - :mod:`reactive_graphql.utilities`: Attaching resolvers to schemas.
  - :mod:`reactive_graphql.pyutils`: Observable helpers.

All important functions and classes can be imported directly from this package.
"""

# The Reactive GraphQL version info.
from .version import version, version_info

# The primary entry points for fulfilling GraphQL operations.
from .graphql import graphql, graphql_sync

# Execute operations as observables.
from .execution import (
    execute,
    default_field_resolver,
    default_type_resolver,
    get_field_names,
    lookup_field,
    materialize_arguments,
    # Types
    DefaultFieldResolver,
    ExecutionContext,
    FieldDef,
    FieldResolver,
    TypeResolver,
)

# Iterate over results asynchronously.
from .subscription import subscribe, ObservableIterator

# Prepare schemas.
from .utilities import add_resolvers, make_executable_schema

# Create errors.
from .error import (
    FieldNotFoundError,
    ReactiveGraphQLError,
    ResolverThrowError,
    as_execution_error,
    field_not_found,
    resolver_throws,
)

# Observable helpers.
from .pyutils import combine_latest_dict, combine_latest_list, to_observable

__all__ = [
    "version",
    "version_info",
    "graphql",
    "graphql_sync",
    "execute",
    "default_field_resolver",
    "default_type_resolver",
    "get_field_names",
    "lookup_field",
    "materialize_arguments",
    "DefaultFieldResolver",
    "ExecutionContext",
    "FieldDef",
    "FieldResolver",
    "TypeResolver",
    "subscribe",
    "ObservableIterator",
    "add_resolvers",
    "make_executable_schema",
    "FieldNotFoundError",
    "ReactiveGraphQLError",
    "ResolverThrowError",
    "as_execution_error",
    "field_not_found",
    "resolver_throws",
    "combine_latest_dict",
    "combine_latest_list",
    "to_observable",
]
