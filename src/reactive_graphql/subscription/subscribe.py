from __future__ import annotations

from typing import Any, AsyncIterator

from graphql import GraphQLSchema
from graphql.language import DocumentNode

from ..execution import (
    DefaultFieldResolver,
    ExecutionContext,
    TypeResolver,
    execute,
)
from .observable_iterator import ObservableIterator

__all__ = ["subscribe"]


def subscribe(
    schema: GraphQLSchema,
    document: DocumentNode,
    bindings: dict[str, Any] | None = None,
    root_value: Any = None,
    operation_name: str | None = None,
    field_resolver: DefaultFieldResolver | None = None,
    type_resolver: TypeResolver | None = None,
    execution_context_class: type[ExecutionContext] | None = None,
) -> AsyncIterator[dict[str, Any]]:
    """Subscribe to the results of a GraphQL operation.

    Executes the operation like :func:`~reactive_graphql.execute` and returns an
    AsyncIterator over the result envelopes. The iteration ends when the result
    stream completes, and raises the error if the result stream fails.

    Closing the iterator (e.g. by leaving an ``async for`` loop early with
    ``aclose()``) disposes all subscriptions made during execution.
    """
    return ObservableIterator(
        execute(
            schema,
            document,
            bindings,
            root_value,
            operation_name,
            field_resolver,
            type_resolver,
            execution_context_class,
        )
    )
