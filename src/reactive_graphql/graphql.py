from __future__ import annotations

from typing import Any

from graphql import GraphQLSchema, Source, parse
from reactivex import operators as ops

from .execution import DefaultFieldResolver, ExecutionContext, TypeResolver, execute
from .subscription import ObservableIterator

__all__ = ["graphql", "graphql_sync"]


async def graphql(
    schema: GraphQLSchema,
    source: str | Source,
    bindings: dict[str, Any] | None = None,
    root_value: Any = None,
    operation_name: str | None = None,
    field_resolver: DefaultFieldResolver | None = None,
    type_resolver: TypeResolver | None = None,
    execution_context_class: type[ExecutionContext] | None = None,
) -> dict[str, Any]:
    """Execute a GraphQL operation asynchronously and return the first result.

    This is a convenience entry point that parses the source with GraphQL-core,
    executes the operation reactively and waits for the first result envelope. All
    subscriptions are disposed afterwards. The document is not validated.

    Accepts the following arguments:

    :arg schema:
      The GraphQL type system to use when executing the operation.
    :arg source:
      A GraphQL language formatted string representing the requested operation.
    :arg bindings:
      The values of the variables used in the operation, which may be observables.
      The same dictionary is passed as context to all resolvers.
    :arg root_value:
      The parent value of the top level fields, an empty dictionary by default.
    :arg operation_name:
      The name of the operation to use if the source contains multiple operations.
    :arg field_resolver:
      A resolver function to use when one is not provided by the schema.
    :arg type_resolver:
      A type resolver function to use when none is provided by the schema.
    :arg execution_context_class:
      The execution context class to use to build the context.

    Raises the error that terminated the result stream, or a RuntimeError if the
    stream completed without any result.
    """
    iterator = ObservableIterator(
        execute(
            schema,
            parse(source),
            bindings,
            root_value,
            operation_name,
            field_resolver,
            type_resolver,
            execution_context_class,
        )
    )
    try:
        async for result in iterator:
            return result
    finally:
        await iterator.aclose()
    raise RuntimeError("GraphQL execution completed without a result.")


def graphql_sync(
    schema: GraphQLSchema,
    source: str | Source,
    bindings: dict[str, Any] | None = None,
    root_value: Any = None,
    operation_name: str | None = None,
    field_resolver: DefaultFieldResolver | None = None,
    type_resolver: TypeResolver | None = None,
    execution_context_class: type[ExecutionContext] | None = None,
) -> dict[str, Any]:
    """Execute a GraphQL operation synchronously and return the first result.

    The graphql_sync function also fulfills GraphQL operations by parsing and
    executing a given GraphQL document. However, it guarantees to complete
    synchronously (or throw an error) assuming that all field resolvers and bound
    values emit their first value synchronously.
    """
    results: list[dict[str, Any]] = []
    errors: list[Exception] = []
    disposable = (
        execute(
            schema,
            parse(source),
            bindings,
            root_value,
            operation_name,
            field_resolver,
            type_resolver,
            execution_context_class,
        )
        .pipe(ops.take(1))
        .subscribe(on_next=results.append, on_error=errors.append)
    )
    disposable.dispose()

    if errors:
        raise errors[0]
    if not results:
        raise RuntimeError("GraphQL execution failed to complete synchronously.")
    return results[0]
