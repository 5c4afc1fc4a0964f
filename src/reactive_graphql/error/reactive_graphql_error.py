"""Reactive GraphQL errors"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Collection, Sequence

from graphql import GraphQLError

if TYPE_CHECKING:
    from graphql.language import Node

__all__ = ["FieldNotFoundError", "ReactiveGraphQLError", "ResolverThrowError"]


class ReactiveGraphQLError(GraphQLError):
    """Reactive GraphQL Error

    A ReactiveGraphQLError terminates the result stream of an operation. It is a
    regular :class:`graphql.GraphQLError`, so the nodes, locations and the original
    error are available, but its string representation is only the message, since
    consumers rely on the exact wording.
    """

    def __str__(self) -> str:
        return self.message


class FieldNotFoundError(ReactiveGraphQLError):
    """A field was requested that is not defined on the current type."""

    type_name: str
    field_name: str
    field_names: list[str]

    def __init__(
        self,
        type_name: str,
        field_name: str,
        field_names: Sequence[str],
        nodes: Collection[Node] | Node | None = None,
    ) -> None:
        super().__init__(
            f"reactive-graphql: field '{field_name}' was not found on type"
            f" '{type_name}'. The only fields found in this Object are:"
            f" {','.join(field_names)}.",
            nodes,
        )
        self.type_name = type_name
        self.field_name = field_name
        self.field_names = list(field_names)


class ResolverThrowError(ReactiveGraphQLError):
    """A resolver raised an exception while being invoked."""

    field_name: str

    def __init__(
        self,
        field_name: str,
        original_error: Exception,
        nodes: Collection[Node] | Node | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"reactive-graphql: resolver '{field_name}'"
            f" throws this error: '{original_error}'",
            nodes,
            original_error=original_error,
            **kwargs,
        )
        self.field_name = field_name
