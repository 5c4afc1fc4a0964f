"""Turn execution faults into terminating streams"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Any, Sequence

import reactivex as rx

from .reactive_graphql_error import (
    FieldNotFoundError,
    ReactiveGraphQLError,
    ResolverThrowError,
)

if TYPE_CHECKING:
    from graphql.language import Node
    from reactivex import Observable

__all__ = ["as_execution_error", "field_not_found", "resolver_throws"]

logger = getLogger(__name__)


def field_not_found(
    type_name: str,
    field_name: str,
    field_names: Sequence[str],
    node: Node | None = None,
) -> Observable[Any]:
    """Get a stream failing because the field is not defined on the type."""
    return rx.throw(FieldNotFoundError(type_name, field_name, field_names, node))


def resolver_throws(
    field_name: str, error: Exception, node: Node | None = None
) -> Observable[Any]:
    """Get a stream failing because the resolver of the field raised an error."""
    logger.debug("Resolver for field %r raised %r.", field_name, error)
    return rx.throw(ResolverThrowError(field_name, error, node))


def as_execution_error(error: Exception) -> ReactiveGraphQLError:
    """Get the error that terminates the result stream of an operation.

    Errors raised by the execution itself are passed through unchanged. Any other
    error, e.g. one emitted by a live stream provided by the caller, is wrapped with
    the same message so that consumers only need to handle one kind of error.
    """
    if isinstance(error, ReactiveGraphQLError):
        return error
    try:
        message = str(error.message)  # type: ignore
    except AttributeError:
        message = str(error)
    return ReactiveGraphQLError(message, original_error=error)
