"""Materialize argument values"""

from __future__ import annotations

from typing import Any, Collection, Mapping

import reactivex as rx
from graphql import (
    GraphQLArgument,
    Undefined,
    print_ast,
    value_from_ast,
    value_from_ast_untyped,
)
from graphql.language import ArgumentNode, VariableNode
from reactivex import Observable

from ..error import ReactiveGraphQLError
from ..pyutils import combine_latest_dict, to_observable

__all__ = ["get_default_values", "materialize_arguments"]


def get_default_values(arg_defs: Mapping[str, GraphQLArgument]) -> dict[str, Any]:
    """Get the default values of all arguments that define one."""
    return {
        arg_def.out_name or name: arg_def.default_value
        for name, arg_def in arg_defs.items()
        if arg_def.default_value is not Undefined
    }


def materialize_arguments(
    arg_defs: Mapping[str, GraphQLArgument],
    arg_nodes: Collection[ArgumentNode] | None,
    bindings: Mapping[str, Any],
) -> Observable[dict[str, Any]]:
    """Get an observable of the argument records of a field.

    Literal arguments are coerced according to their definition. Variables are looked
    up in the bindings, where the bound value may also be an observable; in this case
    a new argument record is emitted whenever it emits. Variables which are not bound
    or bound to None are left out of the record, unless the argument has a default
    value.
    """
    record = get_default_values(arg_defs)
    if not arg_nodes:
        return rx.from_callable(lambda: dict(record))

    keys: list[str] = list(record)
    sources: list[Observable[Any]] = [rx.of(value) for value in record.values()]

    for arg_node in arg_nodes:
        name = arg_node.name.value
        arg_def = arg_defs.get(name)
        key = (arg_def.out_name if arg_def else None) or name
        value_node = arg_node.value
        if isinstance(value_node, VariableNode):
            variable_name = value_node.name.value
            value = bindings.get(variable_name)
            if value is None:
                continue
            source = to_observable(value)
        else:
            value = (
                value_from_ast(value_node, arg_def.type, bindings)  # type: ignore
                if arg_def
                else value_from_ast_untyped(value_node, bindings)  # type: ignore
            )
            if value is Undefined:
                return rx.throw(
                    ReactiveGraphQLError(
                        f"Argument '{name}' has invalid value {print_ast(value_node)}.",
                        value_node,
                    )
                )
            source = rx.of(value)
        if key in keys:
            sources[keys.index(key)] = source
        else:
            keys.append(key)
            sources.append(source)

    return combine_latest_dict(keys, sources)
