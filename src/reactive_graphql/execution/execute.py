"""Reactive GraphQL execution"""

from __future__ import annotations

from logging import getLogger
from typing import Any, Callable, Iterable, Mapping, Sequence

import reactivex as rx
from graphql import (
    GraphQLAbstractType,
    GraphQLObjectType,
    GraphQLSchema,
    is_abstract_type,
)
from graphql.language import (
    DocumentNode,
    FieldNode,
    OperationDefinitionNode,
    OperationType,
    SelectionNode,
)
from reactivex import Observable, abc
from reactivex import operators as ops

from ..error import (
    ReactiveGraphQLError,
    as_execution_error,
    field_not_found,
    resolver_throws,
)
from ..pyutils import (
    SynchronousScheduler,
    combine_latest_dict,
    combine_latest_list,
    to_observable,
)
from .field_def import FieldDef, get_field_names, lookup_field
from .values import get_default_values, materialize_arguments

__all__ = [
    "DefaultFieldResolver",
    "ExecutionContext",
    "TypeResolver",
    "default_field_resolver",
    "default_type_resolver",
    "execute",
]

logger = getLogger(__name__)


# Terminology
#
# "Bindings" are the values provided by the caller. They serve both as the values of
# the variables used in the document and as the context passed to every resolver.
#
# "Streams" are observables. Every field produces a stream of its values, and every
# selection set produces a stream of result dicts which is re-emitted whenever one
# of the streams of its fields emits a new value.


# A default field resolver gets the parent value and the name of the field.
DefaultFieldResolver = Callable[[Any, str], Any]

# A type resolver gets the value, the context and the abstract type and returns the
# name of the runtime type (or the runtime type itself).
TypeResolver = Callable[[Any, Any, GraphQLAbstractType], Any]


class ExecutionContext:
    """Data that must be available at all points during query execution.

    Namely, the schema of the type system that is currently executing, the operation
    that shall be executed, and the bindings which are passed as context to all
    resolvers. Since the very same bindings object is passed to all resolvers, any
    change a resolver makes to it can be seen by all resolvers invoked after it.
    """

    schema: GraphQLSchema
    operation: OperationDefinitionNode
    root_value: Any
    context_value: dict[str, Any]
    field_resolver: DefaultFieldResolver
    type_resolver: TypeResolver

    def __init__(
        self,
        schema: GraphQLSchema,
        operation: OperationDefinitionNode,
        root_value: Any,
        context_value: dict[str, Any],
        field_resolver: DefaultFieldResolver,
        type_resolver: TypeResolver,
    ) -> None:
        self.schema = schema
        self.operation = operation
        self.root_value = root_value
        self.context_value = context_value
        self.field_resolver = field_resolver
        self.type_resolver = type_resolver

    @classmethod
    def build(
        cls,
        schema: GraphQLSchema,
        document: DocumentNode,
        bindings: dict[str, Any] | None = None,
        root_value: Any = None,
        operation_name: str | None = None,
        field_resolver: DefaultFieldResolver | None = None,
        type_resolver: TypeResolver | None = None,
    ) -> ExecutionContext:
        """Build an execution context

        Constructs a ExecutionContext object from the arguments passed to execute, which
        we will pass throughout the other execution methods.

        Raises a ReactiveGraphQLError if a valid execution context cannot be created.

        For internal use only.
        """
        operation: OperationDefinitionNode | None = None
        for definition in document.definitions:
            if isinstance(definition, OperationDefinitionNode):
                if operation_name is None:
                    if operation:
                        raise ReactiveGraphQLError(
                            "Must provide operation name"
                            " if query contains multiple operations."
                        )
                    operation = definition
                elif definition.name and definition.name.value == operation_name:
                    operation = definition

        if not operation:
            if operation_name is not None:
                raise ReactiveGraphQLError(
                    f"Unknown operation named '{operation_name}'."
                )
            raise ReactiveGraphQLError("Must provide an operation.")

        return cls(
            schema,
            operation,
            {} if root_value is None else root_value,
            {} if bindings is None else bindings,
            field_resolver or default_field_resolver,
            type_resolver or default_type_resolver,
        )

    def get_root_type(self) -> GraphQLObjectType:
        """Get the root type the operation is executed against."""
        operation = self.operation.operation
        root_type = {
            OperationType.QUERY: self.schema.query_type,
            OperationType.MUTATION: self.schema.mutation_type,
            OperationType.SUBSCRIPTION: self.schema.subscription_type,
        }.get(operation)
        if root_type is None:
            raise ReactiveGraphQLError(
                f"Schema is not configured to execute {operation.value} operation.",
                self.operation,
            )
        return root_type

    def execute_operation(self) -> Observable[dict[str, Any]]:
        """Execute an operation.

        Return an observable of result envelopes with the data described by the
        "Response" section of the GraphQL specification. A new envelope is emitted
        whenever any of the underlying streams emits.

        Contrary to the specification, there are no partial results: the first error
        raised anywhere during execution terminates the whole stream.
        """
        try:
            root_type = self.get_root_type()
        except ReactiveGraphQLError as error:
            return rx.throw(error)

        logger.debug(
            "Executing %s operation %r.",
            self.operation.operation.value,
            self.operation.name.value if self.operation.name else None,
        )

        return self.execute_selection_set(
            self.operation.selection_set.selections,
            rx.of(self.root_value),
            root_type.name,
        ).pipe(
            ops.map(lambda data: {"data": data}),
            ops.catch(lambda error, _source: rx.throw(as_execution_error(error))),
        )

    def execute_selection_set(
        self,
        selections: Sequence[SelectionNode],
        parent_stream: Observable[Any],
        type_name: str,
    ) -> Observable[dict[str, Any]]:
        """Execute the given selection set.

        Implements the "Executing selection sets" section of the GraphQL
        specification. The fields are combined with the latest values of all other
        fields, in the order of the selection set, whenever one of them emits.
        """
        response_names: list[str] = []
        streams: list[Observable[Any]] = []
        for selection in selections:
            if not isinstance(selection, FieldNode):
                logger.warning(
                    "Skipping %s in selection set on type '%s'.",
                    selection.kind,
                    type_name,
                )
                continue
            response_names.append(
                selection.alias.value if selection.alias else selection.name.value
            )
            streams.append(self.execute_field(selection, parent_stream, type_name))
        return combine_latest_dict(response_names, streams)

    def execute_field(
        self,
        field_node: FieldNode,
        parent_stream: Observable[Any],
        type_name: str,
    ) -> Observable[Any]:
        """Resolve the field on the values of the given parent stream.

        Implements the "Executing fields" section of the GraphQL
        specification.

        In particular, this method figures out the values that the field returns by
        calling its resolver (or the default field resolver) for every combination of
        parent value and argument record, then switches to the stream returned by the
        latest call and completes its values.

        The returned stream never raises; errors are always emitted.
        """
        field_name = field_node.name.value
        field_def = lookup_field(self.schema, type_name, field_name)
        if not field_def:
            return field_not_found(
                type_name,
                field_name,
                get_field_names(self.schema, type_name),
                field_node,
            )

        if field_node.arguments:
            source = rx.combine_latest(
                parent_stream,
                materialize_arguments(
                    field_def.args, field_node.arguments, self.context_value
                ),
            )
        else:
            defaults = get_default_values(field_def.args)
            source = parent_stream.pipe(
                ops.map(lambda parent: (parent, dict(defaults)))
            )

        def resolve(parent_and_args: tuple[Any, dict[str, Any]]) -> Observable[Any]:
            parent, args = parent_and_args
            try:
                if field_def.resolver:
                    result = field_def.resolver(parent, args, self.context_value)
                else:
                    result = self.field_resolver(parent, field_name)
            except Exception as error:
                return resolver_throws(field_name, error, field_node)
            return to_observable(result)

        resolved = source.pipe(ops.map(resolve), ops.switch_latest())

        selection_set = field_node.selection_set
        if not selection_set or not selection_set.selections:
            return resolved

        selections = selection_set.selections
        return resolved.pipe(
            ops.map(
                lambda result: self.complete_value(
                    field_def, selections, type_name, result
                )
            ),
            ops.switch_latest(),
        )

    def complete_value(
        self,
        field_def: FieldDef,
        selections: Sequence[SelectionNode],
        parent_type_name: str,
        result: Any,
    ) -> Observable[Any]:
        """Complete a value with a sub-selection.

        Null values are completed as they are, lists are completed item by item, and
        all other values become the parent value of the sub-selection.
        """
        if result is None:
            return rx.of(None)
        if field_def.list_of:
            return self.complete_list_value(
                field_def, selections, parent_type_name, result, field_def.list_depth
            )
        return self.complete_object_value(
            field_def, selections, parent_type_name, result
        )

    def complete_list_value(
        self,
        field_def: FieldDef,
        selections: Sequence[SelectionNode],
        parent_type_name: str,
        result: Any,
        depth: int = 1,
    ) -> Observable[list[Any]]:
        """Complete a list value by completing each item in the list.

        The size of the completed list is always the size of the given list. The depth
        is the number of list types wrapped around the item type, items of nested lists
        are completed as lists again.
        """
        if not isinstance(result, Iterable) or isinstance(result, (str, Mapping)):
            return rx.throw(
                ReactiveGraphQLError(
                    "Expected Iterable, but did not find one for field"
                    f" '{parent_type_name}.{field_def.name}'."
                )
            )

        def complete_item(item: Any) -> Observable[Any]:
            if item is None:
                return rx.of(None)
            if depth > 1:
                return self.complete_list_value(
                    field_def, selections, parent_type_name, item, depth - 1
                )
            return self.complete_object_value(
                field_def, selections, parent_type_name, item
            )

        return combine_latest_list([complete_item(item) for item in result])

    def complete_object_value(
        self,
        field_def: FieldDef,
        selections: Sequence[SelectionNode],
        parent_type_name: str,
        result: Any,
    ) -> Observable[dict[str, Any]]:
        """Complete an object value by executing the sub-selection on it."""
        type_name = field_def.return_type_name
        return_type = self.schema.get_type(type_name)
        if is_abstract_type(return_type):
            try:
                type_name = self.resolve_runtime_type(
                    return_type, result  # type: ignore
                )
            except Exception as error:
                return resolver_throws(field_def.name, error)
            if type_name is None:
                return rx.throw(
                    ReactiveGraphQLError(
                        f"Abstract type '{return_type}' must resolve to an Object type"
                        " at runtime for field"
                        f" '{parent_type_name}.{field_def.name}'."
                    )
                )
        return self.execute_selection_set(selections, rx.of(result), type_name)

    def resolve_runtime_type(
        self, abstract_type: GraphQLAbstractType, value: Any
    ) -> str | None:
        """Get the name of the object type of a value with an abstract type.

        The ``resolve_type`` function of the abstract type is tried first, then the
        configured type resolver, and finally the ``is_type_of`` functions of all the
        possible types.
        """
        resolve_type_fn = abstract_type.resolve_type or self.type_resolver
        runtime_type = resolve_type_fn(value, self.context_value, abstract_type)
        if isinstance(runtime_type, GraphQLObjectType):
            return runtime_type.name
        if isinstance(runtime_type, str):
            return runtime_type
        for type_ in self.schema.get_possible_types(abstract_type):
            if type_.is_type_of and type_.is_type_of(value, self.context_value):
                return type_.name
        return None


def execute(
    schema: GraphQLSchema,
    document: DocumentNode,
    bindings: dict[str, Any] | None = None,
    root_value: Any = None,
    operation_name: str | None = None,
    field_resolver: DefaultFieldResolver | None = None,
    type_resolver: TypeResolver | None = None,
    execution_context_class: type[ExecutionContext] | None = None,
) -> Observable[dict[str, Any]]:
    """Execute a GraphQL operation reactively.

    Returns an observable which emits a result envelope ``{"data": ...}`` whenever
    the data of any of the fields changes, and which completes when all underlying
    streams have completed. If the document only uses single-shot values, exactly one
    envelope is emitted.

    The bindings are used to look up the variables of the document and are passed as
    context to all resolvers. Bound values may be observables, in which case the
    operation is re-executed with the latest value whenever they emit.

    Resolvers are called depth-first in the order of the selection sets, so a
    resolver sees all changes made to the context by the resolvers of the fields
    before it, including their sub-fields.

    Nothing is executed before the returned observable is subscribed, and disposing
    the subscription disposes all subscriptions made during execution. If the
    arguments to this function do not result in a legal execution context, or if any
    resolver fails, the observable emits a ReactiveGraphQLError.
    """
    if execution_context_class is None:
        execution_context_class = ExecutionContext

    def execute_on_subscribe(_scheduler: Any = None) -> Observable[dict[str, Any]]:
        try:
            context = execution_context_class.build(  # type: ignore
                schema,
                document,
                bindings,
                root_value,
                operation_name,
                field_resolver,
                type_resolver,
            )
        except ReactiveGraphQLError as error:
            return rx.throw(error)
        return context.execute_operation()

    def subscribe(
        observer: abc.ObserverBase[dict[str, Any]],
        _scheduler: abc.SchedulerBase | None = None,
    ) -> abc.DisposableBase:
        # resolvers run depth-first only if nothing is queued on the trampoline
        return rx.defer(execute_on_subscribe).subscribe(
            observer, scheduler=SynchronousScheduler()
        )

    return rx.create(subscribe)


def get_typename(value: Any) -> str | None:
    """Get the ``__typename`` property of the given value."""
    if isinstance(value, Mapping):
        return value.get("__typename")
    # need to de-mangle the attribute assumed to be "private" in Python
    for cls in value.__class__.__mro__:
        __typename = getattr(value, f"_{cls.__name__}__typename", None)
        if __typename:
            return __typename
    return None


def default_type_resolver(
    value: Any, _context: Any, _abstract_type: GraphQLAbstractType
) -> str | None:
    """Default type resolver function.

    If a resolve_type function is not given, then a default resolve behavior is used
    which looks for a ``__typename`` field on the value and uses it as the name of the
    resolved type.
    """
    return get_typename(value)


def default_field_resolver(source: Any, field_name: str) -> Any:
    """Default field resolver.

    If a resolver is not given, then a default resolve behavior is used which takes
    the property of the source object of the same name as the field and returns it
    unchanged as the result. Arguments are ignored.

    For dictionaries, the field names are used as keys, for all other objects they are
    used as attribute names.
    """
    if isinstance(source, Mapping):
        return source.get(field_name)
    return getattr(source, field_name, None)
