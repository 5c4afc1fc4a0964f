from collections import ChainMap

import reactivex as rx
from graphql import parse

from reactive_graphql import ResolverThrowError, execute, make_executable_schema
from reactive_graphql.execution import default_field_resolver

from ..utils import observe

schema = make_executable_schema(
    """
    type Query {
      test(aStr: String, aInt: Int): String
    }
    """
)


def describe_default_field_resolver():
    def accesses_keys_of_dict():
        assert default_field_resolver({"test": "testValue"}, "test") == "testValue"

    def accesses_keys_of_chain_map():
        # use a mapping that is not a subclass of dict
        assert default_field_resolver(ChainMap({"test": "testValue"}), "test") == (
            "testValue"
        )

    def accesses_attributes():
        class Source:
            test = "testValue"

        assert default_field_resolver(Source(), "test") == "testValue"

    def returns_none_for_missing_properties():
        assert default_field_resolver({}, "test") is None
        assert default_field_resolver(object(), "test") is None
        assert default_field_resolver(None, "test") is None

    def does_not_call_methods():
        class Source:
            def test(self):
                return "secretValue"  # pragma: no cover

        source = Source()
        assert default_field_resolver(source, "test") == source.test


def describe_execute_resolve_function():
    def default_function_accesses_root_value():
        class RootValue:
            test = "testValue"

        observed = observe(execute(schema, parse("{ test }"), root_value=RootValue()))
        assert observed.values == [{"data": {"test": "testValue"}}]

    def root_value_defaults_to_empty_dict():
        observed = observe(execute(schema, parse("{ test }")))
        assert observed.values == [{"data": {"test": None}}]

    def default_function_ignores_arguments():
        observed = observe(
            execute(
                schema,
                parse('{ test(aStr: "String!", aInt: -123) }'),
                root_value={"test": "testValue"},
            )
        )
        assert observed.values == [{"data": {"test": "testValue"}}]

    def uses_provided_resolve_function():
        resolver_schema = make_executable_schema(
            "type Query { test(aStr: String, aInt: Int): String }",
            {
                "Query": {
                    "test": lambda parent, args, _context: repr(
                        [parent, sorted(args.items())]
                    )
                }
            },
        )

        observed = observe(execute(resolver_schema, parse("{ test }")))
        assert observed.values == [{"data": {"test": "[{}, []]"}}]

        observed = observe(
            execute(
                resolver_schema,
                parse('{ test(aStr: "String!") }'),
                root_value="Source!",
            )
        )
        assert observed.values == [
            {"data": {"test": "['Source!', [('aStr', 'String!')]]"}}
        ]

        observed = observe(
            execute(
                resolver_schema,
                parse('{ test(aInt: -123, aStr: "String!") }'),
                root_value="Source!",
            )
        )
        assert observed.values == [
            {"data": {"test": "['Source!', [('aInt', -123), ('aStr', 'String!')]]"}}
        ]

    def uses_custom_default_field_resolver():
        observed = observe(
            execute(
                schema,
                parse("{ test }"),
                field_resolver=lambda _source, field_name: field_name.upper(),
            )
        )
        assert observed.values == [{"data": {"test": "TEST"}}]

    def resolvers_may_return_plain_values_and_none():
        resolver_schema = make_executable_schema(
            "type Query { a: Int b: String c: [Int] }",
            {
                "Query": {
                    "a": lambda *_args: 1,
                    "b": lambda *_args: None,
                    "c": lambda *_args: [1, 2],
                }
            },
        )
        observed = observe(execute(resolver_schema, parse("{ a b c }")))
        assert observed.values == [{"data": {"a": 1, "b": None, "c": [1, 2]}}]
        assert observed.completed

    def resolvers_raising_errors_fail_the_stream():
        def fail(_parent, _args, _context):
            raise ValueError("bad value")

        resolver_schema = make_executable_schema(
            "type Query { test: String }", {"Query": {"test": fail}}
        )
        observed = observe(execute(resolver_schema, parse("{ alias: test }")))
        error = observed.error
        assert isinstance(error, ResolverThrowError)
        assert error.message == (
            "reactive-graphql: resolver 'test' throws this error: 'bad value'"
        )
        assert error.locations == [(1, 3)]


def describe_resolution_order():
    def _create_schema(lift):
        def resolve_nested(_parent, _args, context):
            context["calls"].append("Query.nested")
            return lift({})

        def resolve_first(_parent, _args, context):
            context["calls"].append("Nested.first")
            context["written"] = "by first"
            return lift({})

        def resolve_second(_parent, _args, context):
            context["calls"].append("Nesting.second")
            return lift(context["written"])

        def resolve_sibling(_parent, _args, context):
            context["calls"].append("Query.sibling")
            return lift(context.get("written", "unset"))

        return make_executable_schema(
            """
            type Nesting {
              second: String
            }

            type Nested {
              first: Nesting
            }

            type Query {
              nested: Nested
              sibling: String
            }
            """,
            {
                "Query": {"nested": resolve_nested, "sibling": resolve_sibling},
                "Nested": {"first": resolve_first},
                "Nesting": {"second": resolve_second},
            },
        )

    def _execute_nested(lift):
        bindings = {"calls": []}
        observed = observe(
            execute(
                _create_schema(lift),
                parse("{ nested { first { second } } sibling }"),
                bindings,
            )
        )
        return observed, bindings["calls"]

    def resolves_sub_fields_before_later_siblings():
        observed, calls = _execute_nested(lambda value: value)
        assert calls == [
            "Query.nested",
            "Nested.first",
            "Nesting.second",
            "Query.sibling",
        ]
        assert observed.values == [
            {
                "data": {
                    "nested": {"first": {"second": "by first"}},
                    "sibling": "by first",
                }
            }
        ]

    def resolves_depth_first_with_observable_results():
        observed, calls = _execute_nested(rx.of)
        assert calls == [
            "Query.nested",
            "Nested.first",
            "Nesting.second",
            "Query.sibling",
        ]
        assert observed.values == [
            {
                "data": {
                    "nested": {"first": {"second": "by first"}},
                    "sibling": "by first",
                }
            }
        ]
        assert observed.completed

    def resolves_list_items_depth_first():
        calls = []

        def resolve_items(_parent, _args, _context):
            return rx.of([{"id": 1}, {"id": 2}])

        def resolve_id(item, _args, _context):
            calls.append(f"Item.id {item['id']}")
            return item["id"]

        def resolve_last(_parent, _args, _context):
            calls.append("Query.last")
            return "last"

        list_schema = make_executable_schema(
            """
            type Item {
              id: Int
            }

            type Query {
              items: [Item]
              last: String
            }
            """,
            {
                "Query": {"items": resolve_items, "last": resolve_last},
                "Item": {"id": resolve_id},
            },
        )
        observed = observe(execute(list_schema, parse("{ items { id } last }")))
        assert calls == ["Item.id 1", "Item.id 2", "Query.last"]
        assert observed.values == [
            {"data": {"items": [{"id": 1}, {"id": 2}], "last": "last"}}
        ]
