"""Reactive GraphQL Utilities

The :mod:`reactive_graphql.utilities` package contains helpers for preparing schemas
for reactive execution.
"""

from .add_resolvers import add_resolvers
from .make_executable_schema import make_executable_schema

__all__ = ["add_resolvers", "make_executable_schema"]
