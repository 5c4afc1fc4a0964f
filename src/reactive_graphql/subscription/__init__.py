"""Reactive GraphQL Subscription

The :mod:`reactive_graphql.subscription` package provides the results of an
operation as an async iterator.
"""

from .subscribe import subscribe
from .observable_iterator import ObservableIterator

__all__ = ["subscribe", "ObservableIterator"]
