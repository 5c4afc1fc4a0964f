"""Python Utils

This package contains the observable helpers used throughout the codebase.
"""

from .combine import combine_latest_dict, combine_latest_list
from .synchronous_scheduler import SynchronousScheduler
from .to_observable import from_async_iterable, from_awaitable, to_observable

__all__ = [
    "SynchronousScheduler",
    "combine_latest_dict",
    "combine_latest_list",
    "from_async_iterable",
    "from_awaitable",
    "to_observable",
]
