"""Combine the latest values of several observables"""

from __future__ import annotations

from typing import Any, Sequence

import reactivex as rx
from reactivex import Observable
from reactivex import operators as ops

__all__ = ["combine_latest_dict", "combine_latest_list"]


def combine_latest_list(sources: Sequence[Observable[Any]]) -> Observable[list[Any]]:
    """Combine observables into an observable of lists.

    A new list with the latest value of every source is emitted whenever one of the
    sources emits, once all of them have emitted at least once. Without sources, an
    empty list is emitted once.
    """
    if not sources:
        return rx.from_callable(list)
    return rx.combine_latest(*sources).pipe(ops.map(list))


def combine_latest_dict(
    keys: Sequence[str], sources: Sequence[Observable[Any]]
) -> Observable[dict[str, Any]]:
    """Combine observables into an observable of dicts with the given keys.

    The keys keep the given order. Otherwise, this works like
    :func:`combine_latest_list`.
    """
    if not sources:
        return rx.from_callable(dict)
    keys = list(keys)
    return rx.combine_latest(*sources).pipe(
        ops.map(lambda values: dict(zip(keys, values)))
    )
