"""Lift arbitrary values into observables"""

from __future__ import annotations

from asyncio import ensure_future
from typing import Any, AsyncIterable, Awaitable

import reactivex as rx
from graphql.pyutils import is_awaitable
from reactivex import Observable, abc
from reactivex.disposable import Disposable

__all__ = ["from_async_iterable", "from_awaitable", "to_observable"]


def to_observable(value: Any) -> Observable[Any]:
    """Return an observable for the given value.

    Observables are passed through, awaitables produce a single value once they are
    done and async iterables produce all of their values. Any other value, including
    None and collections, is emitted once.
    """
    if isinstance(value, Observable):
        return value
    if is_awaitable(value):
        return from_awaitable(value)
    if isinstance(value, AsyncIterable):
        return from_async_iterable(value)
    return rx.of(value)


def from_awaitable(awaitable: Awaitable[Any]) -> Observable[Any]:
    """Create an observable emitting the result of an awaitable.

    The awaitable is scheduled on the running event loop when subscribed, and
    cancelled when the subscription is disposed before it is done.
    """
    return rx.defer(lambda _scheduler: rx.from_future(ensure_future(awaitable)))


def from_async_iterable(iterable: AsyncIterable[Any]) -> Observable[Any]:
    """Create an observable emitting the values of an async iterable.

    The iterable is consumed by a task on the running event loop which is started
    when subscribed and cancelled when the subscription is disposed.
    """

    def subscribe(
        observer: abc.ObserverBase[Any], _scheduler: abc.SchedulerBase | None = None
    ) -> abc.DisposableBase:
        async def pump() -> None:
            try:
                async for value in iterable:
                    observer.on_next(value)
            except Exception as error:
                observer.on_error(error)
            else:
                observer.on_completed()

        task = ensure_future(pump())
        return Disposable(task.cancel)

    return rx.create(subscribe)
