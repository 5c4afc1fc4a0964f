"""Iterate over observables asynchronously"""

from __future__ import annotations

from asyncio import Queue
from typing import Any, AsyncIterator, NamedTuple

from reactivex import Observable

__all__ = ["ObservableIterator"]


class Notification(NamedTuple):
    value: Any = None
    error: Exception | None = None
    done: bool = False


class ObservableIterator(AsyncIterator):
    """Async iterator over the values emitted by an observable.

    The observable is subscribed immediately, and emitted values are queued until
    they are pulled. An error emitted by the observable is raised when it is pulled.
    Closing the iterator disposes the subscription.
    """

    def __init__(self, observable: Observable[Any]) -> None:
        self.push_queue: Queue[Notification] = Queue()
        self.listening = True
        self.disposable = observable.subscribe(
            on_next=self.push_value,
            on_error=self.push_error,
            on_completed=self.push_completed,
        )

    def __aiter__(self) -> ObservableIterator:
        return self

    async def __anext__(self) -> Any:
        if not self.listening and self.push_queue.empty():
            raise StopAsyncIteration
        notification = await self.push_queue.get()
        if notification.done:
            self.listening = False
            raise StopAsyncIteration
        if notification.error is not None:
            self.listening = False
            raise notification.error
        return notification.value

    async def aclose(self) -> None:
        """Close the iterator."""
        if self.listening:
            self.empty_queue()

    def empty_queue(self) -> None:
        """Dispose the subscription and empty the queue."""
        self.listening = False
        self.disposable.dispose()
        while not self.push_queue.empty():
            self.push_queue.get_nowait()
        # release a pending pull
        self.push_queue.put_nowait(Notification(done=True))

    def push_value(self, value: Any) -> None:
        """Push a new value."""
        self.push_queue.put_nowait(Notification(value))

    def push_error(self, error: Exception) -> None:
        """Push an error terminating the iteration."""
        self.push_queue.put_nowait(Notification(error=error))

    def push_completed(self) -> None:
        """Push the end of the iteration."""
        self.push_queue.put_nowait(Notification(done=True))
