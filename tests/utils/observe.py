from typing import Any, List

from reactivex import Observable
from reactivex.abc import DisposableBase

__all__ = ["Observed", "observe"]


class Observed:
    """Everything an observable emitted so far."""

    values: List[Any]
    errors: List[Exception]
    completed: bool
    disposable: DisposableBase

    def __init__(self, observable: Observable) -> None:
        self.values = []
        self.errors = []
        self.completed = False
        self.disposable = observable.subscribe(
            on_next=self.values.append,
            on_error=self.errors.append,
            on_completed=self.on_completed,
        )

    def on_completed(self) -> None:
        self.completed = True

    @property
    def error(self) -> Exception:
        assert len(self.errors) == 1
        return self.errors[0]

    def dispose(self) -> None:
        self.disposable.dispose()


def observe(observable: Observable) -> Observed:
    """Subscribe to the observable and record what it emits."""
    return Observed(observable)
