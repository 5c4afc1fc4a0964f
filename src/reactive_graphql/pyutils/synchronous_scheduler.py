"""Scheduler running actions synchronously"""

from __future__ import annotations

from typing import Any

from reactivex import abc, typing
from reactivex.scheduler import TimeoutScheduler
from reactivex.scheduler.periodicscheduler import PeriodicScheduler

__all__ = ["SynchronousScheduler"]


class SynchronousScheduler(PeriodicScheduler):
    """Scheduler running actions without delay on the current thread.

    Unlike the trampoline used by default, an action scheduled while another action
    runs is not queued, but runs before the schedule call returns. Executions are
    subscribed with this scheduler, so that single values emitted by streams such as
    ``reactivex.of`` are processed depth-first.

    Actions with a due time in the future are handed over to the timeout scheduler,
    so that timer based streams which do not specify a scheduler keep working.
    """

    def schedule(
        self, action: typing.ScheduledAction[Any], state: Any = None
    ) -> abc.DisposableBase:
        return self.invoke_action(action, state)

    def schedule_relative(
        self,
        duetime: typing.RelativeTime,
        action: typing.ScheduledAction[Any],
        state: Any = None,
    ) -> abc.DisposableBase:
        if self.to_seconds(duetime) > 0:
            return TimeoutScheduler.singleton().schedule_relative(
                duetime, action, state
            )
        return self.invoke_action(action, state)

    def schedule_absolute(
        self,
        duetime: typing.AbsoluteTime,
        action: typing.ScheduledAction[Any],
        state: Any = None,
    ) -> abc.DisposableBase:
        return self.schedule_relative(
            self.to_datetime(duetime) - self.now, action, state
        )
