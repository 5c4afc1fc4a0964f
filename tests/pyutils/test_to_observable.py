from asyncio import Event, sleep

import reactivex as rx
from pytest import mark

from reactive_graphql.pyutils import to_observable

from ..utils import observe


def describe_to_observable():
    def passes_observables_through():
        observable = rx.of(1, 2)
        assert to_observable(observable) is observable

    def emits_plain_values_once():
        observed = observe(to_observable(42))
        assert observed.values == [42]
        assert observed.completed

    def emits_none_once():
        observed = observe(to_observable(None))
        assert observed.values == [None]
        assert observed.completed

    def emits_collections_as_one_value():
        observed = observe(to_observable([1, 2, 3]))
        assert observed.values == [[1, 2, 3]]

    @mark.asyncio
    async def emits_result_of_awaitables():
        async def get_value():
            await sleep(0)
            return "value"

        observed = observe(to_observable(get_value()))
        assert observed.values == []
        await sleep(0.01)
        assert observed.values == ["value"]
        assert observed.completed

    @mark.asyncio
    async def emits_error_of_awaitables():
        error = ValueError("oops")

        async def get_value():
            raise error

        observed = observe(to_observable(get_value()))
        await sleep(0.01)
        assert observed.error is error

    @mark.asyncio
    async def emits_values_of_async_iterables():
        async def get_values():
            for value in range(3):
                await sleep(0)
                yield value

        observed = observe(to_observable(get_values()))
        await sleep(0.01)
        assert observed.values == [0, 1, 2]
        assert observed.completed

    @mark.asyncio
    async def disposing_cancels_async_iteration():
        stopped = Event()
        values = []

        async def get_values():
            try:
                for value in range(100):
                    values.append(value)
                    yield value
                    await sleep(0)
            finally:
                stopped.set()

        observed = observe(to_observable(get_values()))
        await sleep(0)
        observed.dispose()
        await sleep(0.01)
        assert stopped.is_set()
        assert len(values) < 100
        assert not observed.completed
