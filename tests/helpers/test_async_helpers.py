import asyncio
import time

import pytest

from utilkit import is_async, is_awaitable, resolve, set_immediate, sleep


class TestAsyncHelpers:
    @pytest.mark.asyncio
    async def test_sleep(self):
        started = time.monotonic()

        await sleep(100)

        assert time.monotonic() - started >= 0.09

    @pytest.mark.asyncio
    async def test_set_immediate(self):
        result = await set_immediate(lambda: "text")

        assert result == "text"

    @pytest.mark.asyncio
    async def test_set_immediate_propagates_errors(self):
        def fail():
            raise RuntimeError("nope")

        with pytest.raises(RuntimeError, match="nope"):
            await set_immediate(fail)

    def test_is_async(self):
        async def coroutine_function():
            return None

        def plain():
            return None

        assert is_async(coroutine_function)
        assert not is_async(plain)

    @pytest.mark.asyncio
    async def test_is_awaitable(self):
        async def work():
            return 1

        coroutine = work()
        assert is_awaitable(coroutine)
        assert is_awaitable(asyncio.get_running_loop().create_future())
        assert not is_awaitable(1)
        await coroutine

    class TestResolve:
        @pytest.mark.asyncio
        async def test_awaitable_and_plain_value_match(self):
            async def test1():
                return "test"

            def test2():
                return "test"

            assert await resolve(test1()) == await resolve(test2())

        @pytest.mark.asyncio
        async def test_callback_style_function(self):
            def test3(callback, _reject):
                callback(True)

            assert await resolve(test3) is True

        @pytest.mark.asyncio
        async def test_callback_style_rejection(self):
            def failing(_resolve, reject):
                reject(ValueError("bad"))

            with pytest.raises(ValueError, match="bad"):
                await resolve(failing)
