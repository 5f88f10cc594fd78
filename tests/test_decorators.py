"""Tests for the @recover boundary decorator."""

import asyncio
from typing import Any

import pytest

import must
from must import MustError, add_log_hook, recover

from tests.helpers import NOT_ODD, inc_odd, inc_odd2


class TestRecoverSync:
    """Tests for @recover on regular functions."""

    def test_success_returns_unchanged(self):
        @recover(0)
        def inc(n: int) -> tuple[int, Exception | None]:
            return must.do(*inc_odd(n)).r(), None

        assert inc(1) == (2, None)

    def test_failure_returns_zero_and_err(self):
        @recover(0)
        def inc(n: int) -> tuple[int, Exception | None]:
            return must.do(*inc_odd(n)).r(), None

        assert inc(0) == (0, NOT_ODD)

    def test_multiple_zero_values(self):
        @recover(0, 0)
        def inc2(n: int) -> tuple[int, int, Exception | None]:
            r1, r2 = must.do2(*inc_odd2(n)).rf('inc_odd2(%d)', n)
            return r1, r2, None

        assert inc2(1) == (2, 3, None)
        assert inc2(2) == (0, 0, NOT_ODD)

    def test_no_zero_values_returns_err_only(self):
        @recover()
        def start(err: Exception | None) -> Exception | None:
            must.must(err)
            return None

        assert start(None) is None
        assert start(NOT_ODD) is NOT_ODD

    def test_bare_decorator(self):
        @recover
        def start(err: Exception | None) -> Exception | None:
            must.must(err)
            return None

        assert start.__name__ == 'start'
        assert start(None) is None
        assert start(NOT_ODD) is NOT_ODD

    def test_bare_decorator_on_method(self):
        class Service:
            @recover
            def start(self, ok: bool) -> Exception | None:
                must.hold(ok)
                return None

        assert Service().start(True) is None
        assert Service().start(False) is must.ERR_HOLD

    def test_callable_zero_value_with_second_zero_value(self):
        def fallback() -> int:
            return 0

        @recover(fallback, None)
        def pick(n: int) -> tuple[Any, Any, Exception | None]:
            must.hold(n > 0)
            return len, n, None

        assert pick(1) == (len, 1, None)
        assert pick(0) == (fallback, None, must.ERR_HOLD)

    def test_zero_value_none(self):
        @recover(None)
        def lookup(key: str) -> tuple[int | None, Exception | None]:
            return must.get({'a': 1}, key), None

        assert lookup('a') == (1, None)
        assert lookup('b') == (None, must.ERR_GET)

    def test_on_failure_return_value_is_used(self):
        @recover(on_failure=lambda failure: f'failed: {failure.ctx}')
        def check(n: int) -> str:
            must.holdf(n > 0, 'n=%d', n)
            return 'ok'

        assert check(1) == 'ok'
        assert check(-1) == 'failed: n=-1'

    def test_on_failure_receives_must_error(self):
        seen: list[MustError] = []

        @recover(on_failure=seen.append)
        def check() -> None:
            must.hold(False)

        check()
        assert len(seen) == 1
        assert seen[0].err is must.ERR_HOLD
        assert seen[0].file == __file__

    def test_on_failure_takes_precedence_over_zero_values(self):
        @recover(0, on_failure=lambda failure: 'handled')
        def fail() -> tuple[int, Exception | None]:
            must.hold(False)
            return 1, None

        assert fail() == 'handled'

    def test_unrelated_exception_propagates(self):
        @recover(0)
        def broken() -> tuple[int, Exception | None]:
            raise KeyError('defect')

        with pytest.raises(KeyError, match='defect'):
            broken()

    def test_base_exception_propagates(self):
        @recover(0)
        def interrupted() -> tuple[int, Exception | None]:
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            interrupted()

    def test_nested_boundaries_innermost_wins(self):
        @recover('inner')
        def inner() -> tuple[str, Exception | None]:
            must.hold(False)
            return 'unreachable', None

        @recover('outer')
        def outer() -> tuple[str, Exception | None]:
            value, err = inner()
            must.must(err)
            return value, None

        assert inner() == ('inner', must.ERR_HOLD)
        assert outer() == ('outer', must.ERR_HOLD)

    def test_preserves_function_name(self):
        @recover()
        def my_function() -> None:
            pass

        assert my_function.__name__ == 'my_function'

    def test_with_kwargs(self):
        @recover('')
        def greet(name: str, greeting: str = 'Hello') -> tuple[str, Exception | None]:
            must.holdf(bool(name), 'name required')
            return f'{greeting}, {name}!', None

        assert greet(name='Python', greeting='Hi') == ('Hi, Python!', None)
        assert greet(name='') == ('', must.ERR_HOLD)

    def test_method(self):
        class Registry:
            def __init__(self) -> None:
                self.items = {'a': 1}

            @recover(0)
            def lookup(self, key: str) -> tuple[int, Exception | None]:
                return must.getf(self.items, key, 'items[%r]', key), None

        registry = Registry()
        assert registry.lookup('a') == (1, None)
        assert registry.lookup('z') == (0, must.ERR_GET)


class TestRecoverAsync:
    """Tests for @recover on async functions."""

    async def test_success(self):
        @recover(0)
        async def fetch(n: int) -> tuple[int, Exception | None]:
            await asyncio.sleep(0)
            return must.do(*inc_odd(n)).r(), None

        assert await fetch(1) == (2, None)

    async def test_failure(self):
        @recover(0)
        async def fetch(n: int) -> tuple[int, Exception | None]:
            await asyncio.sleep(0)
            return must.do(*inc_odd(n)).r(), None

        assert await fetch(0) == (0, NOT_ODD)

    async def test_cancellation_propagates(self):
        @recover(0)
        async def cancelled() -> tuple[int, Exception | None]:
            raise asyncio.CancelledError

        with pytest.raises(asyncio.CancelledError):
            await cancelled()

    async def test_on_failure(self):
        @recover(on_failure=lambda failure: failure.ctx)
        async def check(n: int) -> str:
            must.holdf(n > 0, 'n=%d', n)
            return 'ok'

        assert await check(-2) == 'n=-2'

    async def test_bare_decorator(self):
        @recover
        async def start(err: Exception | None) -> Exception | None:
            await asyncio.sleep(0)
            must.must(err)
            return None

        assert await start(None) is None
        assert await start(NOT_ODD) is NOT_ODD


class TestRecoverLogging:
    """Recovered failures are logged only when logging is configured."""

    @staticmethod
    def _capture() -> list[dict[str, Any]]:
        received: list[dict[str, Any]] = []
        add_log_hook(received.append)
        return received

    @staticmethod
    def _recovered(received: list[dict[str, Any]]) -> list[dict[str, Any]]:
        return [e for e in received if e.get('event') == 'must.recovered']

    def test_logs_recovered_failure(self):
        must.init(log_level='DEBUG')
        received = self._capture()

        @recover(0)
        def inc(n: int) -> tuple[int, Exception | None]:
            return must.do(*inc_odd(n)).rf('inc_odd(%d)', n), None

        inc(0)

        entries = self._recovered(received)
        assert len(entries) == 1
        entry = entries[0]
        assert entry['boundary'].endswith('inc')
        assert entry['error'] == 'not an odd int'
        assert entry['kind'] == 'NotOddError'
        assert entry['ctx'] == 'inc_odd(0)'
        assert entry['file'] == __file__
        assert isinstance(entry['line'], int)
        assert 'failure' not in entry

    def test_silent_without_init(self):
        must.configure_logging('DEBUG')
        received = self._capture()

        @recover(0)
        def inc(n: int) -> tuple[int, Exception | None]:
            return must.do(*inc_odd(n)).r(), None

        assert inc(0) == (0, NOT_ODD)
        assert self._recovered(received) == []

    def test_log_recovered_disabled(self):
        must.init(log_level='DEBUG', log_recovered=False)
        received = self._capture()

        @recover(0)
        def inc(n: int) -> tuple[int, Exception | None]:
            return must.do(*inc_odd(n)).r(), None

        inc(0)
        assert self._recovered(received) == []

    def test_success_is_not_logged(self):
        must.init(log_level='DEBUG')
        received = self._capture()

        @recover(0)
        def inc(n: int) -> tuple[int, Exception | None]:
            return must.do(*inc_odd(n)).r(), None

        inc(1)
        assert self._recovered(received) == []
