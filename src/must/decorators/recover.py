"""@recover decorator: a recovery boundary that turns MustError into a return value."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from typing import Any, ParamSpec, TypeVar, overload

import wrapt

from must._config import get_config
from must._logging import get_logger
from must.errors import MustError
from must.recovery import as_err_or_raise

__all__ = ['recover']

P = ParamSpec('P')
T = TypeVar('T')


def _log_recovered(failure: MustError, boundary: str) -> None:
    config = get_config()
    if config.log_level is None or not config.log_recovered:
        return
    get_logger(__name__).debug('must.recovered', boundary=boundary, failure=failure)


@overload
def recover(func: Callable[P, T], /) -> Callable[P, Any]: ...


@overload
def recover(
    *zero_values: Any,
    on_failure: Callable[[MustError], Any] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, Any]]: ...


def recover(
    *zero_values: Any,
    on_failure: Callable[[MustError], Any] | None = None,
) -> Any:
    """Decorator that installs a recovery boundary around a function.

    A MustError raised anywhere below the decorated function is caught and
    mapped to a return value. Any other exception propagates unchanged.

    Automatically detects async functions and handles them appropriately.

    Can be used with or without arguments:
        @must.recover
        def load() -> Exception | None: ...

        @must.recover(0, '')
        def parse() -> tuple[int, str, Exception | None]: ...

    Used bare, a single callable argument is the function being decorated.
    A callable zero value therefore needs a second zero value or
    ``on_failure``.

    Args:
        *zero_values: Values returned in place of the function's results.
            On failure the boundary returns ``(*zero_values, failure.err)``,
            or just ``failure.err`` when no zero values are given.
        on_failure: Called with the MustError instead; its return value
            becomes the function's return value.

    Returns:
        The wrapped function when used bare, otherwise a decorator.

    Example:
        ```python
        @must.recover(0)
        def lots_of_early_returns() -> tuple[int, Exception | None]:
            r1 = must.do(*might_fail1()).r()
            r2 = must.do(*might_fail2(r1)).rf('might_fail2(%d)', r1)
            return must.do(*might_fail3(r2)).r(), None

        value, err = lots_of_early_returns()  # (0, err) on any failure
        ```
    """
    if len(zero_values) == 1 and on_failure is None and callable(zero_values[0]):
        return recover()(zero_values[0])

    def recovered(failure: MustError, boundary: str) -> Any:
        _log_recovered(failure, boundary)
        if on_failure is not None:
            return on_failure(failure)
        if zero_values:
            return (*zero_values, failure.err)
        return failure.err

    def decorate(func: Callable[P, T]) -> Callable[P, T]:
        boundary = getattr(func, '__qualname__', repr(func))

        if inspect.iscoroutinefunction(func):

            @wrapt.decorator
            async def async_wrapper(
                wrapped: Callable[P, Awaitable[Any]],
                instance: Any,
                args: tuple[Any, ...],
                kwargs: dict[str, Any],
            ) -> Any:
                try:
                    return await wrapped(*args, **kwargs)
                except BaseException as exc:  # noqa: BLE001
                    failure, _ = as_err_or_raise(exc)
                    return recovered(failure, boundary)  # type: ignore[arg-type]

            return async_wrapper(func)  # type: ignore[return-value]

        @wrapt.decorator
        def sync_wrapper(
            wrapped: Callable[P, T],
            instance: Any,
            args: tuple[Any, ...],
            kwargs: dict[str, Any],
        ) -> Any:
            try:
                return wrapped(*args, **kwargs)
            except BaseException as exc:  # noqa: BLE001
                failure, _ = as_err_or_raise(exc)
                return recovered(failure, boundary)  # type: ignore[arg-type]

        return sync_wrapper(func)  # type: ignore[return-value]

    return decorate
