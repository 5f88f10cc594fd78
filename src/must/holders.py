"""Result holders: capture up to four values plus an error, then extract them.

A holder is built from the return values of a call that reports failure
through an error value, and is consumed right away by ``r()`` or ``rf()``:

    ```python
    import must

    def inc_odd(n: int) -> tuple[int, Exception | None]:
        if n % 2:
            return n + 1, None
        return 0, ValueError('not an odd int')

    value = must.do(*inc_odd(1)).r()  # 2
    value = must.do(*inc_odd(0)).rf('inc_odd(%d)', 0)  # raises MustError
    ```
"""

from __future__ import annotations

from typing import Any

import msgspec

from must._internal.failure import new_error

__all__ = [
    'Holder1',
    'Holder2',
    'Holder3',
    'Holder4',
    'do',
    'do2',
    'do3',
    'do4',
]


class Holder1[T](msgspec.Struct, frozen=True, gc=False):
    """One captured value and an error, as returned by ``do``."""

    result: T
    err: BaseException | None

    def r(self) -> T:
        """Return the value, or raise MustError with ``ctx == ''`` if an error is held."""
        if self.err is not None:
            raise new_error(self.err, '', ())
        return self.result

    def rf(self, ctx_format: str, *ctx_args: Any) -> T:
        """Behave as ``r()`` but attach ``ctx_format % ctx_args`` as the context.

        The context is available as ``MustError.ctx``.
        """
        if self.err is not None:
            raise new_error(self.err, ctx_format, ctx_args)
        return self.result


class Holder2[T1, T2](msgspec.Struct, frozen=True, gc=False):
    """Two captured values and an error, as returned by ``do2``."""

    r1: T1
    r2: T2
    err: BaseException | None

    def r(self) -> tuple[T1, T2]:
        """Return both values, or raise MustError if an error is held."""
        if self.err is not None:
            raise new_error(self.err, '', ())
        return self.r1, self.r2

    def rf(self, ctx_format: str, *ctx_args: Any) -> tuple[T1, T2]:
        """Behave as ``r()`` but attach a formatted context on failure."""
        if self.err is not None:
            raise new_error(self.err, ctx_format, ctx_args)
        return self.r1, self.r2


class Holder3[T1, T2, T3](msgspec.Struct, frozen=True, gc=False):
    """Three captured values and an error, as returned by ``do3``."""

    r1: T1
    r2: T2
    r3: T3
    err: BaseException | None

    def r(self) -> tuple[T1, T2, T3]:
        """Return all three values, or raise MustError if an error is held."""
        if self.err is not None:
            raise new_error(self.err, '', ())
        return self.r1, self.r2, self.r3

    def rf(self, ctx_format: str, *ctx_args: Any) -> tuple[T1, T2, T3]:
        """Behave as ``r()`` but attach a formatted context on failure."""
        if self.err is not None:
            raise new_error(self.err, ctx_format, ctx_args)
        return self.r1, self.r2, self.r3


class Holder4[T1, T2, T3, T4](msgspec.Struct, frozen=True, gc=False):
    """Four captured values and an error, as returned by ``do4``."""

    r1: T1
    r2: T2
    r3: T3
    r4: T4
    err: BaseException | None

    def r(self) -> tuple[T1, T2, T3, T4]:
        """Return all four values, or raise MustError if an error is held."""
        if self.err is not None:
            raise new_error(self.err, '', ())
        return self.r1, self.r2, self.r3, self.r4

    def rf(self, ctx_format: str, *ctx_args: Any) -> tuple[T1, T2, T3, T4]:
        """Behave as ``r()`` but attach a formatted context on failure."""
        if self.err is not None:
            raise new_error(self.err, ctx_format, ctx_args)
        return self.r1, self.r2, self.r3, self.r4


def do[T](result: T, err: BaseException | None) -> Holder1[T]:
    """Capture one value and an error.

    Call ``r()`` or ``rf()`` on the returned holder to get the value.
    """
    return Holder1(result, err)


def do2[T1, T2](r1: T1, r2: T2, err: BaseException | None) -> Holder2[T1, T2]:
    """Capture two values and an error."""
    return Holder2(r1, r2, err)


def do3[T1, T2, T3](r1: T1, r2: T2, r3: T3, err: BaseException | None) -> Holder3[T1, T2, T3]:
    """Capture three values and an error."""
    return Holder3(r1, r2, r3, err)


def do4[T1, T2, T3, T4](
    r1: T1,
    r2: T2,
    r3: T3,
    r4: T4,
    err: BaseException | None,
) -> Holder4[T1, T2, T3, T4]:
    """Capture four values and an error."""
    return Holder4(r1, r2, r3, r4, err)
