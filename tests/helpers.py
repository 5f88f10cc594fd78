"""Functions following the (values..., error) return convention, for tests."""

from __future__ import annotations


class NotOddError(Exception):
    """Error returned by the inc_odd helpers for even arguments."""


NOT_ODD = NotOddError('not an odd int')


def inc_odd(arg: int) -> tuple[int, Exception | None]:
    if arg % 2 != 0:
        return arg + 1, None
    return 0, NOT_ODD


def inc_odd2(arg: int) -> tuple[int, int, Exception | None]:
    if arg % 2 != 0:
        return arg + 1, arg + 2, None
    return 0, 0, NOT_ODD


def inc_odd3(arg: int) -> tuple[int, int, int, Exception | None]:
    if arg % 2 != 0:
        return arg + 1, arg + 2, arg + 3, None
    return 0, 0, 0, NOT_ODD


def inc_odd4(arg: int) -> tuple[int, int, int, int, Exception | None]:
    if arg % 2 != 0:
        return arg + 1, arg + 2, arg + 3, arg + 4, None
    return 0, 0, 0, 0, NOT_ODD
