"""Classifier for exceptions caught at a recovery boundary."""

from __future__ import annotations

from must.errors import MustError

__all__ = ['as_err_or_raise']


def as_err_or_raise(caught: object) -> tuple[MustError | None, bool]:
    """Tell a MustError apart from any other exception caught at a boundary.

    Intended for ``except BaseException`` blocks that turn failures back
    into return values:

        ```python
        def lots_of_early_returns() -> tuple[int, Exception | None]:
            try:
                r1 = must.do(*might_fail1()).r()
                r2 = must.do(*might_fail2(r1)).rf('might_fail2(%d)', r1)
                return r2, None
            except BaseException as exc:
                failure, _ = must.as_err_or_raise(exc)
                return 0, failure.err
        ```

    Args:
        caught: The caught exception, or None if nothing was raised.

    Returns:
        ``(None, False)`` for None, ``(caught, True)`` for a MustError.

    Raises:
        BaseException: ``caught`` itself, unmodified, for any other exception.
            Its ``__context__`` is kept even when called outside the
            handler that caught it.
        TypeError: If ``caught`` is neither None nor an exception.
    """
    if caught is None:
        return None, False
    if isinstance(caught, MustError):
        return caught, True
    if isinstance(caught, BaseException):
        context = caught.__context__
        try:
            raise caught
        finally:
            caught.__context__ = context
    msg = f'Cannot re-raise non-exception object: {caught!r}'
    raise TypeError(msg)
