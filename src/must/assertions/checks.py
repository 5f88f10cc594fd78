"""Raise-or-pass helpers that do not go through a result holder.

- must/mustf: raise on a non-None error
- hold/holdf: raise on a failed condition
- get/getf: look a key up in a mapping, raise if it is missing
- cast/castf: check a value's runtime type, raise if it does not match

The ``*f`` variants take ``ctx_format`` and ``ctx_args`` and attach
``ctx_format % ctx_args`` as ``MustError.ctx``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Final

from must._internal.failure import new_error
from must.errors import ERR_CAST, ERR_GET, ERR_HOLD

__all__ = ['cast', 'castf', 'get', 'getf', 'hold', 'holdf', 'must', 'mustf']

_MISSING: Final = object()


def must(err: BaseException | None) -> None:
    """Raise MustError if err is not None.

    Useful when a call returns nothing but an error.

    Example:
        ```python
        must.must(proc.start())
        ```
    """
    if err is not None:
        raise new_error(err, '', ())


def mustf(err: BaseException | None, ctx_format: str, *ctx_args: Any) -> None:
    """Behave as ``must`` but attach a formatted context."""
    if err is not None:
        raise new_error(err, ctx_format, ctx_args)


def hold(cond: bool) -> None:
    """Raise MustError with ``err is ERR_HOLD`` if cond is false.

    Example:
        ```python
        must.hold(key in registry)
        ```
    """
    if not cond:
        raise new_error(ERR_HOLD, '', ())


def holdf(cond: bool, ctx_format: str, *ctx_args: Any) -> None:
    """Behave as ``hold`` but attach a formatted context."""
    if not cond:
        raise new_error(ERR_HOLD, ctx_format, ctx_args)


def get[K, V](mapping: Mapping[K, V], key: K) -> V:
    """Return ``mapping[key]``, raising MustError with ``err is ERR_GET`` if absent.

    The mapping is only read: a ``defaultdict`` does not create the key.
    """
    value = mapping.get(key, _MISSING)
    if value is _MISSING:
        raise new_error(ERR_GET, '', ())
    return value  # type: ignore[return-value]


def getf[K, V](mapping: Mapping[K, V], key: K, ctx_format: str, *ctx_args: Any) -> V:
    """Behave as ``get`` but attach a formatted context."""
    value = mapping.get(key, _MISSING)
    if value is _MISSING:
        raise new_error(ERR_GET, ctx_format, ctx_args)
    return value  # type: ignore[return-value]


def cast[T](to: type[T], value: object) -> T:
    """Return value typed as ``to``, raising MustError with ``err is ERR_CAST`` on mismatch.

    The check is ``isinstance(value, to)``, so subclasses, ABCs and tuples
    of types are accepted.

    Example:
        ```python
        name = must.cast(str, payload['name'])
        ```
    """
    if not isinstance(value, to):
        raise new_error(ERR_CAST, '', ())
    return value


def castf[T](to: type[T], value: object, ctx_format: str, *ctx_args: Any) -> T:
    """Behave as ``cast`` but attach a formatted context."""
    if not isinstance(value, to):
        raise new_error(ERR_CAST, ctx_format, ctx_args)
    return value
