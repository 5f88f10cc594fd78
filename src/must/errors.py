"""Failure types: the raised MustError, its struct variant, and sentinel errors."""

from __future__ import annotations

from typing import Any

import msgspec

__all__ = [
    'ERR_CAST',
    'ERR_GET',
    'ERR_HOLD',
    'Failure',
    'MustError',
    'SentinelError',
]


def _render(ctx: str, file: str, line: int, error: object) -> str:
    return f'must({ctx}) |{file}:{line}| failed with: {error}'


# --- Sentinel errors ---


class SentinelError(Exception):
    """Fixed error value identifying which assertion kind failed.

    Instances are module-level singletons compared by identity
    (``failure.err is ERR_HOLD``). They are never raised on their own.
    Pickling and copying resolve to the same module-level object.
    """

    def __init__(self, message: str, *, name: str | None = None) -> None:
        """Initialize SentinelError.

        Args:
            message: Fixed error message.
            name: Name of the module-level constant holding this instance.
        """
        super().__init__(message)
        self._name = name

    def __reduce__(self) -> str | tuple[Any, ...]:
        if self._name is None:
            return super().__reduce__()
        return self._name


ERR_HOLD = SentinelError('condition did not hold true', name='ERR_HOLD')
"""Underlying error of a failure raised by ``hold``/``holdf``."""

ERR_GET = SentinelError('value is not in a map', name='ERR_GET')
"""Underlying error of a failure raised by ``get``/``getf``."""

ERR_CAST = SentinelError('type assertion failed', name='ERR_CAST')
"""Underlying error of a failure raised by ``cast``/``castf``."""


# --- Failure record ---


class MustError(Exception):
    """Exception raised when a must function catches an error.

    Carries the underlying error, an optional context string and the
    source location of the call that detected the failure. Instances are
    built by the library at the moment a failure is detected; the location
    is always the user's call site, never a frame inside this package.

    ``str(failure)`` has a fixed layout that logs and tools may rely on:

        must({ctx}) |{file}:{line}| failed with: {err}
    """

    __slots__ = ('_ctx', '_err', '_file', '_line')

    def __init__(self, err: Any, ctx: str = '', file: str = '', line: int = 0) -> None:
        """Initialize MustError.

        Args:
            err: The caller's error for ``do*``/``must`` functions, or one of
                the sentinel errors for ``hold``/``get``/``cast``.
            ctx: Formatted context string, ``''`` when none was supplied.
            file: File of the call site that detected the failure.
            line: Line number of that call site.
        """
        self._err = err
        self._ctx = ctx
        self._file = file
        self._line = line
        super().__init__(err, ctx, file, line)
        if isinstance(err, BaseException):
            self.__cause__ = err

    @property
    def err(self) -> Any:
        """The underlying error."""
        return self._err

    @property
    def ctx(self) -> str:
        """The formatted context, ``''`` if the plain variant was used."""
        return self._ctx

    @property
    def file(self) -> str:
        """Source file where the failing must function was called."""
        return self._file

    @property
    def line(self) -> int:
        """Source line where the failing must function was called."""
        return self._line

    def __str__(self) -> str:
        return _render(self._ctx, self._file, self._line, self._err)

    def to_struct(self) -> Failure:
        """Convert to struct for structured logs and Result-based code."""
        return Failure(
            error=str(self._err),
            kind=type(self._err).__name__,
            ctx=self._ctx,
            file=self._file,
            line=self._line,
        )


class Failure(msgspec.Struct, frozen=True, gc=False):
    """Serializable snapshot of a MustError - struct variant.

    The underlying error is kept as its string form and type name, so the
    struct can be encoded and shipped to logs or other processes.
    """

    error: str
    kind: str
    ctx: str
    file: str
    line: int

    def __str__(self) -> str:
        return _render(self.ctx, self.file, self.line, self.error)

    def encode(self) -> bytes:
        """Encode as JSON bytes."""
        return msgspec.json.encode(self)

    @classmethod
    def decode(cls, data: bytes | str) -> Failure:
        """Decode JSON produced by ``encode()``.

        Raises:
            msgspec.ValidationError: If the payload does not match the struct.
        """
        return msgspec.json.decode(data, type=cls)
