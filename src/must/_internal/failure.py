"""Construction of MustError at the point a failure is detected.

Every public function that can fail calls ``new_error`` directly, so the
user's frame is always exactly two levels above it:

    new_error -> public must function -> user code
"""

from __future__ import annotations

import sys
from collections.abc import Mapping
from typing import Any

from must.errors import MustError

__all__ = ['format_context', 'new_error']

# Frames between new_error and the user's call site.
_CALLER_DEPTH = 2


def format_context(ctx_format: str, ctx_args: tuple[Any, ...]) -> str:
    """Format a context string the way ``logging`` formats messages.

    The format is used as is when there are no arguments. A single non-empty
    mapping argument fills named placeholders such as ``%(key)s``.
    """
    if not ctx_args:
        return ctx_format
    if len(ctx_args) == 1 and isinstance(ctx_args[0], Mapping) and ctx_args[0]:
        return ctx_format % ctx_args[0]
    return ctx_format % ctx_args


def new_error(err: Any, ctx_format: str, ctx_args: tuple[Any, ...]) -> MustError:
    """Build a MustError attributed to the caller of the calling must function."""
    frame = sys._getframe(_CALLER_DEPTH)  # noqa: SLF001
    return MustError(
        err,
        format_context(ctx_format, ctx_args),
        frame.f_code.co_filename,
        frame.f_lineno,
    )
