"""Decorators: @recover."""

from must.decorators.recover import recover

__all__ = [
    'recover',
]
