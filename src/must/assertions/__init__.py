"""Direct assertions: must, hold, get, cast and their formatted variants."""

from must.assertions.checks import cast, castf, get, getf, hold, holdf, must, mustf

__all__ = [
    'cast',
    'castf',
    'get',
    'getf',
    'hold',
    'holdf',
    'must',
    'mustf',
]
