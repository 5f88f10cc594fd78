"""must: get rid of "check error, propagate, return" boilerplate.

Wraps the values and error returned by a call, then either returns the
values or raises a MustError that records the caller's file and line. A
recovery boundary turns the MustError back into an ordinary return value.

Flat imports (preferred):
    import must

    f1 = must.do(*open_file('file1')).r()
    f2 = must.do(*open_file('file2')).rf('open_file(%s)', 'file2')
    must.mustf(proc.start(), 'proc start')
    must.hold(key in registry)
    value = must.getf(registry, key, 'registry[%r]', key)
    text = must.cast(str, payload)

Submodule imports (for organization):
    from must.holders import do, do2, do3, do4
    from must.assertions import must, hold, get, cast
    from must.recovery import as_err_or_raise
    from must.decorators import recover
"""

# Configuration
from must._config import MustConfig, get_config, init

# Logging
from must._logging import add_log_hook, clear_log_hooks, configure_logging, remove_log_hook

# Assertions
from must.assertions import cast, castf, get, getf, hold, holdf, must, mustf

# Decorators
from must.decorators import recover

# Errors
from must.errors import ERR_CAST, ERR_GET, ERR_HOLD, Failure, MustError, SentinelError

# Holders
from must.holders import Holder1, Holder2, Holder3, Holder4, do, do2, do3, do4

# Recovery
from must.recovery import as_err_or_raise

__all__ = [
    # Errors
    'ERR_CAST',
    'ERR_GET',
    'ERR_HOLD',
    'Failure',
    # Holders
    'Holder1',
    'Holder2',
    'Holder3',
    'Holder4',
    'MustConfig',
    'MustError',
    'SentinelError',
    # Logging
    'add_log_hook',
    # Recovery
    'as_err_or_raise',
    # Assertions
    'cast',
    'castf',
    'clear_log_hooks',
    'configure_logging',
    'do',
    'do2',
    'do3',
    'do4',
    'get',
    # Configuration
    'get_config',
    'getf',
    'hold',
    'holdf',
    'init',
    'must',
    'mustf',
    # Decorators
    'recover',
    'remove_log_hook',
]
