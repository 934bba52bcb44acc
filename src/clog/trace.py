"""
Function tracing decorator.

Routes trace output through the 'Debug' profile of the module-level manager,
so it obeys that profile's sinks, decorations, and the global min_level.
Nothing is traced unless ClogConfig.trace is on.
"""

import functools
import inspect
from pathlib import Path


def _short_repr(value, key=None):
    if isinstance(value, Path):
        text = f"Path('{value}')"
    elif isinstance(value, str) and len(value) > 50:
        text = f"'{value[:47]}...'"
    elif isinstance(value, (list, tuple)) and len(value) > 3:
        text = f"[...{len(value)} items...]"
    else:
        text = repr(value)
    return f"{key}={text}" if key else text


def trace(func):
    """Decorator to trace function calls via the 'Debug' profile.

    Shows entry with arguments, exit with the return value (if not None),
    and any exception raised, when ClogConfig.trace is enabled.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        # Lazy import to avoid circular dependency
        from .manager import get_clog

        clog = get_clog()
        if not clog.config.trace:
            return func(*args, **kwargs)

        log = clog.lookup('Debug')
        module = inspect.getmodule(func)
        where = f"{module.__name__ if module else 'unknown'}.{func.__qualname__}"

        args_repr = [_short_repr(a) for a in args]
        args_repr += [_short_repr(v, k) for k, v in kwargs.items()]
        log.printf("[TRACE] >> %s(%s)", where, ', '.join(args_repr))

        try:
            result = func(*args, **kwargs)
        except Exception as e:
            log.printf("[TRACE] !! %s raised: %s: %s", where, type(e).__name__, e)
            raise

        if result is not None:
            log.printf("[TRACE] << %s returned: %s", where, _short_repr(result))
        return result

    return wrapper
