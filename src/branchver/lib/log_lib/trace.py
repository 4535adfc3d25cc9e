"""
Function tracing decorator.

Writes entry/exit lines through the OutputManager at level 3 on the
'trace' channel.
"""

import functools


def _short(value):
    if isinstance(value, str) and len(value) > 50:
        return f"'{value[:47]}...'"
    if isinstance(value, (list, tuple)) and len(value) > 3:
        return f"[...{len(value)} items...]"
    return repr(value)


def trace(func):
    """Trace calls to func when the 'trace' channel threshold is >= 3."""
    name = f"{func.__module__}.{func.__qualname__}"

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        from .manager import get_output

        out = get_output()
        if out.threshold('trace') < 3:
            return func(*args, **kwargs)

        parts = [_short(a) for a in args]
        parts.extend(f"{k}={_short(v)}" for k, v in kwargs.items())
        out.emit(3, "[TRACE] >> {fn}({args})", channel='trace',
                 fn=name, args=', '.join(parts))
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            out.emit(3, "[TRACE] !! {fn} raised: {exc}: {msg}", channel='trace',
                     fn=name, exc=type(e).__name__, msg=str(e))
            raise
        out.emit(3, "[TRACE] << {fn} returned: {val}", channel='trace',
                 fn=name, val=_short(result))
        return result

    return wrapper
