"""Per-record error containment for batch processing."""
from typing import Callable, Any
from placeshape.utils.logging import log_error, log_structured


def safe_execute(
    func: Callable,
    *args,
    default_return: Any = None,
    context: dict = None,
    level: str = "error",
    **kwargs
) -> Any:
    """
    Safely execute a function and return default value on error.

    Args:
        func: Function to execute
        *args: Positional arguments
        default_return: Value to return on error
        context: Extra fields attached to the log entry (record ids, ...)
        level: "error" logs the traceback and forwards to error tracking;
            any lower level logs a one-line diagnostic only
        **kwargs: Keyword arguments

    Returns:
        Function result or default_return on error
    """
    try:
        return func(*args, **kwargs)
    except Exception as e:
        fields = {
            "module": getattr(func, '__module__', 'unknown'),
            "function": getattr(func, '__name__', 'unknown'),
            "safe_execute": True,
            **(context or {}),
        }
        if level == "error":
            log_error(e, fields)
        else:
            log_structured(
                level,
                f"{type(e).__name__}: {e}",
                error_type=type(e).__name__,
                error_message=str(e),
                **fields
            )
        return default_return
