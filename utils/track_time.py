import inspect
import logging
import time
from functools import wraps

import pytest

logger = logging.getLogger(__name__)

# Low-level calls that happen on every step; only recorded when they are slow
TO_EXCLUDE = ['goto', 'click', 'fill', 'select_option', 'wait_until_hidden', 'wait_until_visible',
              'wait_until_enabled']
SLOW_CALL_SECONDS = 5
WARN_CALL_SECONDS = 10


def _call_name(func, args) -> str:
    """
    Qualify bound calls with the owner class, e.g. ``CartPage.proceed_to_checkout``.
    """
    if args and not inspect.isclass(args[0]) and hasattr(args[0], func.__name__):
        return f"{type(args[0]).__name__}.{func.__name__}"
    return func.__name__


def track_execution_time(func):
    """
    Decorator to measure the execution time of page-object methods and fixtures.

    Each call is appended to ``item.execution_log`` of the currently running pytest item as an
    indented line, so nested calls read as a hierarchy. The root conftest attaches the log to the
    report when a test fails. Functions in TO_EXCLUDE are only recorded if they take longer than
    SLOW_CALL_SECONDS; anything over WARN_CALL_SECONDS is logged as a warning.

    Args:
        func (callable): The function or fixture to wrap.

    Returns:
        callable: The wrapped function.
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        item = getattr(pytest, 'current_item', None)
        if not item:
            return func(*args, **kwargs)

        if not hasattr(item, 'execution_log'):
            item.execution_log = []
        if not hasattr(item, 'call_stack'):
            item.call_stack = []

        function_name = _call_name(func, args)
        path = inspect.stack()[1].filename
        func_type = 'fixture' if 'fixture' in path or 'conftest' in path else 'function'

        current_call = {'name': function_name, 'type': func_type, 'level': len(item.call_stack)}
        item.call_stack.append(current_call)

        start_time = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            execution_time = time.perf_counter() - start_time

            indent = '  ' * current_call['level']
            log_entry = f"{indent}{func_type} - {function_name}: {execution_time:.4f} seconds"

            if func.__name__ not in TO_EXCLUDE or execution_time > SLOW_CALL_SECONDS:
                # Element wrappers expose the selector they act on
                selector = getattr(args[0], 'selector', None) if args else None
                if func.__name__ in TO_EXCLUDE and selector:
                    log_entry = f"{indent}{func_type} - {function_name}({selector}): {execution_time:.4f} seconds"
                if execution_time > WARN_CALL_SECONDS:
                    logger.warning(f"{function_name} took over {WARN_CALL_SECONDS} seconds to execute: "
                                   f"{execution_time:.4f} seconds")
                logger.debug(log_entry)
                item.execution_log.append((start_time, log_entry))

            item.call_stack.pop()

    return wrapper
