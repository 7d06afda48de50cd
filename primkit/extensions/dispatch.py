"""
Fire-and-forget execution of zero-argument callables off the calling thread.

dispatch() hands a callable to a shared ThreadPoolExecutor sized by
PRIMKIT_DISPATCH_WORKERS; dispatch_after() runs one on a timer thread after a
delay. Exceptions raised by dispatched work are logged and stay available on
the returned Future.
"""

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, Optional

from primkit.config.settings import get_settings

logger = logging.getLogger(__name__)

Closure = Callable[[], Any]

_executor: Optional[ThreadPoolExecutor] = None
_executor_lock = threading.Lock()


def _get_executor() -> ThreadPoolExecutor:
    global _executor
    with _executor_lock:
        if _executor is None:
            workers = get_settings().dispatch_workers
            _executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="primkit-dispatch")
            logger.debug("Started dispatch pool with %d workers", workers)
        return _executor


def _log_failure(future: Future) -> None:
    error = future.exception()
    if error is not None:
        logger.error("Dispatched work failed: %s", error, exc_info=error)


def dispatch(closure: Closure) -> Future:
    """
    Run closure on the background pool.

    Args:
        closure: Zero-argument callable.

    Returns:
        Future resolving to closure's return value (or its exception).
    """
    future = _get_executor().submit(closure)
    future.add_done_callback(_log_failure)
    return future


def dispatch_after(seconds: float, closure: Closure) -> threading.Timer:
    """
    Run closure once after seconds have passed.

    The timer is a daemon thread and is already started; call cancel() on the
    returned Timer to abort before it fires.
    """
    def run() -> None:
        try:
            closure()
        except Exception:
            logger.exception("Delayed work failed")

    timer = threading.Timer(seconds, run)
    timer.daemon = True
    timer.start()
    return timer


def shutdown_dispatch(wait: bool = True) -> None:
    """Shut the background pool down. The next dispatch() starts a fresh one."""
    global _executor
    with _executor_lock:
        if _executor is not None:
            _executor.shutdown(wait=wait)
            _executor = None
