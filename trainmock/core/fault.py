"""Fault injection hook consulted before serving a request."""

import logging
import threading
from typing import Callable, Optional

from .exceptions import InjectedFault, get_error_message

logger = logging.getLogger(__name__)

FaultFunc = Callable[[str], None]


def no_fault(path: str) -> None:
    """Fault function that lets every request through."""
    return None


def always_fail(path: str) -> None:
    """Fault function that fails every request."""
    raise InjectedFault("FAULT_INJECTED", get_error_message("FAULT_INJECTED"), {"path": path})


def fail_on_paths(*paths: str) -> FaultFunc:
    """Build a fault function that fails only the given request paths."""
    targets = frozenset(paths)

    def _fail(path: str) -> None:
        if path in targets:
            always_fail(path)

    return _fail


class FaultInjector:
    """
    Process-wide, swappable fault function.

    A fault function receives the request path and signals a fault by
    raising. Every concurrent request observes the same active function
    until :meth:`inject` replaces it.
    """

    def __init__(self, func: Optional[FaultFunc] = None):
        self._func: FaultFunc = func or no_fault
        self._lock = threading.Lock()

    def inject(self, func: Optional[FaultFunc]) -> None:
        """Replace the active fault function (None restores pass-through)."""
        with self._lock:
            self._func = func or no_fault
        logger.info(f"Fault function set to {getattr(self._func, '__name__', repr(self._func))}")

    def reset(self) -> None:
        self.inject(None)

    @property
    def is_active(self) -> bool:
        """True unless the pass-through function is installed."""
        return self._func is not no_fault

    def check(self, path: str) -> None:
        """
        Run the active fault function for a request path.

        Raises:
            InjectedFault: If the fault function signalled a failure
        """
        func = self._func
        try:
            func(path)
        except InjectedFault:
            logger.warning(f"Injected fault on {path}")
            raise
        except Exception as e:
            logger.warning(f"Injected fault on {path}: {e}")
            raise InjectedFault(
                "FAULT_INJECTED",
                get_error_message("FAULT_INJECTED"),
                {"path": path, "original_error": str(e)},
            ) from e
