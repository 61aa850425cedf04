"""
Failure capture.

``fn_attempt`` runs a callable and hands back what happened as a value: a
``Success`` carrying the result or a ``Failure`` carrying the exception.
Callers branch on the returned object instead of wrapping calls in
try/except::

    def add_small(a, b):
        if b > 10:
            raise ValueError("b is too large")
        return a + b

    fn_attempt(add_small, 2, 1)          # Success(value=3)
    fn_attempt(add_small, 2, 500)        # Failure(error=ValueError('b is too large'))
    fn_attempt(add_small, 2, 500).ok     # False
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        """Returns the result."""
        return self.value

    def value_or(self, default: Any) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    error: Exception

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> Any:
        """Re-raises the captured exception."""
        raise self.error

    def value_or(self, default: Any) -> Any:
        return default


Attempt = Union[Success[T], Failure]


def fn_attempt(fn: Callable[..., T], *args: Any, **kwargs: Any) -> Attempt:
    """
    Calls ``fn(*args, **kwargs)`` and captures its outcome.

    :return: ``Success(result)`` if the call returned, ``Failure(error)`` if it
             raised an ``Exception``. ``KeyboardInterrupt`` and ``SystemExit``
             are not captured.
    """
    try:
        return Success(fn(*args, **kwargs))
    except Exception as e:
        fn_name = fn.__name__ if hasattr(fn, '__name__') else 'callable'
        logger.debug(f"[{fn_name}] captured {type(e).__name__}: {e}")
        return Failure(e)
