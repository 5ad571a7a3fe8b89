from __future__ import annotations
import functools
from typing import Any, Callable, Tuple, Type, TypeVar

from .errors import UnwrapError
from .logger import get_logger
from .result import Err, Ok, Result

A = TypeVar("A")

_Caught = Tuple[Type[BaseException], ...]


def _check(exceptions: _Caught) -> _Caught:
    if not exceptions:
        return (Exception,)
    for ex in exceptions:
        if not (isinstance(ex, type) and issubclass(ex, BaseException)):
            raise TypeError(f"expected exception classes, got {ex!r}")
    return exceptions


def _capture(thunk: Callable[[], A], caught: _Caught, name: str) -> Result[A, BaseException]:
    try:
        return Ok(thunk())
    except UnwrapError:
        raise
    except caught as ex:
        get_logger().debug(f"captured {type(ex).__name__} from {name}", error=str(ex))
        return Err(ex)


def attempt(thunk: Callable[[], A], *exceptions: Type[BaseException]) -> Result[A, BaseException]:
    """Run `thunk` and capture the listed exceptions as `Err`.

    Args:
        thunk: Zero-argument callable to run
        *exceptions: Exception classes to capture (default: `Exception`)

    Returns:
        `Ok(return value)` or `Err(exception)`

    Exceptions that are not listed propagate unchanged, and `UnwrapError` is
    always re-raised: a wrong-variant access is a bug in the caller, not a
    failure to be carried as a value.

    Example:
        ```python
        port = attempt(lambda: int(raw), ValueError).unwrap_or(8080)
        ```
    """
    return _capture(thunk, _check(exceptions), getattr(thunk, "__qualname__", repr(thunk)))


def as_result(*exceptions: Type[BaseException]) -> Callable[[Callable[..., A]], Callable[..., Result[A, BaseException]]]:
    caught = _check(exceptions)

    def decorate(f: Callable[..., A]) -> Callable[..., Result[A, BaseException]]:
        name = getattr(f, "__qualname__", repr(f))

        @functools.wraps(f)
        def wrapper(*args: Any, **kwargs: Any) -> Result[A, BaseException]:
            return _capture(lambda: f(*args, **kwargs), caught, name)
        return wrapper

    return decorate
