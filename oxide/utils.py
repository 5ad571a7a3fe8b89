from __future__ import annotations
from typing import Any, Callable, Iterable, List, TypeVar

from .option import NONE, Option
from .result import Err, Ok, Result

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
R = TypeVar("R")


def match_result(result: Result[T, E], ok: Callable[[T], R], err: Callable[[E], R]) -> R:
    """Call exactly one of `ok(value)` or `err(error)` and return its result.

    Example:
        ```python
        match_result(Err(10), ok=lambda d: d, err=str)  # "10"
        ```
    """
    return ok(result.unwrap()) if result.is_ok() else err(result.unwrap_err())


def match_option(option: Option[T], some: Callable[[T], R], none: Callable[[], R]) -> R:
    return some(option.unwrap()) if option.is_some() else none()


def match(value: Result[T, E] | Option[T], on_value: Callable[[T], R], on_other: Callable[[Any], R]) -> R:
    """Dispatch over either container type.

    `on_value` receives the `Ok`/`Some` payload; `on_other` receives the `Err`
    payload, or `None` for an absent Option.

    Raises:
        TypeError: If `value` is neither a Result nor an Option
    """
    if isinstance(value, Result):
        return match_result(value, on_value, on_other)
    if isinstance(value, Option):
        return match_option(value, on_value, lambda: on_other(None))
    raise TypeError(f"match() expects a Result or an Option, got {type(value).__name__}")


def map_option(items: Iterable[Option[T]], f: Callable[[T], U]) -> List[Option[U]]:
    return [o.map(f) for o in items]


def map_result(items: Iterable[Result[T, E]], f: Callable[[T], U]) -> List[Result[U, E]]:
    out: List[Result[U, E]] = []
    for r in items:
        if r.is_ok():
            out.append(Ok(f(r.unwrap())))
        else:
            out.append(Err(r.unwrap_err()))
    return out


def filter_map_option(items: Iterable[Option[T]], f: Callable[[T], Option[U]]) -> List[Option[U]]:
    mapped = [f(o.unwrap()) if o.is_some() else NONE for o in items]
    return [o for o in mapped if o.is_some()]  # type: ignore[misc]


def filter_map_result(items: Iterable[Result[T, E]], f: Callable[[T], Result[U, E]]) -> List[Result[U, E]]:
    mapped: List[Result[U, E]] = [f(r.unwrap()) if r.is_ok() else r for r in items]  # type: ignore[misc]
    return [r for r in mapped if r.is_ok()]
