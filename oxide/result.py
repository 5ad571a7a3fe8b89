from __future__ import annotations
from dataclasses import dataclass
import json
from typing import Any, Callable, Generic, TypeVar

from .errors import ResultError, ResultKind
from .option import NONE, Option, Some

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")


def _render(payload: Any) -> str:
    # JSON keeps string payloads quoted: Err("err") -> "err"
    # payloads JSON rejects (circular, non-str dict keys) fall back to repr
    try:
        return json.dumps(payload, default=repr)
    except (TypeError, ValueError):
        return repr(payload)


class Result(Generic[T, E]):
    """The outcome of an operation that either produced a T or failed with an E.

    `Ok(value)` and `Err(error)` are the only variants. Combinators never
    invoke a callback that belongs to the variant being short-circuited, and
    never mutate the receiver.
    """
    __slots__ = ()

    def is_ok(self) -> bool: raise NotImplementedError
    def is_err(self) -> bool: return not self.is_ok()

    def unwrap(self) -> T:
        if self.is_ok():
            return self.value  # type: ignore[attr-defined]
        error = self.error  # type: ignore[attr-defined]
        raise ResultError(ResultKind.UNWRAP, f"Called unwrap() on an Err value: {_render(error)}", error)

    def unwrap_err(self) -> E:
        if self.is_err():
            return self.error  # type: ignore[attr-defined]
        value = self.value  # type: ignore[attr-defined]
        raise ResultError(ResultKind.UNWRAP_ERR, f"Called unwrap_err() on an Ok value: {_render(value)}", value)

    def expect(self, message: str) -> T:
        if self.is_ok():
            return self.value  # type: ignore[attr-defined]
        raise ResultError(ResultKind.UNWRAP, message, self.error)  # type: ignore[attr-defined]

    def expect_err(self, message: str) -> E:
        if self.is_err():
            return self.error  # type: ignore[attr-defined]
        raise ResultError(ResultKind.UNWRAP_ERR, message, self.value)  # type: ignore[attr-defined]

    def unwrap_or(self, default: T) -> T:
        return self.value if self.is_ok() else default  # type: ignore[attr-defined]

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        if self.is_ok():
            return self.value  # type: ignore[attr-defined]
        return f(self.error)  # type: ignore[attr-defined]

    get_or_else = unwrap_or

    def ok(self) -> Option[T]:
        return Some(self.value) if self.is_ok() else NONE  # type: ignore[attr-defined,return-value]

    def err(self) -> Option[E]:
        return Some(self.error) if self.is_err() else NONE  # type: ignore[attr-defined,return-value]

    def map(self, f: Callable[[T], U]) -> "Result[U, E]":
        if self.is_ok():
            return Ok(f(self.value))  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def map_err(self, f: Callable[[E], F]) -> "Result[T, F]":
        if self.is_err():
            return Err(f(self.error))  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def and_(self, other: "Result[U, E]") -> "Result[U, E]":
        return other if self.is_ok() else self  # type: ignore[return-value]

    def and_then(self, f: Callable[[T], "Result[U, E]"]) -> "Result[U, E]":
        if self.is_ok():
            return f(self.value)  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def or_(self, other: "Result[T, F]") -> "Result[T, F]":
        return self if self.is_ok() else other  # type: ignore[return-value]

    def or_else(self, f: Callable[[E], "Result[T, F]"]) -> "Result[T, F]":
        """Recover from an error by computing a replacement Result.

        Example:
            ```python
            cached = lookup_cache(key).or_else(lambda _e: fetch_remote(key))
            ```
        """
        if self.is_err():
            return f(self.error)  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]


@dataclass(frozen=True)
class Ok(Result[T, E]):
    value: T
    def is_ok(self) -> bool: return True


@dataclass(frozen=True)
class Err(Result[T, E]):
    error: E
    def is_ok(self) -> bool: return False
