from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Generic, Optional, TypeVar

from .errors import OptionError

if TYPE_CHECKING:
    from .result import Result

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


class Option(Generic[T]):
    """A value of type T that may or may not be present.

    Exactly two variants exist: `Some(value)` and the shared `NONE`. Every
    operation returns a new Option (or the receiver itself, untouched); no
    method ever mutates a value after construction.

    Example:
        ```python
        port = from_nullable(env.get("PORT")).map(int).filter(lambda p: p > 0)
        port.unwrap_or(8080)
        ```
    """
    __slots__ = ()

    def is_some(self) -> bool: raise NotImplementedError
    def is_none(self) -> bool: return not self.is_some()

    def unwrap(self) -> T:
        """Return the contained value.

        Raises:
            OptionError: kind `OptionKind.EMPTY` if called on `NONE`
        """
        return self.expect("Attempted to unwrap a None value!")

    def expect(self, message: str) -> T:
        if self.is_some():
            return self.value  # type: ignore[attr-defined]
        raise OptionError(message)

    def unwrap_or(self, default: T) -> T:
        return self.value if self.is_some() else default  # type: ignore[attr-defined]

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        if self.is_some():
            return self.value  # type: ignore[attr-defined]
        return f()

    get_or_else = unwrap_or

    def map(self, f: Callable[[T], U]) -> "Option[U]":
        if self.is_some():
            return Some(f(self.value))  # type: ignore[attr-defined]
        return NONE

    def map_or(self, fallback: U, f: Callable[[T], U]) -> U:
        if self.is_some():
            return f(self.value)  # type: ignore[attr-defined]
        return fallback

    def map_or_else(self, none_fn: Callable[[], U], some_fn: Callable[[T], U]) -> U:
        if self.is_some():
            return some_fn(self.value)  # type: ignore[attr-defined]
        return none_fn()

    def and_(self, other: "Option[U]") -> "Option[U]":
        """Return `other` if this is `Some`, otherwise `NONE`.

        Only the receiver's variant is inspected; a `NONE` argument is returned
        as-is when the receiver is present.
        """
        return other if self.is_some() else NONE

    def or_(self, other: "Option[T]") -> "Option[T]":
        return self if self.is_some() else other

    def or_else(self, f: Callable[[], "Option[T]"]) -> "Option[T]":
        return self if self.is_some() else f()

    def and_then(self, f: Callable[[T], "Option[U]"]) -> "Option[U]":
        if self.is_some():
            return f(self.value)  # type: ignore[attr-defined]
        return NONE

    flat_map = and_then

    def filter(self, p: Callable[[T], bool]) -> "Option[T]":
        if self.is_some() and p(self.value):  # type: ignore[attr-defined]
            return self
        return NONE

    def ok_or(self, error: E) -> "Result[T, E]":
        from .result import Ok, Err
        if self.is_some():
            return Ok(self.value)  # type: ignore[attr-defined]
        return Err(error)

    def ok_or_else(self, f: Callable[[], E]) -> "Result[T, E]":
        """Like `ok_or`, but the error is only computed when this is `NONE`."""
        from .result import Ok, Err
        if self.is_some():
            return Ok(self.value)  # type: ignore[attr-defined]
        return Err(f())


@dataclass(frozen=True)
class Some(Option[T]):
    value: T
    def is_some(self) -> bool: return True


class _None(Option[None]):
    __slots__ = ()
    def __repr__(self) -> str: return "NONE"
    def __eq__(self, other: object) -> bool: return isinstance(other, _None)
    def __hash__(self) -> int: return hash(_None)
    def __reduce__(self) -> str: return "NONE"
    def is_some(self) -> bool: return False


NONE: Option[None] = _None()


def from_nullable(v: Optional[T]) -> Option[T]:
    return Some(v) if v is not None else NONE  # type: ignore[return-value]
