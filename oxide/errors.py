from __future__ import annotations
from enum import Enum
from typing import Any, Generic, TypeVar

K = TypeVar("K", bound=Enum)


class OptionKind(Enum):
    EMPTY = "empty"


class ResultKind(Enum):
    UNWRAP = "unwrap"
    UNWRAP_ERR = "unwrap_err"


class UnwrapError(Exception, Generic[K]):
    """Raised when an accessor is called on the wrong variant.

    These are contract violations, not recoverable conditions: nothing in the
    package catches them, and `attempt` re-raises them instead of wrapping.

    Attributes:
        kind: Which accessor failed (an `OptionKind` or `ResultKind` member)
        message: The default or caller-supplied message
    """
    def __init__(self, kind: K, message: str):
        super().__init__(message); self.kind = kind; self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind.name}, {self.message!r})"


class OptionError(UnwrapError[OptionKind]):
    def __init__(self, message: str, kind: OptionKind = OptionKind.EMPTY):
        super().__init__(kind, message)


class ResultError(UnwrapError[ResultKind]):
    def __init__(self, kind: ResultKind, message: str, payload: Any = None):
        super().__init__(kind, message); self.payload = payload
