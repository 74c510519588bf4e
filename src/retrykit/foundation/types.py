"""Shared type aliases and the unlimited-attempts sentinel."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from enum import Enum
from typing import Any, Final, Literal, TypeAlias


class Unlimited(Enum):
    """Attempt budget with no upper bound.

    An explicit enum member rather than a reserved int, so no valid
    attempt count can ever be mistaken for "retry forever".
    """

    UNLIMITED = "unlimited"

    def __repr__(self) -> str:
        return "UNLIMITED_ATTEMPTS"


UNLIMITED_ATTEMPTS: Final = Unlimited.UNLIMITED

Attempts: TypeAlias = int | Literal[Unlimited.UNLIMITED]

# Callback signatures accepted by CallArgs
Operation: TypeAlias = Callable[[], Any]
AsyncOperation: TypeAlias = Callable[[], Awaitable[Any]]
FatalClassifier: TypeAlias = Callable[[Exception], bool]
NotifyFunc: TypeAlias = Callable[[Exception, int], None]
