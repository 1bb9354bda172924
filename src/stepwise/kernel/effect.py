"""Effect descriptions - data handed to the host runtime, never run here."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

M = TypeVar("M")
N = TypeVar("N")
T = TypeVar("T")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Completion of an async operation, as seen by its handler.

    Attributes:
        value: Result of the operation when it succeeded.
        error: Exception raised by the operation when it failed.
    """

    value: T | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @staticmethod
    def Success(value: Any) -> Outcome[Any]:
        return Outcome(value=value)

    @staticmethod
    def Failure(error: Exception) -> Outcome[Any]:
        return Outcome(error=error)


@dataclass(frozen=True)
class Effect(Generic[M]):
    """An opaque action that produces a message of type M when performed.

    Effects are values: building, mapping and attaching them has no side
    effects. Only the host runtime (or a test) awaits ``perform()``.
    """

    _perform: Callable[[], Awaitable[M]]
    label: str = field(default="effect", compare=False)

    async def perform(self) -> M:
        """Run the action and return the message it produces."""
        return await self._perform()

    def map(self, func: Callable[[M], N]) -> Effect[N]:
        """Transform the produced message, leaving the action untouched."""
        inner = self._perform

        async def mapped() -> N:
            return func(await inner())

        return Effect(mapped, label=self.label)

    @staticmethod
    def message(msg: M) -> Effect[M]:
        """An effect that immediately produces ``msg``."""
        async def produce() -> M:
            return msg

        return Effect(produce, label=f"message({msg!r})")

    @staticmethod
    def attempt(
        operation: Callable[[], Awaitable[T]],
        handler: Callable[[Outcome[T]], M],
    ) -> Effect[M]:
        """Wrap an async operation; ``handler`` turns its completion into a message.

        Exceptions raised by the operation are captured in the Outcome.
        Exceptions raised by the handler propagate to the caller of perform().
        """
        name = getattr(operation, "__name__", type(operation).__name__)

        async def produce() -> M:
            try:
                value = await operation()
            except Exception as exc:
                logger.debug("Operation %s failed, handing %r to handler", name, exc)
                return handler(Outcome.Failure(exc))
            return handler(Outcome.Success(value))

        return Effect(produce, label=f"attempt({name})")

    def __repr__(self) -> str:
        return f"Effect({self.label})"
