"""The Step value - what an update function returns."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field, replace
from typing import Any, Generic, Literal, TypeVar

from stepwise.kernel.effect import Effect, Outcome

logger = logging.getLogger(__name__)

S = TypeVar("S")
M = TypeVar("M")
R = TypeVar("R")
T = TypeVar("T")
S2 = TypeVar("S2")
M2 = TypeVar("M2")
R2 = TypeVar("R2")


@dataclass(frozen=True)
class Step(Generic[S, M, R]):
    """
    Outcome of handling one input in one state.

    Kinds:
    - to: Continue in `state`, with `effects` for the host runtime to execute in order
    - stay: Ignore the input - no state change, no effects
    - exit: The interaction is over - `result` is the only payload

    Transforms on state and effects leave `stay` and `exit` untouched.
    Only map_result and on_exit reach into an exit.
    """

    kind: Literal["to", "stay", "exit"]
    state: S | None = None
    effects: tuple[Effect[M], ...] = field(default_factory=tuple)
    result: R | None = None

    def __post_init__(self) -> None:
        if self.kind not in ("to", "stay", "exit"):
            raise ValueError(f"Unknown step kind: {self.kind!r}")
        if not isinstance(self.effects, tuple):
            object.__setattr__(self, "effects", tuple(self.effects))
        if self.kind != "to" and (self.state is not None or self.effects):
            raise ValueError(f"A '{self.kind}' step carries no state or effects.")
        if self.kind != "exit" and self.result is not None:
            raise ValueError(f"A '{self.kind}' step carries no result.")

    @staticmethod
    def To(state: Any) -> Step[Any, Any, Any]:
        return Step(kind="to", state=state)

    @staticmethod
    def Stay() -> Step[Any, Any, Any]:
        return _STAY

    @staticmethod
    def Exit(result: Any) -> Step[Any, Any, Any]:
        return Step(kind="exit", result=result)

    @property
    def transitioning(self) -> bool:
        return self.kind == "to"

    @property
    def stayed(self) -> bool:
        return self.kind == "stay"

    @property
    def exited(self) -> bool:
        return self.kind == "exit"

    # --- Effects ---

    def with_effect(self, effect: Effect[M]) -> Step[S, M, R]:
        """Queue an effect after the ones already attached.

        On `stay` and `exit` the effect is dropped and the step is returned as is.
        """
        return self.with_effects((effect,))

    def with_effects(self, effects: Iterable[Effect[M]]) -> Step[S, M, R]:
        effects = tuple(effects)
        if self.kind != "to":
            if effects:
                logger.debug("Dropping %d effect(s) attached to a '%s' step", len(effects), self.kind)
            return self
        return replace(self, effects=self.effects + effects)

    def with_effect_from_async_operation(
        self,
        handler: Callable[[Outcome[T]], M],
        operation: Callable[[], Any],
    ) -> Step[S, M, R]:
        """Attach an async operation whose completion ``handler`` turns into a message."""
        return self.with_effect(Effect.attempt(operation, handler))

    # --- Transforms ---

    def map_state(self, func: Callable[[S], S2]) -> Step[S2, M, R]:
        if self.kind != "to":
            return self  # type: ignore[return-value]
        return replace(self, state=func(self.state))  # type: ignore[arg-type]

    def map_effect(self, func: Callable[[M], M2]) -> Step[S, M2, R]:
        """Map the message every queued effect will produce."""
        if self.kind != "to":
            return self  # type: ignore[return-value]
        return replace(self, effects=tuple(effect.map(func) for effect in self.effects))  # type: ignore[arg-type]

    def within(
        self,
        state_func: Callable[[S], S2],
        effect_func: Callable[[M], M2],
    ) -> Step[S2, M2, R]:
        """Lift a child step into the parent's state and message types."""
        return self.map_state(state_func).map_effect(effect_func)

    def map_result(self, func: Callable[[R], R2]) -> Step[S, M, R2]:
        if self.kind != "exit":
            return self  # type: ignore[return-value]
        return Step(kind="exit", result=func(self.result))  # type: ignore[arg-type]

    # --- Combination ---

    def or_else(self, other: Step[S, M, R]) -> Step[S, M, R]:
        """Resolve two steps computed for the same input.

        ``other`` wins unless it is `stay`. When both steps handled the input,
        ``other`` still wins, so in a left-to-right chain the last check counts.
        """
        if other.kind != "stay":
            return other
        return self

    def on_exit(self, func: Callable[[R], Step[S2, M2, R2]]) -> Step[S2, M2, R2]:
        """Hand an exit result to ``func`` to decide the next step."""
        if self.kind != "exit":
            return self  # type: ignore[return-value]
        return func(self.result)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        if self.kind == "to":
            return f"to({self.state!r}, effects={list(self.effects)!r})"
        if self.kind == "exit":
            return f"exit({self.result!r})"
        return "stay()"


_STAY: Step[Any, Any, Any] = Step(kind="stay")


def to(state: S) -> Step[S, Any, Any]:
    """Move to ``state`` with no effects."""
    return Step.To(state)


def stay() -> Step[Any, Any, Any]:
    """Ignore the input."""
    return Step.Stay()


def exit(result: R) -> Step[Any, Any, R]:  # noqa: A001
    """Conclude the interaction with ``result``."""
    return Step.Exit(result)


def from_pair(state: S, effects: Effect[M] | Iterable[Effect[M]] = ()) -> Step[S, M, Any]:
    """Lift a host-style (state, effects) pair.

    ``effects`` may be a single Effect or an iterable of them.
    """
    if isinstance(effects, Effect):
        effects = (effects,)
    return Step(kind="to", state=state, effects=tuple(effects))


def from_optional(state: S | None) -> Step[S, Any, Any]:
    """`to(state)` when a state is given, `stay()` for None."""
    if state is None:
        return stay()
    return to(state)
