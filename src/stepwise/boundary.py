"""Conversion between steps and the host runtime's update convention.

The host calls ``update(msg, model)`` and expects ``(model, effects)`` back.
Steps that reach this boundary must be exit-free: every exit has to be
resolved with ``on_exit`` first. The ``Never`` result type says so to a type
checker; ``run`` still checks at runtime and fails loudly.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any, Never, TypeVar

from stepwise.kernel import Effect, Step, UnhandledExitError, from_pair

logger = logging.getLogger(__name__)

S = TypeVar("S")
M = TypeVar("M")
Msg = TypeVar("Msg")

HostPair = tuple[S, tuple[Effect[M], ...]]
StepUpdate = Callable[[Msg, S], Step[S, M, Never]]
HostUpdate = Callable[[Msg, S], HostPair[S, M]]


def run(step: Step[S, M, Never]) -> HostPair[S, M] | None:
    """Convert an exit-free step into the host's (state, effects) pair.

    Returns:
        The pair for a `to` step, None for `stay`.

    Raises:
        UnhandledExitError: If the step is an exit, which means some exit
            case was never handled by the calling code.
    """
    if step.kind == "to":
        return step.state, step.effects  # type: ignore[return-value]
    if step.kind == "stay":
        return None
    logger.error("Unhandled exit reached the update boundary: %r", step.result)
    raise UnhandledExitError(step.result)


def as_update_function(update: StepUpdate[Msg, S, M]) -> HostUpdate[Msg, S, M]:
    """Wrap a step-returning update function for the host runtime.

    A `stay` becomes the previous model with no effects.
    """
    def host_update(msg: Msg, model: S) -> HostPair[S, M]:
        pair = run(update(msg, model))
        if pair is None:
            logger.debug("No transition for %r, keeping the current model", msg)
            return model, ()
        return pair

    return host_update


def from_update(
    update: Callable[[Msg, S], tuple[S, Effect[M] | Iterable[Effect[M]]]],
) -> Callable[[Msg, S], Step[S, M, Any]]:
    """Turn a host-style update function into one returning steps."""
    def step_update(msg: Msg, model: S) -> Step[S, M, Any]:
        state, effects = update(msg, model)
        return from_pair(state, effects)

    return step_update
