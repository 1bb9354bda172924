"""Replaying inputs through an update function, for test suites."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import TypeVar

from stepwise.kernel import Effect, Step, from_pair

logger = logging.getLogger(__name__)

S = TypeVar("S")
M = TypeVar("M")
R = TypeVar("R")
Msg = TypeVar("Msg")


def replay(
    update: Callable[[Msg, S], Step[S, M, R]],
    initial: tuple[S, Effect[M] | Iterable[Effect[M]]] | Step[S, M, R],
    inputs: Iterable[Msg],
) -> Step[S, M, R]:
    """Fold ``update`` over ``inputs`` and return the final step.

    Semantics:
        - Start from ``from_pair(*initial)``, or from ``initial`` if it is a Step
        - Each input runs against the latest state
        - A `to` result replaces the state and appends its effects to every
          effect accumulated so far, in input order
        - A `stay` result leaves the accumulated step unchanged
        - An `exit` result ends the replay; later inputs are not processed

    A replay starting from `stay()` returns `stay()`, since there is no state
    to feed the inputs to.

    Args:
        update: Update function taking (msg, state).
        initial: Initial (state, effects) pair or step.
        inputs: Messages to feed, in order.

    Returns:
        Step[S, M, R]: The accumulated step.
    """
    current: Step[S, M, R] = initial if isinstance(initial, Step) else from_pair(*initial)

    for index, msg in enumerate(inputs):
        if current.kind != "to":
            break

        nxt = update(msg, current.state)  # type: ignore[arg-type]
        if nxt.kind == "to":
            current = from_pair(nxt.state, current.effects + nxt.effects)  # type: ignore[arg-type]
        elif nxt.kind == "exit":
            logger.debug("Replay stopped at input %d: exited with %r", index, nxt.result)
            current = nxt

    return current


fold_steps = replay
