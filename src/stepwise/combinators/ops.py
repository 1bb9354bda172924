"""Free-function forms of the step combinators.

Each function takes the step last, so it reads like the method form with the
step moved to the end: ``map_state(f, step) == step.map_state(f)``.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from typing import Any, TypeVar

from stepwise.kernel import Effect, Outcome, Step

S = TypeVar("S")
M = TypeVar("M")
R = TypeVar("R")
T = TypeVar("T")
S2 = TypeVar("S2")
M2 = TypeVar("M2")
R2 = TypeVar("R2")


def with_effect(effect: Effect[M], step: Step[S, M, R]) -> Step[S, M, R]:
    """Append ``effect``; dropped when ``step`` is stay or exit."""
    return step.with_effect(effect)


def with_effects(effects: Iterable[Effect[M]], step: Step[S, M, R]) -> Step[S, M, R]:
    return step.with_effects(effects)


def with_effect_from_async_operation(
    handler: Callable[[Outcome[T]], M],
    operation: Callable[[], Awaitable[T]],
    step: Step[S, M, R],
) -> Step[S, M, R]:
    """Attach an async operation; ``handler`` converts its outcome into a message.

    Args:
        handler: Receives an Outcome holding the value or the raised exception.
        operation: Zero-argument callable returning an awaitable, e.g. a network call.
        step: Step to attach to.

    Returns:
        Step[S, M, R]: ``step`` with the effect queued, or ``step`` unchanged
            when it does not transition.
    """
    return step.with_effect_from_async_operation(handler, operation)


def map_state(func: Callable[[S], S2], step: Step[S, M, R]) -> Step[S2, M, R]:
    return step.map_state(func)


def map_effect(func: Callable[[M], M2], step: Step[S, M, R]) -> Step[S, M2, R]:
    return step.map_effect(func)


def within(
    state_func: Callable[[S], S2],
    effect_func: Callable[[M], M2],
    step: Step[S, M, R],
) -> Step[S2, M2, R]:
    """Lift a child's step into its parent.

    Semantics:
        - ``state_func`` places the child state inside the parent state
        - ``effect_func`` wraps every child message in a parent message
        - stay and exit pass through unchanged

    Equivalent to ``map_effect(effect_func, map_state(state_func, step))``.
    """
    return step.within(state_func, effect_func)


def map_result(func: Callable[[R], R2], step: Step[S, M, R]) -> Step[S, M, R2]:
    return step.map_result(func)


def or_else(step_a: Step[S, M, R], step_b: Step[S, M, R]) -> Step[S, M, R]:
    """Pick whichever of two steps handled the same input.

    Precedence:
        - ``step_b`` whenever it is not stay
        - otherwise ``step_a``
        - stay when both are stay

    When both handled the input, ``step_b`` wins without complaint.
    """
    return step_a.or_else(step_b)


def on_exit(func: Callable[[R], Step[S2, M2, R2]], step: Step[Any, Any, R]) -> Step[S2, M2, R2]:
    """Continue a larger interaction with the result of a finished one.

    ``exit(r)`` becomes ``func(r)``. to and stay pass through unchanged,
    so their state type must already match the one ``func`` returns.
    """
    return step.on_exit(func)
