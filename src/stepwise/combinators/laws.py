"""Combinator laws and executable checks for them."""

# Steps satisfy the following algebraic laws:
#
# 1. Identity: step.map_state(id) == step and step.map_effect(id) == step
#
# 2. Composition: step.map_state(f).map_state(g) == step.map_state(lambda s: g(f(s)))
#    Same for map_effect
#
# 3. Absorption: stay().map_state(f) == stay() and exit(r).map_state(f) == exit(r)
#    f is never called
#
# 4. Within decomposes: step.within(sf, ef) == step.map_state(sf).map_effect(ef)
#
# 5. or_else is right-biased: a.or_else(b) == b unless b is stay
#
# 6. Exit chaining: exit(r).on_exit(f) == f(r), and to/stay pass through
#
# Effects wrap callables, so two steps are compared by what they do:
# same kind, equal state or result, and equal messages when the effects are
# performed in order.

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from stepwise.kernel import Step


async def observe(step: Step[Any, Any, Any]) -> tuple[Any, ...]:
    """Reduce a step to a comparable value by performing its effects."""
    if step.kind == "to":
        messages = [await effect.perform() for effect in step.effects]
        return ("to", step.state, tuple(messages))
    if step.kind == "exit":
        return ("exit", step.result)
    return ("stay",)


async def equivalent(left: Step[Any, Any, Any], right: Step[Any, Any, Any]) -> bool:
    return await observe(left) == await observe(right)


def _identity(value: Any) -> Any:
    return value


async def identity_law(step: Step[Any, Any, Any]) -> bool:
    return await equivalent(step.map_state(_identity), step) and await equivalent(
        step.map_effect(_identity), step
    )


async def composition_law(
    step: Step[Any, Any, Any],
    f: Callable[[Any], Any],
    g: Callable[[Any], Any],
) -> bool:
    """Check law 2 for both the state and the effect side with the same f and g."""
    states = await equivalent(step.map_state(f).map_state(g), step.map_state(lambda s: g(f(s))))
    effects = await equivalent(step.map_effect(f).map_effect(g), step.map_effect(lambda m: g(f(m))))
    return states and effects


async def absorption_law(step: Step[Any, Any, Any]) -> bool:
    """Transforms on a stay or exit step must not call their function."""
    if step.kind == "to":
        raise ValueError("Absorption only applies to stay and exit steps.")

    def untouchable(_: Any) -> Any:
        raise AssertionError("transform called on a non-transitioning step")

    return step.map_state(untouchable) == step and step.map_effect(untouchable) == step


async def within_law(
    step: Step[Any, Any, Any],
    state_func: Callable[[Any], Any],
    effect_func: Callable[[Any], Any],
) -> bool:
    return await equivalent(
        step.within(state_func, effect_func),
        step.map_state(state_func).map_effect(effect_func),
    )


async def or_else_law(step_a: Step[Any, Any, Any], step_b: Step[Any, Any, Any]) -> bool:
    combined = step_a.or_else(step_b)
    if step_b.kind != "stay":
        return combined is step_b
    return combined is step_a


async def exit_chain_law(step: Step[Any, Any, Any], func: Callable[[Any], Step[Any, Any, Any]]) -> bool:
    chained = step.on_exit(func)
    if step.kind == "exit":
        return await equivalent(chained, func(step.result))
    return chained is step
