"""Algebraic laws, checked across all three kinds of step."""

import asyncio

import pytest
from fakes import Tick, Wrapped

from stepwise import Effect, exit, stay, to
from stepwise.combinators.laws import (
    absorption_law,
    composition_law,
    equivalent,
    exit_chain_law,
    identity_law,
    observe,
    or_else_law,
    within_law,
)

STEPS = [
    to(1),
    to(2).with_effect(Effect.message(Tick(1))).with_effect(Effect.message(Tick(2))),
    stay(),
    exit("bob"),
]


@pytest.mark.parametrize("step", STEPS, ids=repr)
def test_identity(step) -> None:
    assert asyncio.run(identity_law(step))


@pytest.mark.parametrize("step", STEPS, ids=repr)
def test_composition(step) -> None:
    assert asyncio.run(composition_law(step, lambda x: (x, "f"), lambda x: (x, "g")))


@pytest.mark.parametrize("step", [stay(), exit("bob")], ids=repr)
def test_absorption(step) -> None:
    assert asyncio.run(absorption_law(step))


def test_absorption_rejects_transitions() -> None:
    with pytest.raises(ValueError):
        asyncio.run(absorption_law(to(1)))


@pytest.mark.parametrize("step", STEPS, ids=repr)
def test_within_decomposition(step) -> None:
    assert asyncio.run(within_law(step, lambda n: {"child": n}, Wrapped))


@pytest.mark.parametrize("step_a", STEPS, ids=repr)
@pytest.mark.parametrize("step_b", STEPS, ids=repr)
def test_or_else_precedence(step_a, step_b) -> None:
    assert asyncio.run(or_else_law(step_a, step_b))


@pytest.mark.parametrize("step", STEPS, ids=repr)
def test_exit_chain(step) -> None:
    assert asyncio.run(exit_chain_law(step, lambda name: to({"logged_in_as": name})))


def test_observe_performs_effects() -> None:
    step = to("s").with_effect(Effect.message("e1")).with_effect(Effect.message("e2"))
    assert asyncio.run(observe(step)) == ("to", "s", ("e1", "e2"))
    assert asyncio.run(observe(exit(1))) == ("exit", 1)
    assert asyncio.run(observe(stay())) == ("stay",)


def test_equivalent_distinguishes_effect_order() -> None:
    e1, e2 = Effect.message(1), Effect.message(2)
    assert not asyncio.run(equivalent(to(0).with_effect(e1).with_effect(e2), to(0).with_effect(e2).with_effect(e1)))
