"""Combinators - composing and transforming steps."""

from stepwise.combinators.ops import (
    map_effect,
    map_result,
    map_state,
    on_exit,
    or_else,
    with_effect,
    with_effect_from_async_operation,
    with_effects,
    within,
)

__all__ = [
    "with_effect",
    "with_effects",
    "with_effect_from_async_operation",
    "map_state",
    "map_effect",
    "within",
    "map_result",
    "or_else",
    "on_exit",
]
