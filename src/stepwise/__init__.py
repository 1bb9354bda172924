"""stepwise - composable return values for Elm-style update functions."""

import logging

from .boundary import as_update_function, from_update, run
from .combinators import (
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
from .kernel import (
    Effect,
    Outcome,
    Step,
    StepwiseError,
    UnhandledExitError,
    exit,
    from_optional,
    from_pair,
    stay,
    to,
)
from .testing import fold_steps, replay

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Core
    "Step",
    "Effect",
    "Outcome",
    # Constructors
    "to",
    "stay",
    "exit",
    "from_pair",
    "from_optional",
    "from_update",
    # Combinators
    "with_effect",
    "with_effects",
    "with_effect_from_async_operation",
    "map_state",
    "map_effect",
    "within",
    "map_result",
    "or_else",
    "on_exit",
    # Boundary
    "run",
    "as_update_function",
    # Testing
    "replay",
    "fold_steps",
    # Errors
    "StepwiseError",
    "UnhandledExitError",
]
