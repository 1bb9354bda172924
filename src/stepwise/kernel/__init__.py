"""Kernel layer - the Step value and effect descriptions, dependency-free."""

from stepwise.kernel.effect import Effect, Outcome
from stepwise.kernel.errors import StepwiseError, UnhandledExitError
from stepwise.kernel.step import Step, exit, from_optional, from_pair, stay, to

__all__ = [
    "Step",
    "Effect",
    "Outcome",
    # Constructors
    "to",
    "stay",
    "exit",
    "from_pair",
    "from_optional",
    # Errors
    "StepwiseError",
    "UnhandledExitError",
]
