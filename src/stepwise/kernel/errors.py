"""Error types for the step algebra."""

from __future__ import annotations


class StepwiseError(Exception):
    """Base exception for all stepwise errors."""

    pass


class UnhandledExitError(StepwiseError):
    """Raised when an exit step reaches the host boundary.

    Every exit must be resolved with ``on_exit`` before ``run`` is called.
    Reaching the boundary with one means some exit case was never handled,
    so the stray result is kept for debugging.
    """

    def __init__(self, result: object) -> None:
        self.result = result
        super().__init__(
            f"Step exited with {result!r} at the update boundary. "
            "Hint: resolve it with on_exit() before run()."
        )

    def __repr__(self) -> str:
        return f"UnhandledExitError(result={self.result!r})"
