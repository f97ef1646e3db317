"""Centralized numeric constants and estimator settings."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import HyperparameterError

DEFAULT_EPSILON: float = 1e-6
MAD_NORMAL_SCALE: float = 1.4826
PROBABILITY_THRESHOLD: float = 0.5

# Lower bound on |param| in the relative-gradient test, so a parameter that
# is exactly zero does not divide by zero.
RELATIVE_GRADIENT_FLOOR: float = 1e-12

DEFAULT_LEARNING_RATE: float = 0.001
DEFAULT_GRADIENT_THRESHOLD: float = 0.01
DEFAULT_ITERATION_THRESHOLD: int = 100


@dataclass(frozen=True)
class GradientDescentConfig:
    """Hyperparameters of the logistic gradient-descent loop.

    Attributes:
        learning_rate: Step size applied to both gradients. Must be positive.
        gradient_threshold: Relative-gradient tolerance, a fraction in
            ``(0, 1)``. Descent has converged once both ``|grad| / |param|``
            ratios are at or below it.
        iteration_threshold: Maximum number of descent iterations. Must be a
            positive integer.
    """

    learning_rate: float = DEFAULT_LEARNING_RATE
    gradient_threshold: float = DEFAULT_GRADIENT_THRESHOLD
    iteration_threshold: int = DEFAULT_ITERATION_THRESHOLD

    def validate(self) -> None:
        """Raise :class:`HyperparameterError` on any out-of-range field."""
        if not self.learning_rate > 0:
            raise HyperparameterError("Parameter learning_rate must be positive.")
        if not 0 < self.gradient_threshold < 1:
            raise HyperparameterError(
                "Parameter gradient_threshold must be a percentage in (0, 1)."
            )
        if not float(self.iteration_threshold).is_integer():
            raise HyperparameterError("Parameter iteration_threshold must be an integer.")
        if self.iteration_threshold <= 0:
            raise HyperparameterError("Parameter iteration_threshold must be positive.")
