"""Fitted-state handling shared by the simple regression estimators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..errors import ModelNotFittedError


@dataclass(frozen=True)
class FittedParams:
    """Parameters of a fitted one-feature model ``coeff * x + intercept``."""

    coeff: float
    intercept: float


class SimpleRegressionBase:
    """Hold the optional fitted state of a one-feature estimator.

    An estimator starts unfit (``params is None``). ``fit`` replaces the whole
    :class:`FittedParams` record in one assignment, so a failed fit leaves
    the previous state in place. Concurrent ``fit`` calls on one instance must
    be serialized by the caller; prediction on a stable instance is
    read-only.
    """

    def __init__(self) -> None:
        self._params: Optional[FittedParams] = None

    @property
    def params(self) -> Optional[FittedParams]:
        return self._params

    @property
    def is_fitted(self) -> bool:
        return self._params is not None

    def fitted_params(self) -> FittedParams:
        """Return the fitted parameters or raise :class:`ModelNotFittedError`."""
        if self._params is None:
            raise ModelNotFittedError(
                f"{type(self).__name__} is not fitted; call fit() first."
            )
        return self._params

    @property
    def coeff(self) -> float:
        """Fitted slope.

        Raises:
            ModelNotFittedError: If the estimator has not been fitted.
        """
        return self.fitted_params().coeff

    @property
    def intercept(self) -> float:
        """Fitted intercept.

        Raises:
            ModelNotFittedError: If the estimator has not been fitted.
        """
        return self.fitted_params().intercept

    def __repr__(self) -> str:
        if self._params is None:
            return f"{type(self).__name__}(unfit)"
        return (
            f"{type(self).__name__}(coeff={self._params.coeff:.6g}, "
            f"intercept={self._params.intercept:.6g})"
        )
