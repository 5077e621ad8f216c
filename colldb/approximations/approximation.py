from __future__ import annotations

from typing import Any, Callable, Mapping

import numpy as np
from scipy.interpolate import CubicSpline

from .. import constants
from ..exceptions import ModelParameterException
from ..models import ModelsIntegral, ModelsInterpolator

_UNIT_FACTORS = {
    "m^2": 1.0,
    "m2": 1.0,
    "A^2": constants.K_CONST_ANGSTROM_SQ,
    "Å^2": constants.K_CONST_ANGSTROM_SQ,
}


class Approximation:
    """Collision integral correlations as functions of temperature.

    Every correlation accepts a scalar or an array of temperatures and returns
    values in m^2 once the unit factor of the definition is applied.
    """

    @staticmethod
    def constant(T, value: float):
        return np.full_like(np.asarray(T, dtype=float), value) if np.ndim(T) else float(value)

    @staticmethod
    def table_linear(T, temperatures: np.ndarray, values: np.ndarray):
        # np.interp clamps to the end values outside the table
        result = np.interp(T, temperatures, values)
        return result if np.ndim(T) else float(result)

    @staticmethod
    def table_spline(T, spline: CubicSpline, t_min: float, t_max: float):
        lnT = np.log(np.clip(T, t_min, t_max))
        result = np.exp(spline(lnT))
        return result if np.ndim(T) else float(result)

    @staticmethod
    def exp_poly(T, coefficients: np.ndarray):
        """Q = exp(sum_k a_k (ln T)^k), coefficients ordered from a_0."""
        lnT = np.log(T)
        result = np.exp(np.polynomial.polynomial.polyval(lnT, coefficients))
        return result if np.ndim(T) else float(result)

    @staticmethod
    def gupta_yos(T, A: float, B: float, C: float, D: float):
        """Q = D T^(A (ln T)^2 + B ln T + C)."""
        lnT = np.log(T)
        result = D * np.power(T, (A * lnT + B) * lnT + C)
        return result if np.ndim(T) else float(result)

    def build(self, definition: Mapping[str, Any], label: str = "") -> Callable:
        """Turn a YAML integral definition into a function of temperature."""
        if not isinstance(definition, Mapping):
            # a bare number is shorthand for a constant integral
            try:
                definition = {"model": ModelsIntegral.CONSTANT.value, "value": float(definition)}
            except (TypeError, ValueError) as exc:
                raise ModelParameterException(f"Cannot interpret integral definition {label}: {definition!r}") from exc
        try:
            model = ModelsIntegral(str(definition.get("model", ModelsIntegral.CONSTANT.value)))
        except ValueError as exc:
            raise ModelParameterException(f"Unknown collision integral model in {label}: {definition.get('model')!r}") from exc
        units = str(definition.get("units", "m^2"))
        if units not in _UNIT_FACTORS:
            raise ModelParameterException(f"Unknown units '{units}' in {label}")
        factor = _UNIT_FACTORS[units]

        try:
            if model is ModelsIntegral.CONSTANT:
                value = float(definition["value"]) * factor
                return lambda T: self.constant(T, value)
            if model is ModelsIntegral.EXP_POLY:
                coefficients = np.asarray(definition["A"], dtype=float)
                return lambda T: factor * self.exp_poly(T, coefficients)
            if model is ModelsIntegral.GUPTA_YOS:
                A, B, C, D = (float(definition[key]) for key in ("A", "B", "C", "D"))
                return lambda T: factor * self.gupta_yos(T, A, B, C, D)
            return self._build_table(definition, factor, label)
        except KeyError as exc:
            raise ModelParameterException(f"Missing parameter {exc} for {model.value} integral in {label}") from exc

    def _build_table(self, definition: Mapping[str, Any], factor: float, label: str) -> Callable:
        temperatures = np.asarray(definition["T"], dtype=float)
        values = np.asarray(definition["Q"], dtype=float) * factor
        if temperatures.ndim != 1 or temperatures.shape != values.shape or temperatures.size < 2:
            raise ModelParameterException(f"Table in {label} needs matching T and Q lists of at least two points")
        if np.any(np.diff(temperatures) <= 0.0):
            raise ModelParameterException(f"Table temperatures in {label} must be strictly increasing")
        try:
            interpolator = ModelsInterpolator(str(definition.get("interpolator", ModelsInterpolator.LINEAR.value)))
        except ValueError as exc:
            raise ModelParameterException(f"Unknown interpolator in {label}: {definition.get('interpolator')!r}") from exc
        if interpolator is ModelsInterpolator.LINEAR:
            return lambda T: self.table_linear(T, temperatures, values)
        if np.any(values <= 0.0):
            raise ModelParameterException(f"Spline table in {label} needs positive values")
        spline = CubicSpline(np.log(temperatures), np.log(values))
        t_min, t_max = temperatures[0], temperatures[-1]
        return lambda T: self.table_spline(T, spline, t_min, t_max)
