"""Heat sources driven by shock and reaction temperature predictions.

The predictions (shock temperature, reaction temperature and reaction time)
come from a surrogate model. They are turned into volumetric heat rates that
act while switch variables say the shock or the reaction is passing through
a material point.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


def _divide(numerator: float, denominator: float) -> float:
    """Floating-point division that yields inf or nan instead of raising."""
    if denominator == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def sin_target(target, induction, time_tracker) -> float:
    """Rate whose integral over ``[0, induction]`` delivers ``target``.

    The rate follows half a sine wave, so heating starts and ends smoothly.
    """
    return target * (math.pi / (2.0 * induction)) * math.sin(math.pi * time_tracker / induction)


@dataclass(frozen=True)
class MisternetHeatRates:
    """Shock and reaction heat rates and their temperature derivatives."""

    shock: float
    react: float
    d_shock_d_temperature: float
    d_react_d_temperature: float


@dataclass(frozen=True)
class MisternetHeat:
    """Heat rates that relax the temperature towards predicted values.

    Each source drives the temperature towards its target over its heating
    time and only heats: when the target is not above the current
    temperature the rate and its derivative are zero.
    """

    heat_time_shock: float
    heat_time_react: float

    @staticmethod
    def _relax(active: bool, heat_time: float, target: float, temperature: float, rho_cv: float):
        if not active:
            return 0.0, 0.0
        rate = (1.0 / heat_time) * rho_cv * (target - temperature)
        if rate <= 0.0:
            return 0.0, 0.0
        return rate, -(1.0 / heat_time) * rho_cv

    def compute(
        self,
        v_flag,
        dirac_switch_shock,
        dirac_switch_react,
        temperature,
        temperature_shock,
        temperature_react,
        density,
        specific_heat,
    ) -> MisternetHeatRates:
        called = v_flag == 1.0
        rho_cv = density * specific_heat
        shock, d_shock = self._relax(
            called and dirac_switch_shock > 0.0,
            self.heat_time_shock,
            temperature_shock,
            temperature,
            rho_cv,
        )
        react, d_react = self._relax(
            called and dirac_switch_react > 0.0,
            self.heat_time_react,
            temperature_react,
            temperature,
            rho_cv,
        )
        return MisternetHeatRates(
            shock=shock,
            react=react,
            d_shock_d_temperature=d_shock,
            d_react_d_temperature=d_react,
        )


@dataclass(frozen=True)
class SurrogateRates:
    """Heat rates and surrogate species rates of change."""

    heatrate_shock: float
    heatrate_react: float
    y1_dot: float
    y2_dot: float
    y3_dot: float
    indicator: float
    time_shock: float


@dataclass(frozen=True)
class SurrogateMisternetHeat:
    """Predicted shock and reaction heating with a surrogate chemistry source.

    With ``dynamic_tau`` the reaction lasts for the predicted reaction time
    and the shock crosses an element of ``element_size`` at the local
    velocity (capped at 10); otherwise fixed heating times are used and the
    reaction window ends when the reaction switch reaches 1.

    Where the predicted reaction temperature exceeds 1100 the material is
    taken to deflagrate: the first species is converted into the final
    products over the reaction time.
    """

    t_ref: float
    heat_time_shock: float
    heat_time_react: float
    direct_t: bool
    dynamic_tau: bool
    use_sin: bool
    element_size: float

    _DEFLAGRATION_TEMPERATURE = 1100.0
    _VELOCITY_CAP = 10.0
    _MIN_TAU = 1e-6

    def _timescales(self, vx: float, time_react: float) -> tuple[float, float, float]:
        if self.dynamic_tau:
            total_tau = max(time_react, self._MIN_TAU)
            speed = _clamp(abs(vx), 0.0, self._VELOCITY_CAP)
            return total_tau, total_tau, _divide(self.element_size, speed)
        return self.heat_time_react, 1.0, self.heat_time_shock

    def compute(
        self,
        v_flag,
        dirac_switch_shock,
        dirac_switch_react,
        vx,
        temperature_shock,
        temperature_react,
        time_react,
        density,
        specific_heat,
    ) -> SurrogateRates:
        total_tau, cutoff, tau_shock = self._timescales(vx, time_react)
        rho_cv = density * specific_heat
        called = v_flag == 1.0

        heat_shock = 0.0
        if called and 0.0 < dirac_switch_shock < 1.0:
            if self.direct_t:
                heat_shock = rho_cv * max(temperature_shock - self.t_ref, 0.0) / self.heat_time_shock
            else:
                heat_shock = max(
                    _divide(1.0, tau_shock) * rho_cv * (temperature_shock - self.t_ref), 0.0
                )

        reacting = called and 0.0 < dirac_switch_react < cutoff
        heat_react = 0.0
        if reacting:
            if self.direct_t:
                if self.use_sin:
                    heat_react = rho_cv * sin_target(
                        max(temperature_react - temperature_shock, 0.0),
                        total_tau,
                        _clamp(total_tau * dirac_switch_react, 0.0, 1.0),
                    )
                else:
                    heat_react = rho_cv * max(temperature_react, 0.0) / total_tau
            else:
                heat_react = max((1.0 / total_tau) * rho_cv * temperature_react, 0.0)

        y3_pred = 1.0 if temperature_react > self._DEFLAGRATION_TEMPERATURE else 0.0
        indicator = 1.0 if reacting else 0.0
        y3_dot = indicator * y3_pred / total_tau

        return SurrogateRates(
            heatrate_shock=heat_shock,
            heatrate_react=heat_react,
            y1_dot=-y3_dot,
            y2_dot=0.0,
            y3_dot=y3_dot,
            indicator=indicator,
            time_shock=tau_shock,
        )