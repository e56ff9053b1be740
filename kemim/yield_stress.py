"""Johnson-Cook flow stress for J2 plasticity with thermal softening."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Optional

_EP_FLOOR = 1e-4


def _pow(base: float, exponent: float) -> float:
    """Real power that yields nan or inf instead of raising."""
    try:
        return math.pow(base, exponent)
    except ValueError:
        return math.nan
    except OverflowError:
        return math.inf


class MeltingModel(enum.Enum):
    """Pressure or compression dependent melting temperature model."""

    SIMON = 0
    LINDEMANN = 1


@dataclass(frozen=True)
class FlowStress:
    """Flow stress, its plastic-strain derivatives and diagnostics."""

    ep_rate: float
    theta: float
    flow_stress: float
    dH: Optional[float]
    d2H: Optional[float]
    ratedep: float
    melting_temperature: Optional[float] = None


def _hardening(a: float, b: float, n_h: float, ep: float) -> tuple[float, float, float]:
    ep_eff = max(ep, _EP_FLOOR)
    yield_stress = a + b * _pow(ep_eff, n_h)
    dH = b * n_h * _pow(ep_eff, n_h - 1.0)
    d2H = b * n_h * (n_h - 1.0) * _pow(ep_eff, n_h - 2.0)
    return yield_stress, dH, d2H


@dataclass(frozen=True)
class JohnsonCookYield:
    """Johnson-Cook yield stress with a melting-temperature based softening."""

    ep_ref: float
    t0: float
    k: float
    a: float
    b: float
    use_temp: bool
    a_melt: float
    tm0: float
    n_h: float
    melting_model: MeltingModel
    use_rate: bool

    def __post_init__(self):
        object.__setattr__(self, "melting_model", MeltingModel(self.melting_model))

    def melting_temperature(self, deformation_gradient_det, pressure_total) -> float:
        j = deformation_gradient_det
        if self.melting_model is MeltingModel.LINDEMANN:
            return (
                self.tm0
                * math.exp(2.0 * self.a_melt * (1.0 - j))
                * _pow(1.0 / j, 2.0 * (0.7 - self.a_melt - 0.33))
            )
        return self.tm0 * _pow(1.0 + abs(pressure_total) / 0.9631, 1.0 / 2.8855)

    def compute(self, ep, ep_old, temperature, dt, deformation_gradient_det, pressure_total) -> FlowStress:
        ep_rate = (ep - ep_old) / dt
        tm = self.melting_temperature(deformation_gradient_det, pressure_total)
        theta = min((temperature - self.t0) / (tm - self.t0), 0.9)

        yield_stress, dH, d2H = _hardening(self.a, self.b, self.n_h, ep)
        if self.use_temp:
            softening = 1.0 - _pow(theta, self.k)
            yield_stress *= softening
            dH *= softening
            d2H *= softening

        if self.use_rate:
            ratedep = 1.0 + 1.086 * math.log(1.0 + max(ep_rate, 0.0) / self.ep_ref)
        else:
            ratedep = 1.0

        return FlowStress(
            ep_rate=ep_rate,
            theta=theta,
            flow_stress=yield_stress * ratedep,
            dH=dH * ratedep,
            d2H=d2H * ratedep,
            ratedep=ratedep,
            melting_temperature=tm,
        )


@dataclass(frozen=True)
class LipitJohnsonCookYield:
    """Johnson-Cook yield stress softened against a fixed transition temperature.

    The hardening derivatives are only produced when the rate term is used;
    otherwise ``dH`` and ``d2H`` are ``None``.
    """

    ep_ref: float
    transtemp: float
    t0: float
    k: float
    a: float
    b: float
    use_temp: bool
    n_h: float
    use_rate: bool

    def compute(self, ep, ep_old, temperature, dt) -> FlowStress:
        ep_rate = (ep - ep_old) / dt
        theta = min((temperature - self.t0) / (self.transtemp - self.t0), 0.95)

        yield_stress, dH, d2H = _hardening(self.a, self.b, self.n_h, ep)
        if self.use_temp:
            softening = 1.0 - _pow(theta, self.k)
            yield_stress *= softening
            dH *= softening
            d2H *= softening

        rate_term = 1.0 + math.log(1.0 + max(0.0, ep_rate) / self.ep_ref)
        if self.use_rate:
            return FlowStress(
                ep_rate=ep_rate,
                theta=theta,
                flow_stress=yield_stress * rate_term,
                dH=dH * rate_term,
                d2H=d2H * rate_term,
                ratedep=rate_term,
            )
        return FlowStress(
            ep_rate=ep_rate,
            theta=theta,
            flow_stress=yield_stress,
            dH=None,
            d2H=None,
            ratedep=1.0,
        )