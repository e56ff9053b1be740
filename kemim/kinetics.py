"""Chemical kinetics for multi-step decomposition models.

Each model evaluates reaction rates and species source terms at a single
material point from the local temperature and mass fractions.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


def _exp(x: float) -> float:
    """Exponential that saturates to infinity instead of raising on overflow."""
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def _arrhenius(z: float, e: float, gas_constant: float, temperature: float) -> float:
    return z * _exp(-e / (gas_constant * temperature))


def _arrhenius_slope(rate: float, e: float, gas_constant: float, temperature: float) -> float:
    return rate * e / (gas_constant * temperature**2)


def _reaction_heat(a: float, b: float, temperature: float, t_trans: float) -> float:
    return a + b * max(0.0, temperature - t_trans)


@dataclass(frozen=True)
class ReactionRates:
    """Reaction rates, species rates of change and optional extras."""

    rates: tuple[float, ...]
    y_dot: tuple[float, ...]
    rate_derivatives: tuple[float, ...] = ()
    heats: tuple[float, ...] = ()


@dataclass(frozen=True)
class DecompositionRates:
    """Rates and decomposition heat of the switched two-stage model."""

    r1: float
    r2: float
    q1: float
    q2: float
    y_dot: tuple[float, float, float]
    q_decomposition: float


@dataclass(frozen=True)
class TarverKinetics:
    """Tarver three-step, four-species reaction model.

    The exponential factor is exp(+E / (Rg T)), as the model is defined.
    """

    z1: float
    z2: float
    z3: float
    e1: float
    e2: float
    e3: float
    gas_constant: float

    def compute(self, temperature, y1, y2, y3, y4) -> ReactionRates:
        rg_t = self.gas_constant * temperature
        r1 = self.z1 * _exp(self.e1 / rg_t)
        r2 = self.z2 * _exp(self.e2 / rg_t)
        r3 = self.z3 * _exp(self.e3 / rg_t)
        y3_sq = y3**2.0
        y_dot = (
            -r1 * y1,
            r1 * y1 - r2 * y2,
            r2 * y2 - r3 * y3_sq,
            r3 * y3_sq,
        )
        return ReactionRates(rates=(r1, r2, r3), y_dot=y_dot)


@dataclass(frozen=True)
class RDXKinetics:
    """Three-species, two-stage RDX reaction model with heats of reaction."""

    z1: float
    z2: float
    e1: float
    e2: float
    gas_constant: float
    molecular_weight: float
    t_trans: float
    a1: float
    b1: float
    a2: float
    b2: float

    def _heats(self, temperature: float) -> tuple[float, float]:
        return (
            _reaction_heat(self.a1, self.b1, temperature, self.t_trans),
            _reaction_heat(self.a2, self.b2, temperature, self.t_trans),
        )

    def _assemble(self, temperature, y1, y2, r1, r2) -> ReactionRates:
        rg = self.gas_constant
        return ReactionRates(
            rates=(r1, r2),
            y_dot=(-r1 * y1, r1 * y1 - r2 * y2, r2 * y2),
            rate_derivatives=(
                _arrhenius_slope(r1, self.e1, rg, temperature),
                _arrhenius_slope(r2, self.e2, rg, temperature),
            ),
            heats=self._heats(temperature),
        )

    def compute(self, temperature, y1, y2, y3) -> ReactionRates:
        rg = self.gas_constant
        r1 = _arrhenius(self.z1, self.e1, rg, temperature)
        r2 = _arrhenius(self.z2, self.e2, rg, temperature)
        return self._assemble(temperature, y1, y2, r1, r2)


@dataclass(frozen=True)
class SwitchedRDXKinetics(RDXKinetics):
    """RDX model whose rates start once a switch value is reached, with a cap."""

    rate_limit: float = math.inf
    switch_react: float = 0.0

    def compute(self, temperature, y1, y2, y3, dirac_switch_react) -> ReactionRates:
        if dirac_switch_react >= self.switch_react:
            rg = self.gas_constant
            r1 = min(_arrhenius(self.z1, self.e1, rg, temperature), self.rate_limit)
            r2 = min(_arrhenius(self.z2, self.e2, rg, temperature), self.rate_limit)
        else:
            r1 = r2 = 0.0
        return self._assemble(temperature, y1, y2, r1, r2)


@dataclass(frozen=True)
class RDXDecomposition:
    """Switched RDX kinetics producing the heat released by decomposition.

    Reactions run once the reaction switch exceeds 1, after the predicted
    reaction heat has passed.
    """

    z1: float
    z2: float
    e1: float
    e2: float
    gas_constant: float
    t_trans: float
    a1: float
    b1: float
    a2: float
    b2: float
    switch_react: float
    rate_limit: float
    use_lump: bool
    dynamic_tau: bool
    thr_activation_rates: float

    _CUTOFF = 1.0

    def compute(self, temperature, y1, y2, dirac_switch_react, density, specific_heat) -> DecompositionRates:
        r1 = r2 = 0.0
        if dirac_switch_react > self._CUTOFF:
            rg = self.gas_constant
            r1 = min(_arrhenius(self.z1, self.e1, rg, temperature), self.rate_limit)
            r2 = min(_arrhenius(self.z2, self.e2, rg, temperature), self.rate_limit)

        q1 = _reaction_heat(self.a1, self.b1, temperature, self.t_trans)
        q2 = _reaction_heat(self.a2, self.b2, temperature, self.t_trans)

        y_dot = (-r1 * y1, r1 * y1 - r2 * y2, r2 * y2)
        if self.use_lump:
            scale = 1.0 / (density * specific_heat)
            y_dot = tuple(v * scale for v in y_dot)

        q_decomposition = density * (-q1 * y_dot[0] + q2 * y_dot[2])
        return DecompositionRates(
            r1=r1,
            r2=r2,
            q1=q1,
            q2=q2,
            y_dot=y_dot,
            q_decomposition=q_decomposition,
        )