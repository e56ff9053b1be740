"""Arrhenius mass fraction rate for a two-species reaction with a rate limit."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _exp(x: float) -> float:
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def _divide(numerator: float, denominator: float) -> float:
    """Floating-point division that yields inf or nan instead of raising."""
    if denominator == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def _clamp_fraction(value: float) -> float:
    return min(1.0, max(value, 0.0))


@dataclass(frozen=True)
class ArrheniusRate:
    """Mass fraction rate and its derivatives at one material point."""

    rate: float
    d_rate_d_temperature: float
    d_rate_d_mass_fraction_1: float
    d_rate_d_mass_fraction_2: float


@dataclass(frozen=True)
class ArrheniusRateLimit:
    """Arrhenius rate for two species.

    Above ``temp_ref`` the prefactor grows linearly with temperature by
    ``c_1``. Species enter the rate raised to ``nu_1`` and ``nu_2`` when
    those exponents are positive. Derivatives are only evaluated while a
    Jacobian is being computed; otherwise they are zero.
    """

    exponential_prefactor: float = 0.0
    c_1: float = 0.0
    exponential_coefficient: float = 0.0
    exponential_factor: float = 0.0
    rate_limit: float = 1.0e9
    nu_1: float = 0.0
    nu_2: float = 0.0
    temp_ref: float = 6000.0

    def compute(self, mass_fraction_1, mass_fraction_2, temperature, computing_jacobian) -> ArrheniusRate:
        mf1 = _clamp_fraction(mass_fraction_1)
        mf2 = _clamp_fraction(mass_fraction_2)

        exp_rate = self.exponential_prefactor
        if temperature >= self.temp_ref:
            exp_rate += self.c_1 * (temperature - self.temp_ref)
        exp_rate *= _exp(self.exponential_coefficient - self.exponential_factor / temperature)

        limit = 1000.0 * exp_rate
        linear_prefactor = self.exponential_prefactor + self.c_1 * (temperature - self.temp_ref)
        if linear_prefactor >= 0.0:
            exp_rate = min(exp_rate, limit)
        else:
            exp_rate = max(exp_rate, limit)

        rate = exp_rate
        if self.nu_1 > 0.0:
            rate *= mf1**self.nu_1
        if self.nu_2 > 0.0:
            rate *= mf2**self.nu_2

        d_temperature = 0.0
        d_mf1 = 0.0
        d_mf2 = 0.0
        if computing_jacobian:
            if exp_rate < self.rate_limit:
                d_temperature = rate * (self.exponential_factor / (temperature * temperature))
                if temperature >= self.temp_ref:
                    d_temperature += _divide(self.c_1 * rate, linear_prefactor)
            if mf1 > 1.0e-3 and self.nu_1 > 0.0:
                d_mf1 = rate * self.nu_1 / mf1
            if mf2 > 1.0e-3 and self.nu_2 > 0.0:
                d_mf2 = rate * self.nu_2 / mf2

        return ArrheniusRate(
            rate=rate,
            d_rate_d_temperature=d_temperature,
            d_rate_d_mass_fraction_1=d_mf1,
            d_rate_d_mass_fraction_2=d_mf2,
        )