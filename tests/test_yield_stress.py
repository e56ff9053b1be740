import math

import pytest

from kemim.yield_stress import JohnsonCookYield, LipitJohnsonCookYield, MeltingModel


def _jc(**overrides):
    params = dict(
        ep_ref=1.0,
        t0=300.0,
        k=1.0,
        a=2.0,
        b=3.0,
        use_temp=False,
        a_melt=1.5,
        tm0=550.0,
        n_h=0.5,
        melting_model=MeltingModel.LINDEMANN,
        use_rate=False,
    )
    params.update(overrides)
    return JohnsonCookYield(**params)


def _lipit(**overrides):
    params = dict(
        ep_ref=1.0,
        transtemp=500.0,
        t0=300.0,
        k=1.0,
        a=2.0,
        b=3.0,
        use_temp=False,
        n_h=0.5,
        use_rate=False,
    )
    params.update(overrides)
    return LipitJohnsonCookYield(**params)


def test_plain_hardening_law():
    result = _jc().compute(1.0, 1.0, 300.0, 0.1, 1.0, 0.0)
    assert result.flow_stress == pytest.approx(5.0)
    assert result.ratedep == 1.0
    assert result.ep_rate == 0.0


def test_plastic_strain_is_floored():
    model = _jc()
    zero = model.compute(0.0, 0.0, 300.0, 0.1, 1.0, 0.0)
    tiny = model.compute(1e-5, 0.0, 300.0, 0.1, 1.0, 0.0)
    assert zero.flow_stress == pytest.approx(tiny.flow_stress)


@pytest.mark.parametrize("model", [MeltingModel.LINDEMANN, MeltingModel.SIMON])
def test_melting_temperature_at_reference_state(model):
    jc = _jc(melting_model=model)
    assert jc.melting_temperature(1.0, 0.0) == pytest.approx(550.0)


def test_simon_melting_rises_with_pressure():
    jc = _jc(melting_model=MeltingModel.SIMON)
    assert jc.melting_temperature(1.0, -2.0) > jc.melting_temperature(1.0, 0.0)
    assert jc.melting_temperature(1.0, -2.0) == pytest.approx(jc.melting_temperature(1.0, 2.0))


def test_numeric_melting_model_is_accepted():
    assert _jc(melting_model=0).melting_model is MeltingModel.SIMON


def test_unknown_melting_model_raises():
    with pytest.raises(ValueError):
        _jc(melting_model=2)


def test_theta_is_capped():
    result = _jc(use_temp=True).compute(0.5, 0.5, 5000.0, 0.1, 1.0, 0.0)
    assert result.theta == pytest.approx(0.9)


def test_thermal_softening_scales_flow_stress_and_derivatives():
    cold = _jc().compute(0.5, 0.5, 400.0, 0.1, 1.0, 0.0)
    hot = _jc(use_temp=True).compute(0.5, 0.5, 400.0, 0.1, 1.0, 0.0)
    factor = 1.0 - hot.theta
    assert hot.flow_stress == pytest.approx(cold.flow_stress * factor)
    assert hot.dH == pytest.approx(cold.dH * factor)
    assert hot.d2H == pytest.approx(cold.d2H * factor)


def test_hardening_derivative_matches_finite_difference():
    model = _jc()
    h = 1e-6
    up = model.compute(0.5 + h, 0.5 + h, 300.0, 0.1, 1.0, 0.0).flow_stress
    down = model.compute(0.5 - h, 0.5 - h, 300.0, 0.1, 1.0, 0.0).flow_stress
    result = model.compute(0.5, 0.5, 300.0, 0.1, 1.0, 0.0)
    assert result.dH == pytest.approx((up - down) / (2 * h), rel=1e-6)


def test_rate_dependence_ignores_unloading():
    result = _jc(use_rate=True).compute(0.1, 0.5, 300.0, 0.1, 1.0, 0.0)
    assert result.ratedep == pytest.approx(1.0)
    assert result.ep_rate < 0.0


def test_rate_dependence_scales_outputs():
    base = _jc().compute(0.6, 0.5, 300.0, 0.1, 1.0, 0.0)
    rated = _jc(use_rate=True).compute(0.6, 0.5, 300.0, 0.1, 1.0, 0.0)
    assert rated.ratedep > 1.0
    assert rated.flow_stress == pytest.approx(base.flow_stress * rated.ratedep)
    assert rated.dH == pytest.approx(base.dH * rated.ratedep)


def test_lipit_without_rate_has_no_derivatives():
    result = _lipit().compute(1.0, 1.0, 300.0, 0.1)
    assert result.flow_stress == pytest.approx(5.0)
    assert result.dH is None
    assert result.d2H is None


def test_lipit_theta_cap():
    result = _lipit(use_temp=True).compute(0.5, 0.5, 10000.0, 0.1)
    assert result.theta == pytest.approx(0.95)


def test_lipit_rate_term():
    result = _lipit(use_rate=True).compute(math.e - 1.0, 0.0, 300.0, 1.0)
    assert result.ratedep == pytest.approx(2.0)
    base = _lipit().compute(math.e - 1.0, 0.0, 300.0, 1.0)
    assert result.flow_stress == pytest.approx(base.flow_stress * 2.0)
    assert result.dH is not None and result.dH > 0.0