# kemim

Point-wise material models for the heating and reaction of shock-loaded
energetic materials. Each model is a frozen dataclass built from its
parameters. Its `compute` method takes the field values at one material
point and returns a small result dataclass of plain floats.

The package has no dependencies outside the standard library.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Modules

### `kemim.kinetics`

Reaction kinetics with Arrhenius rates.

- `TarverKinetics.compute(temperature, y1, y2, y3, y4)` evaluates a
  three-step, four-species model. The third step is second order in
  `y3`, and the exponential factor is `exp(+E / (Rg T))`. The result is a
  `ReactionRates`.
- `RDXKinetics.compute(temperature, y1, y2, y3)` evaluates a two-step,
  three-species model. Its `ReactionRates` also carries the rates'
  temperature derivatives and the heats of reaction
  `Q = a + b * max(0, T - T_trans)`.
- `SwitchedRDXKinetics` is the same model, capped at `rate_limit`. Its
  rates are zero until `dirac_switch_react >= switch_react`.
- `RDXDecomposition.compute(...)` returns `DecompositionRates`. Its rates
  run once the reaction switch exceeds 1. The species rates are
  optionally divided by `density * specific_heat` (`use_lump`), and
  `q_decomposition` is the heat released by decomposition.

### `kemim.arrhenius`

`ArrheniusRateLimit.compute(mass_fraction_1, mass_fraction_2, temperature, computing_jacobian)`
computes a two-species Arrhenius mass fraction rate. Mass fractions are
clamped to `[0, 1]`. Above `temp_ref` the prefactor grows linearly by
`c_1`. The result is an `ArrheniusRate` holding the rate and its
derivatives with respect to temperature and both mass fractions. The
derivatives are computed only when `computing_jacobian` is true and are
zero otherwise.

### `kemim.yield_stress`

Johnson-Cook flow stress with thermal softening and strain-rate
dependence, returned as a `FlowStress`.

- `JohnsonCookYield` softens against a melting temperature given by
  `MeltingModel.LINDEMANN` or `MeltingModel.SIMON`. The homologous
  temperature is capped at 0.9. `melting_temperature(...)` is also
  available on its own.
- `LipitJohnsonCookYield` softens against a fixed transition temperature,
  with the homologous temperature capped at 0.95. `dH` and `d2H` are
  `None` unless `use_rate` is set.

### `kemim.misternet_heat`

Heat rates driven by predicted shock and reaction temperatures.

- `MisternetHeat` relaxes the temperature towards the predicted shock and
  reaction temperatures over fixed heating times. It only ever heats.
- `SurrogateMisternetHeat` computes the shock and reaction heat rates,
  either with fixed or with dynamic time scales. It also computes a
  surrogate chemistry source that converts the first species into final
  products where the predicted reaction temperature exceeds 1100.
- `sin_target(target, induction, time_tracker)` is a half-sine rate whose
  integral over `[0, induction]` is `target`.

### `kemim.shock_table`

`ShockTable` holds shock temperature, reaction temperature and reaction
time tables. All three are keyed by particle velocity in the first column
and have one column per density class. Build a table with
`ShockTable.from_rows(...)` or `ShockTable.from_files(...)`. The latter
reads the files with `read_csv`.

`bracket(up)` finds the first interval whose upper velocity exceeds
`up`. Velocities below the first row extrapolate the first interval.
Velocities at or beyond the last row raise `ValueError`.
`temperatures(up, index)` and `reaction_time(up, index)` interpolate
linearly with `interpolate`.

## Example

    from kemim.shock_table import ShockTable
    from kemim.kinetics import RDXKinetics

    table = ShockTable.from_rows(
        shock_rows=[[0.0, 300.0, 310.0], [1.0, 500.0, 520.0]],
        react_rows=[[0.0, 400.0, 410.0], [1.0, 900.0, 950.0]],
        time_rows=[[0.0, 1.0, 1.0], [1.0, 0.5, 0.4]],
    )
    shock_T, react_T = table.temperatures(0.5, 0)   # (400.0, 650.0)
    tau = table.reaction_time(0.5, 0)               # 0.75

    model = RDXKinetics(
        z1=1e10, z2=1e8, e1=2e5, e2=1.5e5, gas_constant=8.314,
        molecular_weight=222.0, t_trans=500.0,
        a1=1.0, b1=0.0, a2=2.0, b2=0.0,
    )
    result = model.compute(react_T, 1.0, 0.0, 0.0)
    print(result.rates, result.y_dot, result.heats)

## What the package does not do

The package evaluates models at single material points only. It has no
mesh, no time integrator and no solver. It has no command-line program.
It does not include equation-of-state pressure or stress models,
artificial viscosity stresses, or heating from elastic, plastic or
thermal-expansion work. Values such as pressures, strains and predicted
temperatures must be supplied by the caller.