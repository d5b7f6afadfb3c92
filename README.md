# evomin

Population-based global minimization of Python functions. Three
nature-inspired algorithms share one framework:

- **ABC**: artificial bee colony (`evomin.bee_colony.minimize_abc`)
- **BAT**: bat algorithm (`evomin.bat.minimize_bat`)
- **CS**: cuckoo search (`evomin.cuckoo.minimize_cs`)

All three work on bounded parameters, and a parameter can be restricted to
integers. They accept inequality constraints, which are handled by a penalty,
by a barrier, or by regenerating the point. Solutions that leave the search
space can be wrapped, reflected, clamped or discarded. A function can be
maximized instead of minimized. Runs with the same non-zero seed give the same
results.

## Installation

```
pip install .
```

The tests need `pytest`:

```
pip install ".[test]"
pytest
```

## Concepts

- `evomin.space.Parameter(name, min_val, max_val, integer=False)`: a named
  parameter with a range. Its `width()` is `max_val - min_val`. A parameter
  with an empty name is called `p<index>` in the search space.
- `evomin.space.Constraint(func, inequality="<=")`: the condition
  `func(x) <inequality> 0`, with `inequality` one of `"<"`, `"<="`, `">"`,
  `">="`. `is_violated(x)` tells whether a point breaks it.
- `evomin.space.OOBMethod`: how an out-of-bounds solution is treated:
  `PBC` (periodic), `RBC` (reflective; also reverses the velocity of a bat),
  `BAB` (back at the boundary) or `DIS` (discard and draw a new value).
- `evomin.config`: `ABCConfig`, `BATConfig` and `CSConfig` are dataclasses
  built on `Config`, which holds `max_iterations`, `population_size`,
  `max_iterations_same_cost` and `absolute_tol`.
  - `ABCConfig`: `employed_fraction` (default 0.5) and `n_scout` (default 1).
  - `BATConfig`: `initial_loudness`, `alpha`, `initial_pulse_rate`, `gamma`,
    `freq_min`, `freq_max`.
  - `CSConfig`: `discovery_rate` and `step_size`.
- `evomin.algorithm.MinimizerOptions`: `maximize`, `silent`,
  `save_pop_history`, `constrained_method` (`"PENALTY"`, `"BARRIER"`, or any
  other value to regenerate points that violate a constraint),
  `penalty_scale`, `start_penalty_param`, `max_penalty_param`,
  `constr_init_pop` (draw random points only where the constraints hold),
  `oob_solutions`, `seed`, `initial_population` and `generation_function` (a
  callable with no arguments that returns a point, used instead of uniform
  sampling).
- `evomin.algorithm.OptimizationResults`: the algorithm name, the number of
  iterations, the population size, `best_cost`, `best_parameters`,
  `parameter_names`, `parameter_range`, `cost_history`, `pop_history` (filled
  when `save_pop_history` is set) and `is_maximization`.

A run stops after `max_iterations` iterations, or earlier when the best cost
has not improved by more than `absolute_tol` (machine precision when it is
zero) for more than `max_iterations_same_cost` consecutive iterations. That
early stop applies only when `max_iterations` is larger than
`max_iterations_same_cost`.

## Example

```python
from evomin.algorithm import MinimizerOptions
from evomin.bee_colony import minimize_abc
from evomin.config import ABCConfig
from evomin.space import Parameter


def sphere(x):
    return sum(v * v for v in x)


parameters = [Parameter("x", -5.0, 5.0), Parameter("y", -5.0, 5.0)]
config = ABCConfig(max_iterations=200, population_size=40)
options = MinimizerOptions(seed=42, silent=True)

result = minimize_abc(sphere, parameters, config, [], options)
print(result.best_cost, result.best_parameters)
```

`minimize_bat` and `minimize_cs` take the same arguments, with a `BATConfig`
or a `CSConfig` as the configuration. The classes `ABCAlgorithm`,
`BATAlgorithm` and `CSAlgorithm` can also be built directly; their
`minimize()` runs the search and `results()` returns the last outcome.

With the bee colony, the population is split into food sources
(`employed_fraction` of it), scouts (`n_scout`) and onlookers (the rest); at
least one food source is required, and an initial population may not have
more rows than there are food sources. Cuckoo search needs at least two nests.

## Random numbers

`evomin.rng.Random` is a splitmix64 generator with `rand`, `rand_vector`,
`rand_uint`, `norm` and `next_uint64`. Created without a seed, it seeds itself
from the clock. In `MinimizerOptions`, a seed of zero leaves the clock-based
seeding in place.

`evomin.utility` holds small helpers: `are_equal`, `sgn`, `magnitude`,
`center_align`, `left_align`, `right_align` and `to_string_scientific`.

## What it does not do

The package is a library only: it has no command-line tool. It shows no
progress bar; unless `silent` is set, it prints a single line when it
generates the initial population at random. It does not plot or save results.