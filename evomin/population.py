"""The shared machinery of a population of candidate solutions."""

from __future__ import annotations

import math
import sys
from collections.abc import Callable, Sequence
from typing import Any

from evomin.individual import Individual
from evomin.rng import Random
from evomin.space import Constraint, OOBMethod, SearchSpace, violates_any


def _scalar(result: Any) -> float:
    """Return the first value of what an objective or constraint returned."""
    try:
        return float(result)
    except TypeError:
        return float(result[0])


def _round_half_away(value: float) -> float:
    if value >= 0:
        return float(math.floor(value + 0.5))
    return -float(math.floor(-value + 0.5))


class Population:
    """State and cost evaluation common to every algorithm's population.

    Concrete populations hold their individuals, keep ``best_solution``
    up to date, and provide ``initialize``, ``evaluate_all``,
    ``positions`` and ``__len__``.
    """

    def __init__(self, obj_function: Callable[[list[float]], Any]) -> None:
        self.obj_function = obj_function
        self.search_space = SearchSpace()
        self.constraints: list[Constraint] = []
        self.oob_method = OOBMethod.RBC
        self.maximization = False
        self.initial_population: list[list[float]] = []
        self.penalty_coeff = 2.0
        self.penalty_scaling = 10.0
        self.max_penalty_coeff = 1.0e10
        self.constrained_method = ""
        self.silent = False
        self.random = Random()
        self.best_solution: Individual | None = None

    def set_seed(self, seed: int) -> None:
        """Reseed the generator; a seed of zero keeps the current one."""
        if seed > 0:
            self.random = Random(seed)

    def scale_penalty_coeff(self) -> None:
        """Grow the penalty coefficient, without exceeding its maximum."""
        self.penalty_coeff = min(
            self.max_penalty_coeff, self.penalty_coeff * self.penalty_scaling
        )

    def _objective(self, x: Sequence[float]) -> float:
        return _scalar(self.obj_function(list(x)))

    def violates_constraints(self, x: Sequence[float]) -> bool:
        """Return whether ``x`` violates any of the constraints."""
        return violates_any(self.constraints, x)

    def penalty_cost(self, x: Sequence[float]) -> float:
        """Return the objective plus a penalty for every violated constraint."""
        penalty = sum(
            abs(_scalar(c.func(list(x)))) for c in self.constraints if c.is_violated(x)
        )
        if self.maximization:
            penalty = -penalty
        return self._objective(x) + self.penalty_coeff * penalty

    def barrier_cost(self, x: Sequence[float]) -> float:
        """Return the objective, or the largest float if a constraint is violated."""
        if self.violates_constraints(x):
            return sys.float_info.max
        return self._objective(x)

    def evaluate_cost(self, x: list[float]) -> float:
        """Return the cost of ``x``, to be minimised.

        Integer parameters of ``x`` are rounded in place. Without a
        penalty or barrier method, a point that violates a constraint
        is replaced in place by a new random point. For a maximisation
        the sign of the objective is flipped.
        """
        for j, par in enumerate(self.search_space.parameters[: len(x)]):
            if par.integer:
                value = _round_half_away(x[j])
                if value < par.min_val:
                    value += 1
                elif value > par.max_val:
                    value -= 1
                x[j] = value

        if self.constrained_method == "PENALTY":
            value = self.penalty_cost(x)
        elif self.constrained_method == "BARRIER":
            value = self.barrier_cost(x)
        else:
            if self.violates_constraints(x):
                x[:] = self.search_space.random_point()
            value = self._objective(x)

        return -value if self.maximization else value

    def check_boundary(self, individual: Individual) -> None:
        """Bring an out-of-bounds individual back into the search space."""
        space = self.search_space
        if self.constraints and self.oob_method is OOBMethod.DIS:
            individual.position = space.random_point()
            return

        for j, par in enumerate(space.parameters):
            lo, hi = par.min_val, par.max_val
            value = individual[j]
            if self.oob_method is OOBMethod.PBC:
                if value < lo:
                    value = hi - abs(value - lo)
                if value > hi:
                    value = lo + abs(hi - value)
                if value < lo or value > hi:
                    value = space.random_component(j)
            elif self.oob_method is OOBMethod.BAB:
                if value < lo:
                    value = lo
                if value > hi:
                    value = hi
            elif self.oob_method is OOBMethod.DIS:
                if value < lo or value > hi:
                    value = self.random.rand(lo, hi)
            elif self.oob_method is OOBMethod.RBC:
                if value < lo:
                    value = 2 * lo - value
                if value > hi:
                    value = 2 * hi - value
                if value < lo or value > hi:
                    value = space.random_component(j)
                if individual.has_velocity:
                    individual.set_velocity(j, -individual.get_velocity(j))
            individual[j] = value