"""The cuckoo search (CS) minimiser."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from typing import Any

from evomin.algorithm import Algorithm, MinimizerOptions, OptimizationResults
from evomin.config import CSConfig
from evomin.individual import Individual
from evomin.population import Population
from evomin.space import Constraint, Parameter

# Lévy flight exponent and the matching Mantegna sigma.
_BETA = 1.5
_SIGMA = 0.6966


class Nest(Individual):
    """A nest holding one egg, that is one candidate solution."""


def _round_half_away(value: float) -> int:
    return int(math.floor(abs(value) + 0.5)) * (1 if value >= 0 else -1)


class CSPopulation(Population):
    """The nests searched by the cuckoos.

    Between iterations the nests are kept sorted by cost, so the first
    nest is the best one in the population.
    """

    def __init__(
        self, obj_function: Callable[[list[float]], Any], config: CSConfig
    ) -> None:
        super().__init__(obj_function)
        self.config = config
        self.individuals: list[Nest] = []
        self.best_solution: Nest | None = None

    def initialize(self) -> None:
        """Place the nests, from the initial population or at random."""
        pop_size = self.config.population_size
        if pop_size < 1:
            raise ValueError("population_size must be at least 1")
        d = len(self.search_space)
        self.individuals = [Nest(d) for _ in range(pop_size)]

        if self.initial_population:
            if len(self.initial_population) > pop_size:
                raise ValueError(
                    f"initial population has {len(self.initial_population)} rows "
                    f"but there are {pop_size} nests"
                )
            for nest, row in zip(self.individuals, self.initial_population):
                nest.position = row
        else:
            if not self.silent:
                print("Generating the initial population...")
            for nest in self.individuals:
                nest.position = self.search_space.random_point()

        # Placeholder until the population is evaluated.
        self.best_solution = self.individuals[0].copy()

    def positions(self) -> list[list[float]]:
        """Return the position of every nest."""
        return [list(nest.position) for nest in self.individuals]

    def __len__(self) -> int:
        return len(self.individuals)

    def __getitem__(self, index: int) -> Nest:
        return self.individuals[index]

    def evaluate_all(self) -> None:
        """Evaluate the cost of every nest."""
        for nest in self.individuals:
            self.evaluate(nest)

    def evaluate(self, nest: Nest) -> None:
        """Evaluate ``nest`` and keep it as the best if it is feasible and better."""
        value = self.evaluate_cost(nest.position)
        nest.cost = value
        if (
            self.best_solution is not None
            and value < self.best_solution.cost
            and not self.violates_constraints(nest.position)
        ):
            self.best_solution = nest.copy()

    def sort(self) -> None:
        """Order the nests by cost, lowest first."""
        self.individuals.sort()

    def _levy_step(self) -> float:
        numerator = self.config.step_size * self.random.norm(0.0, _SIGMA)
        denominator = abs(self.random.norm()) ** (1.0 / _BETA)
        if denominator == 0.0:
            return math.copysign(math.inf, numerator) if numerator else math.nan
        return numerator / denominator

    def generate_cuckoo_egg(self) -> None:
        """Lay an egg by a Lévy flight from the best nest, then abandon the worst.

        The egg replaces a random nest other than the first if it is
        better; afterwards a ``discovery_rate`` fraction of the nests,
        taken from the end of the population, move to random positions.
        """
        size = len(self.individuals)
        if size < 2:
            raise ValueError("cuckoo search needs at least two nests")

        d = len(self.search_space)
        leader = self.individuals[0]
        egg = Nest(d)
        for j in range(d):
            egg[j] = leader[j] + self._levy_step()

        self.check_boundary(egg)
        self.evaluate(egg)

        k = self.random.rand_uint(1, size)
        if egg.cost < self.individuals[k].cost:
            self.individuals[k] = egg

        to_replace = min(_round_half_away(self.config.discovery_rate * size), size)
        for nest in self.individuals[size - to_replace:][::-1]:
            nest.position = self.search_space.random_point()
            self.evaluate(nest)


class CSAlgorithm(Algorithm):
    """Cuckoo search minimisation."""

    name = "CS"

    def _create_population(self) -> CSPopulation:
        return CSPopulation(self.obj_function, self.config)

    def _after_evaluation(self, population: CSPopulation) -> None:
        population.sort()

    def _iterate(self, population: CSPopulation, iteration: int) -> None:
        population.generate_cuckoo_egg()
        population.sort()


def minimize_cs(
    obj_function: Callable[[list[float]], Any],
    parameters: Iterable[Parameter],
    config: CSConfig,
    constraints: Iterable[Constraint] | None = None,
    options: MinimizerOptions | None = None,
) -> OptimizationResults:
    """Minimise ``obj_function`` over ``parameters`` with cuckoo search."""
    algorithm = CSAlgorithm(obj_function, config, parameters, constraints, options)
    return algorithm.minimize()