"""The artificial bee colony (ABC) minimiser."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from evomin.algorithm import Algorithm, MinimizerOptions, OptimizationResults
from evomin.config import ABCConfig
from evomin.individual import Individual
from evomin.population import Population
from evomin.space import Constraint, Parameter


class Bee(Individual):
    """A food source in the colony, exploited by one employed bee."""

    def fitness(self) -> float:
        """Return the nectar amount: higher for lower cost, always positive."""
        if self.cost >= 0:
            return 1.0 / (1.0 + self.cost)
        return 1.0 + abs(self.cost)


class ABCPopulation(Population):
    """The food sources of a bee colony and the work of its bees."""

    def __init__(
        self, obj_function: Callable[[list[float]], Any], config: ABCConfig
    ) -> None:
        super().__init__(obj_function)
        self.config = config
        self.individuals: list[Bee] = []
        self.probabilities: list[float] = []
        self.trials: list[int] = []
        self.onlookers = 0
        self.scouts = 0
        self.scout_limit = 0
        self.best_solution: Bee | None = None

    def initialize(self) -> None:
        """Place the food sources, from the initial population or at random."""
        pop_size = self.config.population_size
        d = len(self.search_space)

        n_sources = int(self.config.employed_fraction * pop_size)
        if n_sources < 1:
            raise ValueError("the colony must have at least one employed bee")
        self.scouts = self.config.n_scout
        self.onlookers = pop_size - n_sources - self.scouts
        if self.onlookers < 0:
            raise ValueError(
                "employed and scout bees outnumber the population size"
            )

        self.individuals = [Bee(d) for _ in range(n_sources)]
        self.probabilities = [0.0] * n_sources
        self.trials = [0] * n_sources

        if self.initial_population:
            if len(self.initial_population) > n_sources:
                raise ValueError(
                    f"initial population has {len(self.initial_population)} rows "
                    f"but the colony has {n_sources} food sources"
                )
            for bee, row in zip(self.individuals, self.initial_population):
                bee.position = row
        else:
            if not self.silent:
                print("Generating the initial population...")
            for bee in self.individuals:
                bee.position = self.search_space.random_point()

        # Placeholder until the population is evaluated.
        self.best_solution = self.individuals[0].copy()
        self.scout_limit = int(0.5 * pop_size * d)

    def positions(self) -> list[list[float]]:
        """Return the position of every food source."""
        return [list(bee.position) for bee in self.individuals]

    def __len__(self) -> int:
        return len(self.individuals)

    def __getitem__(self, index: int) -> Bee:
        return self.individuals[index]

    def evaluate_all(self) -> None:
        """Evaluate the cost of every food source."""
        for bee in self.individuals:
            self.evaluate(bee)

    def evaluate(self, bee: Bee) -> None:
        """Evaluate ``bee`` and keep it as the best if it is feasible and better."""
        value = self.evaluate_cost(bee.position)
        bee.cost = value
        if (
            self.best_solution is not None
            and value < self.best_solution.cost
            and not self.violates_constraints(bee.position)
        ):
            self.best_solution = bee.copy()

    def _other_index(self, i: int) -> int:
        size = len(self.individuals)
        if size == 1:
            # No other source exists; the neighbour is the source itself.
            return 0
        while True:
            j = self.random.rand_uint(0, size)
            if j != i:
                return j

    def _neighbour(self, bee: Bee, i: int) -> Bee:
        candidate = bee.copy()
        k = self._other_index(i)
        j = self.random.rand_uint(0, len(self.search_space))
        candidate[j] += self.random.rand(-1.0, 1.0) * (
            candidate[j] - self.individuals[k][j]
        )
        self.check_boundary(candidate)
        self.evaluate(candidate)
        return candidate

    def _greedy_replace(self, index: int, candidate: Bee) -> None:
        if candidate.fitness() > self.individuals[index].fitness():
            self.individuals[index] = candidate
            self.trials[index] = 0
        else:
            self.trials[index] += 1

    def employed_bees_phase(self) -> None:
        """Let every employed bee search the neighbourhood of its source."""
        for i, bee in enumerate(self.individuals):
            self._greedy_replace(i, self._neighbour(bee, i))

    def _compute_probabilities(self) -> None:
        fitness = [bee.fitness() for bee in self.individuals]
        total = sum(fitness)
        self.probabilities = [f / total for f in fitness]

    def _select_source(self) -> int:
        r = self.random.rand()
        cumulative = 0.0
        for index, p in enumerate(self.probabilities):
            cumulative += p
            if r < cumulative:
                return index
        return len(self.probabilities) - 1

    def onlooker_bees_phase(self) -> None:
        """Let onlookers exploit sources by fitness, then send out the scouts.

        A source not improved for more than the scout limit is abandoned
        for a random one. If no source was abandoned, each scout moves a
        random source to a random position instead.
        """
        self._compute_probabilities()

        discarded = False
        for k in range(self.onlookers):
            sel = self._select_source()
            self._greedy_replace(sel, self._neighbour(self.individuals[sel], k))

            if self.trials[sel] > self.scout_limit:
                bee = self.individuals[sel]
                bee.position = self.search_space.random_point()
                self.evaluate(bee)
                self.trials[sel] = 0
                discarded = True

        if discarded:
            return

        for _ in range(self.scouts):
            s = self.random.rand_uint(0, len(self.individuals))
            bee = self.individuals[s]
            bee.position = self.search_space.random_point()
            self.evaluate(bee)


class ABCAlgorithm(Algorithm):
    """Artificial bee colony minimisation."""

    name = "ABC"

    def _create_population(self) -> ABCPopulation:
        return ABCPopulation(self.obj_function, self.config)

    def _iterate(self, population: ABCPopulation, iteration: int) -> None:
        population.employed_bees_phase()
        population.onlooker_bees_phase()


def minimize_abc(
    obj_function: Callable[[list[float]], Any],
    parameters: Iterable[Parameter],
    config: ABCConfig,
    constraints: Iterable[Constraint] | None = None,
    options: MinimizerOptions | None = None,
) -> OptimizationResults:
    """Minimise ``obj_function`` over ``parameters`` with a bee colony."""
    algorithm = ABCAlgorithm(obj_function, config, parameters, constraints, options)
    return algorithm.minimize()