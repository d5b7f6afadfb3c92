"""The bat algorithm (BAT) minimiser."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from typing import Any

from evomin.algorithm import Algorithm, MinimizerOptions, OptimizationResults
from evomin.config import BATConfig
from evomin.individual import Individual
from evomin.population import Population
from evomin.space import Constraint, Parameter


class Bat(Individual):
    """A bat: a position with a velocity and a pulse frequency."""

    has_velocity = True

    def __init__(self, dimension: int = 0) -> None:
        super().__init__(dimension)
        self.velocity: list[float] = [0.0] * dimension
        self.frequency: float = 0.0

    def get_velocity(self, index: int) -> float:
        """Return one component of the velocity."""
        return self.velocity[index]

    def set_velocity(self, index: int, value: float) -> None:
        """Set one component of the velocity."""
        self.velocity[index] = value


class BATPopulation(Population):
    """A swarm of bats flying towards the best solution found so far."""

    def __init__(
        self, obj_function: Callable[[list[float]], Any], config: BATConfig
    ) -> None:
        super().__init__(obj_function)
        self.config = config
        self.individuals: list[Bat] = []
        self.loudness = 0.0
        self.pulse_rate = 0.0
        self.best_solution: Bat | None = None

    def initialize(self) -> None:
        """Place the bats, from the initial population or at random."""
        cfg = self.config
        pop_size = cfg.population_size
        d = len(self.search_space)
        self.loudness = cfg.initial_loudness
        self.pulse_rate = cfg.initial_pulse_rate * (1.0 - math.exp(-cfg.gamma))
        if pop_size < 1:
            raise ValueError("population_size must be at least 1")
        self.individuals = [Bat(d) for _ in range(pop_size)]

        if self.initial_population:
            if len(self.initial_population) > pop_size:
                raise ValueError(
                    f"initial population has {len(self.initial_population)} rows "
                    f"but the swarm has {pop_size} bats"
                )
            for bat, row in zip(self.individuals, self.initial_population):
                bat.position = row
        else:
            if not self.silent:
                print("Generating the initial population...")
            for bat in self.individuals:
                bat.frequency = self.random.rand(cfg.freq_min, cfg.freq_max)
                bat.position = self.search_space.random_point()

        # Placeholder until the population is evaluated.
        self.best_solution = self.individuals[0].copy()

    def positions(self) -> list[list[float]]:
        """Return the position of every bat."""
        return [list(bat.position) for bat in self.individuals]

    def __len__(self) -> int:
        return len(self.individuals)

    def __getitem__(self, index: int) -> Bat:
        return self.individuals[index]

    def evaluate_all(self) -> None:
        """Evaluate the cost of every bat."""
        for bat in self.individuals:
            self.evaluate(bat)

    def evaluate(self, bat: Bat) -> None:
        """Evaluate ``bat`` and keep it as the best if it is feasible and better."""
        value = self.evaluate_cost(bat.position)
        bat.cost = value
        if (
            self.best_solution is not None
            and value < self.best_solution.cost
            and not self.violates_constraints(bat.position)
        ):
            self.best_solution = bat.copy()

    def update_loudness_and_pulse(self, iteration: int) -> None:
        """Decay the loudness and raise the pulse rate for ``iteration``."""
        cfg = self.config
        self.loudness = cfg.alpha * self.loudness
        self.pulse_rate = cfg.initial_pulse_rate * (
            1.0 - math.exp(-cfg.gamma * (iteration + 1))
        )

    def move_bats(self) -> None:
        """Fly every bat once and keep the moves that are accepted.

        A single trial bat carries its position and velocity from one
        move to the next; a move replaces bat ``i`` only when it is
        accepted by loudness and improves on that bat's cost.
        """
        cfg = self.config
        best = self.best_solution
        d = len(self.search_space)
        trial = Bat(d)

        for i in range(len(self.individuals)):
            update_pulse = self.random.rand() < self.pulse_rate
            update_loud = self.random.rand() < self.loudness

            trial.frequency = self.random.rand(cfg.freq_min, cfg.freq_max)

            for j in range(d):
                v = trial.get_velocity(j) + (trial[j] - best[j]) * trial.frequency
                trial.set_velocity(j, v)
                trial[j] = trial[j] + v
                if update_pulse:
                    trial[j] = best[j] + self.random.rand(-1.0, 1.0) * self.loudness

            self.check_boundary(trial)
            self.evaluate(trial)
            # The best solution may have just been replaced by the trial.
            best = self.best_solution

            if update_loud and trial.cost < self.individuals[i].cost:
                self.individuals[i] = trial.copy()


class BATAlgorithm(Algorithm):
    """Bat algorithm minimisation."""

    name = "BAT"

    def _create_population(self) -> BATPopulation:
        return BATPopulation(self.obj_function, self.config)

    def _iterate(self, population: BATPopulation, iteration: int) -> None:
        population.update_loudness_and_pulse(iteration)
        population.move_bats()


def minimize_bat(
    obj_function: Callable[[list[float]], Any],
    parameters: Iterable[Parameter],
    config: BATConfig,
    constraints: Iterable[Constraint] | None = None,
    options: MinimizerOptions | None = None,
) -> OptimizationResults:
    """Minimise ``obj_function`` over ``parameters`` with a swarm of bats."""
    algorithm = BATAlgorithm(obj_function, config, parameters, constraints, options)
    return algorithm.minimize()