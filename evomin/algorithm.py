"""The iteration loop and bookkeeping shared by every minimiser."""

from __future__ import annotations

import abc
import copy
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from evomin.config import Config
from evomin.population import Population
from evomin.space import Constraint, OOBMethod, Parameter, SearchSpace
from evomin.utility import are_equal


@dataclass
class MinimizerOptions:
    """Options controlling a minimisation run.

    ``constrained_method`` is ``"PENALTY"``, ``"BARRIER"`` or anything
    else to regenerate points that violate a constraint.
    ``oob_solutions`` names how out-of-bounds solutions are treated
    (``"PBC"``, ``"RBC"``, ``"BAB"`` or ``"DIS"``). A ``seed`` of zero
    seeds the generators from the clock.
    """

    maximize: bool = False
    silent: bool = False
    save_pop_history: bool = False
    constrained_method: str = "PENALTY"
    penalty_scale: float = 10.0
    start_penalty_param: float = 2.0
    max_penalty_param: float = 1.0e10
    constr_init_pop: bool = True
    oob_solutions: str | OOBMethod = "RBC"
    seed: int = 0
    initial_population: Sequence[Sequence[float]] = field(default_factory=list)
    generation_function: Callable[[], Sequence[float]] | None = None


@dataclass
class OptimizationResults:
    """The outcome of a minimisation run."""

    algorithm: str
    iterations: int
    population_size: int
    obj_function: Callable[[list[float]], Any]
    constraints: list[Constraint]
    best_cost: float
    best_parameters: list[float]
    parameter_range: list[list[float]]
    pop_history: list[list[list[float]]]
    parameter_names: list[str]
    cost_history: list[float]
    is_maximization: bool


def parse_oob(name: str | OOBMethod, default: OOBMethod = OOBMethod.RBC) -> OOBMethod:
    """Return the out-of-bounds method called ``name``, or ``default`` if unknown."""
    if isinstance(name, OOBMethod):
        return name
    try:
        return OOBMethod(name)
    except ValueError:
        return default


class Algorithm(abc.ABC):
    """A population-based minimiser.

    Subclasses build their population and perform one iteration on it;
    this class runs the loop, records the cost and population history
    and stops early when the cost stalls.
    """

    name: str = ""

    def __init__(
        self,
        obj_function: Callable[[list[float]], Any],
        config: Config,
        parameters: Iterable[Parameter],
        constraints: Iterable[Constraint] | None = None,
        options: MinimizerOptions | None = None,
    ) -> None:
        self.obj_function = obj_function
        self.config = config
        self.constraints = list(constraints or [])
        self.options = options if options is not None else MinimizerOptions()

        params = list(parameters)
        self.search_space = SearchSpace(len(params))
        self.search_space.constraints = self.constraints
        for i, par in enumerate(params):
            self.search_space.set_parameter(
                i, par.name, par.min_val, par.max_val, par.integer
            )
        self.parameter_range = [[par.min_val, par.max_val] for par in params]
        self.parameter_names = [par.name for par in params]

        self.search_space.constrained_init = self.options.constr_init_pop
        if self.options.generation_function is not None:
            self.search_space.set_generator(self.options.generation_function)
        self.search_space.set_seed(self.options.seed or 0)
        self.oob_method = parse_oob(self.options.oob_solutions, OOBMethod.RBC)

        self.iterations = 0
        self.cost_history: list[float] = []
        self.population_history: list[list[list[float]]] = []
        self._population: Any = None

    @abc.abstractmethod
    def _create_population(self) -> Population:
        """Return a new, unconfigured population for this algorithm."""

    @abc.abstractmethod
    def _iterate(self, population: Any, iteration: int) -> None:
        """Perform one iteration of the algorithm on ``population``."""

    def _after_evaluation(self, population: Any) -> None:
        """Hook run after each full evaluation of the population."""

    def _configure(self, population: Population) -> None:
        opts = self.options
        population.search_space = self.search_space
        population.constraints = self.constraints
        population.constrained_method = opts.constrained_method
        population.penalty_scaling = opts.penalty_scale
        population.penalty_coeff = opts.start_penalty_param
        population.max_penalty_coeff = opts.max_penalty_param
        population.oob_method = self.oob_method
        population.maximization = opts.maximize
        population.initial_population = [
            [float(v) for v in row] for row in opts.initial_population
        ]
        population.silent = opts.silent
        population.set_seed(opts.seed or 0)

    def _best_cost(self, population: Any) -> float:
        cost = population.best_solution.cost
        return -cost if self.options.maximize else cost

    def _record_positions(self, population: Any) -> None:
        if self.options.save_pop_history:
            self.population_history.append(copy.deepcopy(population.positions()))

    def minimize(self) -> OptimizationResults:
        """Run the minimisation and return its results."""
        n_iter = self.config.max_iterations
        if n_iter < 1:
            raise ValueError("max_iterations must be at least 1")
        tolerance = self.config.absolute_tol
        max_same = self.config.max_iterations_same_cost

        population = self._create_population()
        self._configure(population)
        population.initialize()
        population.evaluate_all()
        self._after_evaluation(population)

        self.cost_history = [self._best_cost(population)]
        self.population_history = []
        self._record_positions(population)

        check_same_cost = n_iter > max_same
        same_cost_count = 0
        self.iterations = n_iter
        for iteration in range(1, n_iter):
            population.scale_penalty_coeff()
            self._iterate(population, iteration)

            self.cost_history.append(self._best_cost(population))
            self._record_positions(population)

            if check_same_cost:
                previous, current = self.cost_history[-2], self.cost_history[-1]
                if tolerance == 0 and are_equal(previous, current, 2):
                    same_cost_count += 1
                elif tolerance != 0 and previous - current < tolerance:
                    same_cost_count += 1
                else:
                    same_cost_count = 0
                if same_cost_count > max_same:
                    self.iterations = iteration
                    break

        self._population = population
        return self.results()

    def results(self) -> OptimizationResults:
        """Return the results of the last run."""
        if self._population is None:
            raise RuntimeError("minimize() has not been run")
        population = self._population
        return OptimizationResults(
            algorithm=self.name,
            iterations=self.iterations,
            population_size=len(population),
            obj_function=self.obj_function,
            constraints=list(self.constraints),
            best_cost=self._best_cost(population),
            best_parameters=list(population.best_solution.parameters),
            parameter_range=[list(r) for r in self.parameter_range],
            pop_history=self.population_history,
            parameter_names=list(self.parameter_names),
            cost_history=list(self.cost_history),
            is_maximization=self.options.maximize,
        )